"""
Packed Word Codec: фиксированное 256-битное представление значения

Раскладка слова (big-endian):

    | exponent: 32 bit two's-complement | mantissa: 224 bit two's-complement |

Текстовая форма: "0x" + 64 hex-цифры (8 цифр exponent + 56 цифр mantissa).
Байтовая форма: 32 байта big-endian.

    3.14  → (314, -2) → 0xfffffffe0000000000000000000000000000000000000000000000000000013a
    5     → (5, 0)    → 0x0000000000000000000000000000000000000000000000000000000000000005
"""

import re
from typing import Final

from decfloat.core.errors import MalformedEncodingError
from decfloat.core.math.scaling import (
    EXPONENT_BITS,
    MANTISSA_BITS,
    WORD_BITS,
    Packed,
    check_packable,
)

# =============================================================================
# ПАРАМЕТРЫ КОДИРОВАНИЯ
# =============================================================================

HEX_PREFIX: Final[str] = "0x"
WORD_BYTES: Final[int] = WORD_BITS // 8
WORD_HEX_DIGITS: Final[int] = WORD_BITS // 4
EXPONENT_HEX_DIGITS: Final[int] = EXPONENT_BITS // 4
MANTISSA_HEX_DIGITS: Final[int] = MANTISSA_BITS // 4

_MANTISSA_MASK: Final[int] = (1 << MANTISSA_BITS) - 1
_EXPONENT_MASK: Final[int] = (1 << EXPONENT_BITS) - 1

_HEX_BODY = re.compile(r"[0-9a-fA-F]+")


# =============================================================================
# PACK / UNPACK
# =============================================================================


def pack(mantissa: int, exponent: int) -> Packed:
    """
    Проверка границ и канонизация пары (mantissa, exponent).

    Raises:
        OutOfRangeError: Если поле вне границ
    """
    check_packable(mantissa, exponent)
    if mantissa == 0:
        return 0, 0
    return mantissa, exponent


def _to_signed(field: int, bits: int) -> int:
    """Интерпретация беззнакового поля как two's-complement"""
    if field >> (bits - 1):
        return field - (1 << bits)
    return field


def encode_word(mantissa: int, exponent: int) -> int:
    """
    Упаковка пары в 256-битное беззнаковое слово.

    Raises:
        OutOfRangeError: Если поле вне границ
    """
    mantissa, exponent = pack(mantissa, exponent)
    return ((exponent & _EXPONENT_MASK) << MANTISSA_BITS) | (mantissa & _MANTISSA_MASK)


def decode_word(word: int) -> Packed:
    """
    Распаковка 256-битного слова; нулевая mantissa даёт канонический ноль.

    Raises:
        MalformedEncodingError: Если слово не помещается в 256 бит
    """
    if word < 0 or word >> WORD_BITS:
        raise MalformedEncodingError(f"Word does not fit in {WORD_BITS} bits")

    mantissa = _to_signed(word & _MANTISSA_MASK, MANTISSA_BITS)
    exponent = _to_signed(word >> MANTISSA_BITS, EXPONENT_BITS)
    return pack(mantissa, exponent)


# =============================================================================
# HEX
# =============================================================================


def encode_hex(mantissa: int, exponent: int) -> str:
    """Hex-форма слова: '0x' + 64 hex-цифры в нижнем регистре"""
    return f"{HEX_PREFIX}{encode_word(mantissa, exponent):0{WORD_HEX_DIGITS}x}"


def decode_hex(text: str) -> Packed:
    """
    Разбор hex-формы слова.

    Требуется префикс '0x' и ровно 64 hex-цифры (регистр не важен).

    Raises:
        MalformedEncodingError: Неверный префикс, длина или символы
    """
    if not isinstance(text, str) or not text.startswith(HEX_PREFIX):
        raise MalformedEncodingError(f"Hex word must start with {HEX_PREFIX!r}: {text!r}")

    body = text[len(HEX_PREFIX):]
    if len(body) != WORD_HEX_DIGITS:
        raise MalformedEncodingError(
            f"Hex word must have {WORD_HEX_DIGITS} digits, got {len(body)}"
        )
    if not _HEX_BODY.fullmatch(body):
        raise MalformedEncodingError(f"Hex word contains non-hex characters: {text!r}")

    return decode_word(int(body, 16))


# =============================================================================
# BYTES
# =============================================================================


def encode_bytes(mantissa: int, exponent: int) -> bytes:
    """32-байтная big-endian форма слова"""
    return encode_word(mantissa, exponent).to_bytes(WORD_BYTES, "big")


def decode_bytes(data: bytes) -> Packed:
    """
    Разбор 32-байтной формы слова.

    Raises:
        MalformedEncodingError: Если длина не 32 байта
    """
    if len(data) != WORD_BYTES:
        raise MalformedEncodingError(
            f"Packed word must be {WORD_BYTES} bytes, got {len(data)}"
        )
    return decode_word(int.from_bytes(data, "big"))
