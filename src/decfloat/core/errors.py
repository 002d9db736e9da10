"""
Errors: таксономия ошибок decimal float engine

Каждая ошибка несёт машинно-читаемый kind (FloatErrorKind) и
человеко-читаемое сообщение. Ядро только поднимает эти исключения;
представление ошибок пользователю: задача вызывающего слоя
(см. decfloat.api, где ошибки превращаются в FloatResult envelope).

Таксономия:
- InvalidSyntax    : некорректный десятичный текст
- MalformedEncoding: hex/bytes неверной длины или с невалидными символами
- OutOfRange       : mantissa/exponent вне границ при конструировании
- Overflow         : результат арифметики не помещается в границы
- DivisionByZero   : inv/div с нулевым делителем
- PrecisionLoss    : точная конверсия встретила ненулевой остаток
"""

from enum import Enum
from typing import Dict, Type


# =============================================================================
# ERROR KINDS
# =============================================================================


class FloatErrorKind(str, Enum):
    """Машинно-читаемый вид ошибки"""

    INVALID_SYNTAX = "InvalidSyntax"
    MALFORMED_ENCODING = "MalformedEncoding"
    OUT_OF_RANGE = "OutOfRange"
    OVERFLOW = "Overflow"
    DIVISION_BY_ZERO = "DivisionByZero"
    PRECISION_LOSS = "PrecisionLoss"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecimalFloatError(Exception):
    """
    Базовое исключение decimal float engine.

    Attributes:
        kind: Вид ошибки (FloatErrorKind)
        message: Человеко-читаемое описание
    """

    kind: FloatErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidSyntaxError(DecimalFloatError):
    """Текст не соответствует грамматике десятичного литерала"""

    kind = FloatErrorKind.INVALID_SYNTAX


class MalformedEncodingError(DecimalFloatError):
    """Упакованное представление имеет неверную длину или символы"""

    kind = FloatErrorKind.MALFORMED_ENCODING


class OutOfRangeError(DecimalFloatError):
    """Mantissa или exponent вне представимых границ"""

    kind = FloatErrorKind.OUT_OF_RANGE


class FloatOverflowError(DecimalFloatError):
    """Точный результат арифметики не представим в границах"""

    kind = FloatErrorKind.OVERFLOW


class DivisionByZeroError(DecimalFloatError):
    """Деление на ноль"""

    kind = FloatErrorKind.DIVISION_BY_ZERO


class PrecisionLossError(DecimalFloatError):
    """Конверсия, требующая точности, встретила ненулевой остаток"""

    kind = FloatErrorKind.PRECISION_LOSS


_ERRORS_BY_KIND: Dict[FloatErrorKind, Type[DecimalFloatError]] = {
    cls.kind: cls
    for cls in (
        InvalidSyntaxError,
        MalformedEncodingError,
        OutOfRangeError,
        FloatOverflowError,
        DivisionByZeroError,
        PrecisionLossError,
    )
}


def error_for_kind(kind: FloatErrorKind, message: str) -> DecimalFloatError:
    """
    Восстановление типизированного исключения по kind.

    Используется envelope-слоем при unwrap() результата.

    Args:
        kind: Вид ошибки
        message: Сообщение

    Returns:
        Экземпляр соответствующего подкласса DecimalFloatError
    """
    return _ERRORS_BY_KIND[FloatErrorKind(kind)](message)
