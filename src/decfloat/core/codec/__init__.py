"""
Codecs для decfloat

Внешние представления значения: packed word (hex/bytes) и десятичный текст.
"""

# Packed Word Codec
from decfloat.core.codec.packed_word import (
    EXPONENT_HEX_DIGITS,
    HEX_PREFIX,
    MANTISSA_HEX_DIGITS,
    WORD_BYTES,
    WORD_HEX_DIGITS,
    decode_bytes,
    decode_hex,
    decode_word,
    encode_bytes,
    encode_hex,
    encode_word,
    pack,
)

# Decimal Parser
from decfloat.core.codec.parser import parse_decimal, parse_formatted, parse_integer

# Decimal Formatter
from decfloat.core.codec.formatter import (
    DEFAULT_FIXED_FORMAT_DECIMALS,
    DEFAULT_FORMAT_RANGE,
    FORMAT_DEFAULT_SCIENTIFIC_MAX,
    FORMAT_DEFAULT_SCIENTIFIC_MIN,
    FormatRange,
    format_decimal,
    format_fixed,
    format_scientific,
    format_with_range,
    format_with_scientific,
)

__all__ = [
    # Packed Word Codec
    "EXPONENT_HEX_DIGITS",
    "HEX_PREFIX",
    "MANTISSA_HEX_DIGITS",
    "WORD_BYTES",
    "WORD_HEX_DIGITS",
    "decode_bytes",
    "decode_hex",
    "decode_word",
    "encode_bytes",
    "encode_hex",
    "encode_word",
    "pack",
    # Decimal Parser
    "parse_decimal",
    "parse_formatted",
    "parse_integer",
    # Decimal Formatter
    "DEFAULT_FIXED_FORMAT_DECIMALS",
    "DEFAULT_FORMAT_RANGE",
    "FORMAT_DEFAULT_SCIENTIFIC_MAX",
    "FORMAT_DEFAULT_SCIENTIFIC_MIN",
    "FormatRange",
    "format_decimal",
    "format_fixed",
    "format_scientific",
    "format_with_range",
    "format_with_scientific",
]
