"""
decfloat: arbitrary-precision base-10 floating point in a 256-bit packed word.

    >>> from decfloat import Float
    >>> Float.parse("3.14").div(Float.parse("2.0")).format()
    '1.57'
"""

from decfloat.core.codec.formatter import FormatRange
from decfloat.core.constants import (
    format_default_scientific_max,
    format_default_scientific_min,
    max_negative_value,
    max_positive_value,
    min_negative_value,
    min_positive_value,
    one,
    zero,
)
from decfloat.core.domain import FixedDecimal, Float, FloatErrorInfo, FloatResult, LossyConversion
from decfloat.core.errors import (
    DecimalFloatError,
    DivisionByZeroError,
    FloatErrorKind,
    FloatOverflowError,
    InvalidSyntaxError,
    MalformedEncodingError,
    OutOfRangeError,
    PrecisionLossError,
)

__version__ = "0.1.0"

__all__ = [
    # Value types
    "Float",
    "FixedDecimal",
    "FormatRange",
    # Outcomes
    "FloatErrorInfo",
    "FloatResult",
    "LossyConversion",
    # Errors
    "DecimalFloatError",
    "DivisionByZeroError",
    "FloatErrorKind",
    "FloatOverflowError",
    "InvalidSyntaxError",
    "MalformedEncodingError",
    "OutOfRangeError",
    "PrecisionLossError",
    # Constants
    "format_default_scientific_max",
    "format_default_scientific_min",
    "max_negative_value",
    "max_positive_value",
    "min_negative_value",
    "min_positive_value",
    "one",
    "zero",
]
