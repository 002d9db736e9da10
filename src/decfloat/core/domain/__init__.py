"""
Domain models and value objects.

Contains the Float value type, the FixedDecimal boundary model and
operation outcomes (LossyConversion, FloatResult envelope).
"""

from decfloat.core.domain.decimal_float import Float
from decfloat.core.domain.fixed_decimal import FixedDecimal
from decfloat.core.domain.outcome import FloatErrorInfo, FloatResult, LossyConversion

__all__ = [
    # Value type
    "Float",
    # Fixed-decimal boundary model
    "FixedDecimal",
    # Outcomes
    "FloatErrorInfo",
    "FloatResult",
    "LossyConversion",
]
