"""
Bridges для decfloat

Конверсии к целым произвольной точности и к fixed decimal.
"""

from decfloat.core.bridges.fixed import (
    from_fixed_decimal,
    pack_lossless,
    rescale,
    to_fixed_decimal,
    to_fixed_decimal_lossy,
)
from decfloat.core.bridges.integer import from_integer, to_integer_exact, to_integer_floor

__all__ = [
    # Integer Bridge
    "from_integer",
    "to_integer_exact",
    "to_integer_floor",
    # Fixed-Decimal Bridge
    "from_fixed_decimal",
    "pack_lossless",
    "rescale",
    "to_fixed_decimal",
    "to_fixed_decimal_lossy",
]
