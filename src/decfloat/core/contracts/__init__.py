"""
Contract Validation Module

Модуль для валидации JSON контрактов boundary-слоя decfloat.
"""

from .validators import (
    ContractValidator,
    FloatResultValidator,
    SchemaLoader,
    validate_float_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FloatResultValidator",
    # Functions
    "validate_float_result",
]
