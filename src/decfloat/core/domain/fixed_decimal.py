"""
FixedDecimal: пара (scaled_value, decimals) на границе Fixed-Decimal Bridge

Значение: scaled_value × 10^(-decimals). Используется только для обмена
с внешними системами (балансы токенов, суммы в минимальных единицах);
внутри движка значения хранятся как Float.
"""

from pydantic import BaseModel, Field

from decfloat.core.domain.decimal_float import Float
from decfloat.core.math.scaling import EXPONENT_MIN


class FixedDecimal(BaseModel):
    """
    Модель fixed decimal значения.

    Immutable модель (frozen=True).
    """

    scaled_value: int = Field(..., description="Целое, масштабированное на 10^decimals")
    decimals: int = Field(..., ge=0, le=-EXPONENT_MIN, description="Количество знаков после точки")

    model_config = {"frozen": True, "strict": True}  # Immutable, без приведения типов

    @classmethod
    def from_float(cls, value: Float, decimals: int) -> "FixedDecimal":
        """
        Точная конверсия Float при decimals знаках.

        Raises:
            PrecisionLossError: Если значение не точное при decimals знаках
        """
        return cls(scaled_value=value.to_fixed_decimal(decimals), decimals=decimals)

    def to_float(self) -> Float:
        """
        Raises:
            OutOfRangeError: Если scaled_value не помещается в mantissa
        """
        return Float.from_fixed_decimal(self.scaled_value, self.decimals)

    def __str__(self) -> str:
        return self.to_float().format_with_scientific(False)
