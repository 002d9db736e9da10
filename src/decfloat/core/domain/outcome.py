"""
Outcomes: результаты операций в форме значений

- LossyConversion: результат "lossy" конверсии + флаг lossless
- FloatErrorInfo:  машинно-читаемый kind + сообщения ошибки
- FloatResult:     envelope {value | error} для вызовов через границу

FloatResult: immutable Pydantic модель. Ровно одно из полей value/error
заполнено. unwrap() возвращает value или поднимает типизированное
исключение, соответствующее kind.
"""

from typing import Any, Dict, Final, NamedTuple, Optional

from pydantic import BaseModel, Field, model_validator

from decfloat.core.contracts import validate_float_result
from decfloat.core.errors import DecimalFloatError, FloatErrorKind, error_for_kind


# =============================================================================
# LOSSY CONVERSION
# =============================================================================


class LossyConversion(NamedTuple):
    """
    Результат конверсии, которая может терять точность.

    Attributes:
        value: Результат (int или Float)
        lossless: True, если конверсия точная
    """

    value: Any
    lossless: bool


# =============================================================================
# ERROR INFO
# =============================================================================

_READABLE_PREFIX: Final[Dict[FloatErrorKind, str]] = {
    FloatErrorKind.INVALID_SYNTAX: "Invalid decimal number",
    FloatErrorKind.MALFORMED_ENCODING: "Malformed packed float encoding",
    FloatErrorKind.OUT_OF_RANGE: "Value out of representable range",
    FloatErrorKind.OVERFLOW: "Arithmetic overflow",
    FloatErrorKind.DIVISION_BY_ZERO: "Division by zero",
    FloatErrorKind.PRECISION_LOSS: "Conversion would lose precision",
}


class FloatErrorInfo(BaseModel):
    """Описание ошибки для вызывающего слоя"""

    kind: FloatErrorKind = Field(..., description="Машинно-читаемый вид ошибки")
    msg: str = Field(..., min_length=1, description="Техническое сообщение")
    readable_msg: str = Field(..., min_length=1, description="Сообщение для пользователя")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_exception(cls, exc: DecimalFloatError) -> "FloatErrorInfo":
        return cls(
            kind=exc.kind,
            msg=exc.message,
            readable_msg=f"{_READABLE_PREFIX[exc.kind]}: {exc.message}",
        )

    def to_exception(self) -> DecimalFloatError:
        return error_for_kind(self.kind, self.msg)


# =============================================================================
# RESULT ENVELOPE
# =============================================================================


def _wire_value(value: Any) -> Any:
    """
    Wire-форма значения результата.

    bool и str передаются как есть, int: знаковой hex строкой ("0x1f", "-0x4"),
    LossyConversion: объектом, значение Float: hex словом.
    """
    if isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return format(value, "#x")
    if isinstance(value, LossyConversion):
        return {"value": _wire_value(value.value), "lossless": value.lossless}
    return value.as_hex()


class FloatResult(BaseModel):
    """
    Envelope результата операции.

    Immutable модель (frozen=True). Успех несёт value, неудача: error.
    """

    value: Any = Field(default=None, description="Результат операции")
    error: Optional[FloatErrorInfo] = Field(default=None, description="Ошибка операции")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @model_validator(mode="after")
    def validate_exclusive(self) -> "FloatResult":
        """Ровно одно из value/error"""
        if (self.value is None) == (self.error is None):
            raise ValueError("FloatResult must carry exactly one of value or error")
        return self

    @classmethod
    def ok(cls, value: Any) -> "FloatResult":
        return cls(value=value)

    @classmethod
    def fail(cls, exc: DecimalFloatError) -> "FloatResult":
        return cls(error=FloatErrorInfo.from_exception(exc))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """
        Значение результата.

        Raises:
            DecimalFloatError: Подкласс, соответствующий error.kind
        """
        if self.error is not None:
            raise self.error.to_exception()
        return self.value

    def to_wire(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление, проверенное по float_result контракту.

        Raises:
            ValidationError: Если представление нарушает контракт
        """
        if self.error is not None:
            data: Dict[str, Any] = {
                "error": {
                    "kind": self.error.kind.value,
                    "msg": self.error.msg,
                    "readableMsg": self.error.readable_msg,
                }
            }
        else:
            data = {"value": _wire_value(self.value)}

        validate_float_result(data)
        return data
