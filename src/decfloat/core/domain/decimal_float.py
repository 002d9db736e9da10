"""
Float: неизменяемое десятичное значение с плавающей точкой

value = mantissa × 10^exponent
- mantissa: signed 224-bit
- exponent: signed 32-bit

Представление не нормализовано ("3.140" хранится как (3140, -3)), но ноль
канонический: mantissa == 0 ⇒ exponent == 0. Равенство и hash: по
значению, поэтому Float.parse("3.140") == Float.parse("3.14").

Все операции возвращают новый Float (или значение) и никогда не изменяют
операнды. Ошибки поднимаются как подклассы DecimalFloatError; try_*
методы возвращают FloatResult envelope вместо исключения.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from decfloat.core.bridges import fixed as fixed_bridge
from decfloat.core.bridges import integer as integer_bridge
from decfloat.core.codec import formatter, packed_word, parser
from decfloat.core.errors import DecimalFloatError
from decfloat.core.math import arithmetic, comparison
from decfloat.core.math.scaling import check_packable, strip_trailing_zeros
from decfloat.core.domain.outcome import FloatResult, LossyConversion


@dataclass(frozen=True, eq=False)
class Float:
    """
    Десятичное значение в packed word представлении.

    Immutable (frozen=True). Конструирование напрямую проверяет границы
    и канонизирует ноль; для текста/hex/целых используйте фабрики
    parse/from_hex/from_bigint.

    Raises:
        OutOfRangeError: Если mantissa или exponent вне границ
    """

    mantissa: int = 0
    exponent: int = 0

    def __post_init__(self) -> None:
        for name in ("mantissa", "exponent"):
            field_value = getattr(self, name)
            if isinstance(field_value, bool) or not isinstance(field_value, int):
                raise TypeError(f"{name} must be int, got {type(field_value).__name__}")

        check_packable(self.mantissa, self.exponent)
        if self.mantissa == 0:
            object.__setattr__(self, "exponent", 0)

    @classmethod
    def _from_packed(cls, packed: Tuple[int, int]) -> "Float":
        return cls(*packed)

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def pack(cls, mantissa: int, exponent: int) -> "Float":
        """Значение mantissa × 10^exponent; вне границ → OutOfRangeError"""
        return cls._from_packed(packed_word.pack(mantissa, exponent))

    @classmethod
    def parse(cls, text: str) -> "Float":
        """
        Разбор десятичного литерала ("-3.14", "0.00001", "5.").

        Raises:
            InvalidSyntaxError: Текст не соответствует грамматике
            OutOfRangeError: Значение не представимо
        """
        return cls._from_packed(parser.parse_decimal(text))

    @classmethod
    def parse_formatted(cls, text: str) -> "Float":
        """Разбор десятичного литерала или научной записи ("1e-5")"""
        return cls._from_packed(parser.parse_formatted(text))

    @classmethod
    def pack_lossless(cls, coefficient: str, exponent: int) -> "Float":
        """Текстовая mantissa и явный exponent: pack_lossless("314", -2) == 3.14"""
        return cls._from_packed(fixed_bridge.pack_lossless(coefficient, exponent))

    @classmethod
    def from_hex(cls, text: str) -> "Float":
        """
        Разбор hex-формы packed word ("0x" + 64 hex-цифры).

        Raises:
            MalformedEncodingError: Неверный префикс, длина или символы
        """
        return cls._from_packed(packed_word.decode_hex(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Float":
        """Разбор 32-байтной формы packed word"""
        return cls._from_packed(packed_word.decode_bytes(data))

    @classmethod
    def from_bigint(cls, value: int) -> "Float":
        """
        Точная конверсия целого (exponent 0).

        Raises:
            OutOfRangeError: Если value не помещается в mantissa
        """
        return cls._from_packed(integer_bridge.from_integer(value))

    @classmethod
    def try_from_bigint(cls, value: int) -> FloatResult:
        """from_bigint в форме envelope"""
        try:
            return FloatResult.ok(cls.from_bigint(value))
        except DecimalFloatError as exc:
            return FloatResult.fail(exc)

    @classmethod
    def from_fixed_decimal(cls, scaled_value: int, decimals: int) -> "Float":
        """scaled_value × 10^(-decimals): from_fixed_decimal(12345, 2) == 123.45"""
        return cls._from_packed(fixed_bridge.from_fixed_decimal(scaled_value, decimals))

    @classmethod
    def from_fixed_decimal_lossy(cls, scaled_value: int, decimals: int) -> LossyConversion:
        """Прямая конверсия fixed decimal всегда точная: lossless=True"""
        return LossyConversion(cls.from_fixed_decimal(scaled_value, decimals), True)

    # =========================================================================
    # ПРЕДСТАВЛЕНИЯ
    # =========================================================================

    def unpack(self) -> Tuple[int, int]:
        return self.mantissa, self.exponent

    def as_hex(self) -> str:
        """Hex-форма packed word"""
        return packed_word.encode_hex(self.mantissa, self.exponent)

    def to_bytes(self) -> bytes:
        """32-байтная форма packed word"""
        return packed_word.encode_bytes(self.mantissa, self.exponent)

    def format(self) -> str:
        """Текст с порогами научной записи по умолчанию (1e-4 .. 1e9)"""
        return formatter.format_with_range(self.mantissa, self.exponent)

    def format_with_scientific(self, scientific: bool) -> str:
        """Текст в принудительном режиме (scientific или decimal)"""
        return formatter.format_with_scientific(self.mantissa, self.exponent, scientific)

    def format_with_range(self, scientific_min: "Float", scientific_max: "Float") -> str:
        """
        Текст с пользовательскими порогами научной записи.

        Raises:
            OutOfRangeError: Если пороги отрицательные или min > max
        """
        format_range = formatter.FormatRange(scientific_min.unpack(), scientific_max.unpack())
        return formatter.format_with_range(self.mantissa, self.exponent, format_range)

    def format18(self) -> str:
        """Decimal-текст, усечённый к нулю до 18 знаков после точки"""
        return formatter.format_fixed(self.mantissa, self.exponent)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Float") -> "Float":
        return self._from_packed(arithmetic.add(*self.unpack(), *other.unpack()))

    def sub(self, other: "Float") -> "Float":
        return self._from_packed(arithmetic.sub(*self.unpack(), *other.unpack()))

    def mul(self, other: "Float") -> "Float":
        return self._from_packed(arithmetic.mul(*self.unpack(), *other.unpack()))

    def div(self, other: "Float") -> "Float":
        """
        Частное self / other.

        Raises:
            DivisionByZeroError: Если other == 0
        """
        return self._from_packed(arithmetic.div(*self.unpack(), *other.unpack()))

    def inv(self) -> "Float":
        """1 / self; DivisionByZeroError для нуля"""
        return self._from_packed(arithmetic.inv(*self.unpack()))

    def neg(self) -> "Float":
        return self._from_packed(arithmetic.neg(*self.unpack()))

    def abs(self) -> "Float":
        return self._from_packed(arithmetic.abs_(*self.unpack()))

    def floor(self) -> "Float":
        """Округление к минус бесконечности: floor(-3.14) == -4"""
        return self._from_packed(arithmetic.floor(*self.unpack()))

    def frac(self) -> "Float":
        """self - floor(self)"""
        return self._from_packed(arithmetic.frac(*self.unpack()))

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def lt(self, other: "Float") -> bool:
        return comparison.lt(*self.unpack(), *other.unpack())

    def lte(self, other: "Float") -> bool:
        return comparison.lte(*self.unpack(), *other.unpack())

    def gt(self, other: "Float") -> bool:
        return comparison.gt(*self.unpack(), *other.unpack())

    def gte(self, other: "Float") -> bool:
        return comparison.gte(*self.unpack(), *other.unpack())

    def eq(self, other: "Float") -> bool:
        return comparison.eq(*self.unpack(), *other.unpack())

    def is_zero(self) -> bool:
        return comparison.is_zero(*self.unpack())

    def min(self, other: "Float") -> "Float":
        """Меньший из операндов (сам операнд, без копии); при равенстве self"""
        return other if self.gt(other) else self

    def max(self, other: "Float") -> "Float":
        """Больший из операндов (сам операнд, без копии); при равенстве self"""
        return other if self.lt(other) else self

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_bigint(self) -> int:
        """
        Целая часть (floor).

        Raises:
            OutOfRangeError: Если целое длиннее EXPANSION_LIMIT_DIGITS разрядов
        """
        return integer_bridge.to_integer_floor(*self.unpack())

    def try_to_bigint(self) -> FloatResult:
        """Точное целое в envelope; дробная часть → PrecisionLoss"""
        try:
            return FloatResult.ok(integer_bridge.to_integer_exact(*self.unpack()))
        except DecimalFloatError as exc:
            return FloatResult.fail(exc)

    def to_fixed_decimal(self, decimals: int) -> int:
        """
        Точное scaled_value при decimals знаках.

        Raises:
            PrecisionLossError: Если значение не точное при decimals знаках
        """
        return fixed_bridge.to_fixed_decimal(*self.unpack(), decimals)

    def to_fixed_decimal_lossy(self, decimals: int) -> LossyConversion:
        """Усечённое к нулю scaled_value и флаг lossless"""
        return LossyConversion(*fixed_bridge.to_fixed_decimal_lossy(*self.unpack(), decimals))

    # =========================================================================
    # PYTHON PROTOCOLS
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self.eq(other)

    def __hash__(self) -> int:
        return hash(strip_trailing_zeros(self.mantissa, self.exponent))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Float):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: Any) -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Any) -> "Float":
        if not isinstance(other, Float):
            return NotImplemented
        return self.div(other)

    def __neg__(self) -> "Float":
        return self.neg()

    def __abs__(self) -> "Float":
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Float.pack({self.mantissa}, {self.exponent})"
