"""
Scaling: границы packed word и десятичное масштабирование

Единственное место, где определены ширины полей и выполняется
выравнивание экспонент. Arithmetic Engine и Comparator используют
одни и те же функции, поэтому правила масштабирования совпадают везде.

Модель значения: value = mantissa × 10^exponent
- mantissa: signed 224-bit (two's-complement в packed word)
- exponent: signed 32-bit (two's-complement в packed word)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль канонический: mantissa == 0 ⇒ exponent == 0
2. Масштабирование точное: никакая функция модуля не округляет
3. Результат вне границ → FloatOverflowError (никогда не усекается молча)
"""

from typing import Final, Tuple

from decfloat.core.errors import FloatOverflowError, OutOfRangeError

# =============================================================================
# ШИРИНЫ ПОЛЕЙ PACKED WORD
# =============================================================================

WORD_BITS: Final[int] = 256
EXPONENT_BITS: Final[int] = 32
MANTISSA_BITS: Final[int] = WORD_BITS - EXPONENT_BITS

MANTISSA_MIN: Final[int] = -(1 << (MANTISSA_BITS - 1))
MANTISSA_MAX: Final[int] = (1 << (MANTISSA_BITS - 1)) - 1

EXPONENT_MIN: Final[int] = -(1 << (EXPONENT_BITS - 1))
EXPONENT_MAX: Final[int] = (1 << (EXPONENT_BITS - 1)) - 1

# Количество десятичных цифр в MANTISSA_MAX (68).
# Любое целое с MANTISSA_MAX_DIGITS - 1 цифрами гарантированно помещается.
MANTISSA_MAX_DIGITS: Final[int] = len(str(MANTISSA_MAX))

# Предел разницы экспонент, при котором выравнивание ещё выполняется
# умножением. Больше: операнды сначала нормализуются вызывающим кодом.
ALIGN_LIMIT_DIGITS: Final[int] = 2 * MANTISSA_MAX_DIGITS

# Предел числа десятичных разрядов при раскрытии значения в целое
# или в decimal-строку. Стоимость 10^exponent растёт с exponent, а
# exponent у EXPONENT_MAX означает 2^31 цифр.
EXPANSION_LIMIT_DIGITS: Final[int] = 1_000_000

Packed = Tuple[int, int]


# =============================================================================
# ПРОВЕРКИ ГРАНИЦ
# =============================================================================


def is_mantissa_in_range(mantissa: int) -> bool:
    """Mantissa помещается в signed 224-bit поле"""
    return MANTISSA_MIN <= mantissa <= MANTISSA_MAX


def is_exponent_in_range(exponent: int) -> bool:
    """Exponent помещается в signed 32-bit поле"""
    return EXPONENT_MIN <= exponent <= EXPONENT_MAX


def check_packable(mantissa: int, exponent: int) -> None:
    """
    Проверка, что пара (mantissa, exponent) помещается в packed word.

    Raises:
        OutOfRangeError: Если хотя бы одно поле вне границ
    """
    if not is_mantissa_in_range(mantissa):
        raise OutOfRangeError(
            f"Mantissa {mantissa} outside [{MANTISSA_MIN}, {MANTISSA_MAX}]"
        )
    if not is_exponent_in_range(exponent):
        raise OutOfRangeError(
            f"Exponent {exponent} outside [{EXPONENT_MIN}, {EXPONENT_MAX}]"
        )


def check_expansion(places: int) -> None:
    """
    Проверка, что раскрытие значения на places десятичных разрядов выполнимо.

    Raises:
        OutOfRangeError: Если places > EXPANSION_LIMIT_DIGITS
    """
    if places > EXPANSION_LIMIT_DIGITS:
        raise OutOfRangeError(
            f"Expanding value to {places} decimal places exceeds limit "
            f"{EXPANSION_LIMIT_DIGITS}"
        )


# =============================================================================
# ДЕСЯТИЧНЫЕ УТИЛИТЫ
# =============================================================================


def digit_count(value: int) -> int:
    """
    Количество десятичных цифр в |value|.

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-314)
        3
    """
    return len(str(abs(value)))


def adjusted_exponent(mantissa: int, exponent: int) -> int:
    """
    Позиция старшей значащей цифры: exponent + digits(mantissa) - 1.

    Для 3.14 (314, -2) возвращает 0, для 0.00001 (1, -5) возвращает -5.
    """
    return exponent + digit_count(mantissa) - 1


def strip_trailing_zeros(
    mantissa: int, exponent: int, exponent_limit: int = EXPONENT_MAX
) -> Packed:
    """
    Удаление хвостовых десятичных нулей mantissa (точное преобразование).

    Каждый удалённый ноль увеличивает exponent на 1; удаление
    останавливается на exponent_limit.

    Args:
        mantissa: Mantissa
        exponent: Exponent
        exponent_limit: Максимальный exponent результата

    Returns:
        (mantissa, exponent) без хвостовых нулей; ноль → (0, 0)

    Examples:
        >>> strip_trailing_zeros(31400, -4)
        (314, -2)
        >>> strip_trailing_zeros(1000, 0, exponent_limit=1)
        (100, 1)
    """
    if mantissa == 0:
        return 0, 0

    while exponent < exponent_limit and mantissa % 10 == 0:
        mantissa //= 10
        exponent += 1

    return mantissa, exponent


def align(
    a_mantissa: int, a_exponent: int, b_mantissa: int, b_exponent: int
) -> Tuple[int, int, int]:
    """
    Выравнивание двух значений к общей (меньшей) экспоненте.

    Операнд с большей экспонентой масштабируется вверх умножением
    mantissa на 10^diff. Преобразование точное.

    Returns:
        (a_mantissa', b_mantissa', common_exponent)

    Raises:
        FloatOverflowError: Если diff > ALIGN_LIMIT_DIGITS (результат
            гарантированно не представим, вызывающий код должен был
            нормализовать операнды)

    Examples:
        >>> align(314, -2, 2, 0)
        (314, 200, -2)
    """
    diff = a_exponent - b_exponent
    if abs(diff) > ALIGN_LIMIT_DIGITS:
        raise FloatOverflowError(
            f"Exponent difference {abs(diff)} exceeds alignment limit "
            f"{ALIGN_LIMIT_DIGITS}"
        )

    if diff >= 0:
        return a_mantissa * 10**diff, b_mantissa, b_exponent
    return a_mantissa, b_mantissa * 10**-diff, a_exponent


def fit(mantissa: int, exponent: int) -> Packed:
    """
    Приведение точного результата к границам packed word без потерь.

    Шаги:
    1. Ноль → канонический (0, 0)
    2. Mantissa вне границ или exponent ниже минимума → удаление
       хвостовых нулей
    3. Exponent выше максимума → перенос степени в mantissa

    Returns:
        Представимая пара (mantissa, exponent) с тем же значением

    Raises:
        FloatOverflowError: Если значение не представимо точно
    """
    if mantissa == 0:
        return 0, 0

    if not is_mantissa_in_range(mantissa) or exponent < EXPONENT_MIN:
        mantissa, exponent = strip_trailing_zeros(mantissa, exponent)

    if exponent > EXPONENT_MAX:
        excess = exponent - EXPONENT_MAX
        if excess <= MANTISSA_MAX_DIGITS:
            mantissa *= 10**excess
            exponent = EXPONENT_MAX

    if not is_mantissa_in_range(mantissa):
        raise FloatOverflowError(
            f"Result mantissa needs {digit_count(mantissa)} digits, "
            f"exceeds {MANTISSA_BITS}-bit field"
        )
    if not is_exponent_in_range(exponent):
        raise FloatOverflowError(
            f"Result exponent {exponent} outside [{EXPONENT_MIN}, {EXPONENT_MAX}]"
        )

    return mantissa, exponent
