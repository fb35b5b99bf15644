"""
Float32: single-precision arithmetic primitives

All lengths in the library are stored as IEEE-754 binary32 values. Python
floats are binary64, so every arithmetic step is routed through
``numpy.float32`` and the result is handed back as a plain ``float`` that
holds the exact binary32 value.

Модуль обеспечивает:
- Округление произвольного числа до binary32 (аналог cast ``as f32``)
- Арифметику (neg/add/sub/mul/div) в точности binary32
- Форматирование кратчайшей десятичной записью binary32
- Epsilon-сравнения с толерантностями одинарной точности

INVARIANTS:
1. Operations never raise and never warn: overflow gives ±inf, 0/0 gives NaN
2. NaN/Inf propagate unchanged (no sanitization)
3. Every returned float is exactly representable as binary32
"""

import math
import numbers
from typing import Final

import numpy as np

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения binary32 значений
# (машинный epsilon float32 ~1.19e-7, плюс запас на две операции округления)
EPS_F32_COMPARE_REL: Final[float] = 1e-5

# Абсолютная толерантность для сравнения binary32 значений вблизи нуля
EPS_F32_COMPARE_ABS: Final[float] = 1e-6

# Подавление RuntimeWarning numpy: IEEE-754 результат возвращается как есть
_IEEE_ERRSTATE: Final[dict[str, str]] = {
    "over": "ignore",
    "under": "ignore",
    "divide": "ignore",
    "invalid": "ignore",
}


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def is_scalar(value: object) -> bool:
    """Вещественный скаляр (bool не считается числом)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _as_f32(value: float) -> np.float32:
    with np.errstate(**_IEEE_ERRSTATE):
        return np.float32(value)


def to_f32(value: float) -> float:
    """
    Округление значения до ближайшего binary32.

    Args:
        value: Исходное значение (int или float)

    Returns:
        float, хранящий точное binary32 значение

    Examples:
        >>> to_f32(12.0)
        12.0
        >>> to_f32(0.1)
        0.10000000149011612
        >>> to_f32(1e39)
        inf
    """
    return float(_as_f32(value))


# =============================================================================
# АРИФМЕТИКА BINARY32
# =============================================================================


def f32_neg(a: float) -> float:
    """Negation in binary32."""
    return float(-_as_f32(a))


def f32_add(a: float, b: float) -> float:
    """Addition in binary32."""
    with np.errstate(**_IEEE_ERRSTATE):
        return float(_as_f32(a) + _as_f32(b))


def f32_sub(a: float, b: float) -> float:
    """Subtraction in binary32."""
    with np.errstate(**_IEEE_ERRSTATE):
        return float(_as_f32(a) - _as_f32(b))


def f32_mul(a: float, b: float) -> float:
    """Multiplication in binary32."""
    with np.errstate(**_IEEE_ERRSTATE):
        return float(_as_f32(a) * _as_f32(b))


def f32_div(a: float, b: float) -> float:
    """
    Деление в binary32.

    Деление на ноль не бросает ZeroDivisionError: результат ±inf
    (или NaN для 0/0), как в IEEE-754.

    Examples:
        >>> f32_div(1.0, 0.0)
        inf
        >>> f32_div(-1.0, 0.0)
        -inf
    """
    with np.errstate(**_IEEE_ERRSTATE):
        return float(_as_f32(a) / _as_f32(b))


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_f32(value: float) -> str:
    """
    Кратчайшая позиционная запись binary32 значения.

    Целые значения печатаются без дробной части, научная нотация
    не используется.

    Args:
        value: Значение (округляется до binary32)

    Returns:
        Строковое представление

    Examples:
        >>> format_f32(12.0)
        '12'
        >>> format_f32(0.1)
        '0.1'
        >>> format_f32(-0.0)
        '-0'
        >>> format_f32(float("nan"))
        'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(_as_f32(value), unique=True, trim="-")


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_valid_f32(value: float) -> bool:
    """True если значение конечно (не NaN, не Inf)."""
    return math.isfinite(value)


def is_close_f32(
    a: float,
    b: float,
    rel_tol: float = EPS_F32_COMPARE_REL,
    abs_tol: float = EPS_F32_COMPARE_ABS,
) -> bool:
    """
    Сравнение binary32 значений с учётом одинарной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-5)
        abs_tol: Абсолютная толерантность (default: 1e-6)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close_f32(1.0, 1.000001)
        True
        >>> is_close_f32(1.0, 1.001)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
