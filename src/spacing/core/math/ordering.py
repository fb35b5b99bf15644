"""
Ordering: partial order over floats and compound values

Float magnitudes are only partially ordered: NaN is unordered with respect to
everything, itself included. Compound values (Size2D, SizeBox) order
lexicographically over their fields in declared order, and a single
unordered field pair makes the whole comparison unordered.

Результат сравнения кодируется как ``int | None``:
    -1   меньше
     0   равно
    +1   больше
   None  несравнимо (NaN)
"""

import math
from typing import Iterable

Comparison = int | None


def partial_cmp(a: float, b: float) -> Comparison:
    """
    Частичное сравнение двух float.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1, 0, +1 или None если хотя бы одно значение NaN

    Examples:
        >>> partial_cmp(1.0, 2.0)
        -1
        >>> partial_cmp(0.0, -0.0)
        0
        >>> partial_cmp(float("nan"), 1.0) is None
        True
    """
    if math.isnan(a) or math.isnan(b):
        return None
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def lexicographic_cmp(pairs: Iterable[tuple[float, float]]) -> Comparison:
    """
    Лексикографическое сравнение по парам компонент.

    Первая пара, сравнение которой не даёт 0, определяет результат
    (включая None). Если все пары равны, результат 0.

    Args:
        pairs: Пары (левая, правая) в порядке объявления полей

    Returns:
        -1, 0, +1 или None
    """
    for left, right in pairs:
        result = partial_cmp(left, right)
        if result != 0:
            return result
    return 0


def is_lt(result: Comparison) -> bool:
    return result == -1


def is_le(result: Comparison) -> bool:
    return result is not None and result <= 0


def is_gt(result: Comparison) -> bool:
    return result == 1


def is_ge(result: Comparison) -> bool:
    return result is not None and result >= 0


def is_eq(result: Comparison) -> bool:
    return result == 0
