"""
Units: централизованный модуль конверсии единиц длины

Единственный допустимый способ преобразований между:
- points (pt, 1/72 inch), каноническая единица хранения
- inches (in)
- millimeters (mm)
- centimeters (cm)

Обратные коэффициенты являются фиксированными приближёнными литералами,
а не точными 1/x. Конверсия туда-обратно для in/mm/cm поэтому точна только до
погрешности binary32 и самих литералов.
"""

import logging
from enum import Enum
from typing import Final

from spacing.core.math.float32 import f32_mul, format_f32, is_scalar, is_valid_f32, to_f32

logger = logging.getLogger(__name__)


# =============================================================================
# КОЭФФИЦИЕНТЫ КОНВЕРСИИ
# =============================================================================

# unit → points
POINTS_PER_INCH: Final[float] = 72.0
POINTS_PER_MM: Final[float] = 2.83465
POINTS_PER_CM: Final[float] = 28.3465

# points → unit
INCHES_PER_POINT: Final[float] = 0.0138889
MM_PER_POINT: Final[float] = 0.352778
CM_PER_POINT: Final[float] = 0.0352778


# =============================================================================
# ENUMS
# =============================================================================


class Unit(str, Enum):
    """Единица длины"""

    PT = "pt"
    IN = "in"
    MM = "mm"
    CM = "cm"


_TO_POINTS: Final[dict[Unit, float]] = {
    Unit.IN: POINTS_PER_INCH,
    Unit.MM: POINTS_PER_MM,
    Unit.CM: POINTS_PER_CM,
}

_FROM_POINTS: Final[dict[Unit, float]] = {
    Unit.IN: INCHES_PER_POINT,
    Unit.MM: MM_PER_POINT,
    Unit.CM: CM_PER_POINT,
}


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def _require_scalar(value: object) -> None:
    if not is_scalar(value):
        raise TypeError(
            f"Length magnitude must be a real number, got {type(value).__name__}"
        )


def points_from(value: float, unit: Unit) -> float:
    """
    Конверсия: величина в unit → points (binary32).

    Args:
        value: Величина в единицах unit (может быть отрицательной)
        unit: Исходная единица

    Returns:
        Количество points, округлённое до binary32

    Examples:
        >>> points_from(1.0, Unit.IN)
        72.0
        >>> points_from(12.0, Unit.PT)
        12.0
    """
    _require_scalar(value)
    unit = Unit(unit)
    if unit is Unit.PT:
        return to_f32(value)

    points = f32_mul(_TO_POINTS[unit], value)
    if not is_valid_f32(points):
        logger.debug(
            "Conversion of %r %s to points is not finite: %s",
            value,
            unit.value,
            format_f32(points),
        )
    return points


def points_to(points: float, unit: Unit) -> float:
    """
    Конверсия: points → величина в unit (binary32).

    Args:
        points: Количество points
        unit: Целевая единица

    Returns:
        Величина в единицах unit, округлённая до binary32
    """
    _require_scalar(points)
    unit = Unit(unit)
    if unit is Unit.PT:
        return to_f32(points)

    value = f32_mul(points, _FROM_POINTS[unit])
    if not is_valid_f32(value):
        logger.debug(
            "Conversion of %spt to %s is not finite",
            format_f32(points),
            unit.value,
        )
    return value
