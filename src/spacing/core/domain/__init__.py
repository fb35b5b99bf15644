"""
Domain value types.

Contains the length types Size, Size2D, SizeBox and the unit conversion module.
"""

from spacing.core.domain.size import Size
from spacing.core.domain.size2d import Size2D
from spacing.core.domain.size_box import SizeBox
from spacing.core.domain.units import (
    CM_PER_POINT,
    INCHES_PER_POINT,
    MM_PER_POINT,
    POINTS_PER_CM,
    POINTS_PER_INCH,
    POINTS_PER_MM,
    Unit,
    points_from,
    points_to,
)

__all__ = [
    # Units module
    "POINTS_PER_INCH",
    "POINTS_PER_MM",
    "POINTS_PER_CM",
    "INCHES_PER_POINT",
    "MM_PER_POINT",
    "CM_PER_POINT",
    "Unit",
    "points_from",
    "points_to",
    # Length types
    "Size",
    "Size2D",
    "SizeBox",
]
