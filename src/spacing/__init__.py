"""
spacing: typographic spacing value types

Size (скалярная длина в points), Size2D (вектор) и SizeBox (отступы по
четырём сторонам) с конверсиями единиц и арифметикой.
"""

from spacing.core.domain import (
    CM_PER_POINT,
    INCHES_PER_POINT,
    MM_PER_POINT,
    POINTS_PER_CM,
    POINTS_PER_INCH,
    POINTS_PER_MM,
    Size,
    Size2D,
    SizeBox,
    Unit,
)

__all__ = [
    "Size",
    "Size2D",
    "SizeBox",
    "Unit",
    "POINTS_PER_INCH",
    "POINTS_PER_MM",
    "POINTS_PER_CM",
    "INCHES_PER_POINT",
    "MM_PER_POINT",
    "CM_PER_POINT",
]
