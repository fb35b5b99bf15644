"""
Core math modules

Binary32 arithmetic and partial-order primitives shared by the length types.
"""

# Float32 arithmetic
from spacing.core.math.float32 import (
    EPS_F32_COMPARE_ABS,
    EPS_F32_COMPARE_REL,
    f32_add,
    f32_div,
    f32_mul,
    f32_neg,
    f32_sub,
    format_f32,
    is_close_f32,
    is_scalar,
    is_valid_f32,
    to_f32,
)

# Ordering
from spacing.core.math.ordering import (
    Comparison,
    is_eq,
    is_ge,
    is_gt,
    is_le,
    is_lt,
    lexicographic_cmp,
    partial_cmp,
)

__all__ = [
    # Float32: Epsilon constants
    "EPS_F32_COMPARE_ABS",
    "EPS_F32_COMPARE_REL",
    # Float32: Arithmetic
    "f32_add",
    "f32_div",
    "f32_mul",
    "f32_neg",
    "f32_sub",
    "to_f32",
    # Float32: Formatting and checks
    "format_f32",
    "is_close_f32",
    "is_scalar",
    "is_valid_f32",
    # Ordering
    "Comparison",
    "partial_cmp",
    "lexicographic_cmp",
    "is_eq",
    "is_ge",
    "is_gt",
    "is_le",
    "is_lt",
]
