"""
SizeBox: длины в четырёх направлениях

Отступы по сторонам (left, top, right, bottom), аналог CSS margin/padding,
а не прямоугольник в абсолютных координатах. Отрицательные компоненты
описывают выступ наружу.

Арифметика над SizeBox не определена: стороны комбинируются по
отдельности через арифметику Size.
"""

from pydantic import BaseModel, Field

from spacing.core.domain.size import Size
from spacing.core.math.ordering import (
    Comparison,
    is_eq,
    is_ge,
    is_gt,
    is_le,
    is_lt,
    lexicographic_cmp,
)


class SizeBox(BaseModel):
    """Длины в четырёх направлениях."""

    left: Size = Field(default_factory=Size.zero, description="Левый отступ")
    top: Size = Field(default_factory=Size.zero, description="Верхний отступ")
    right: Size = Field(default_factory=Size.zero, description="Правый отступ")
    bottom: Size = Field(default_factory=Size.zero, description="Нижний отступ")

    model_config = {"frozen": True}

    @classmethod
    def new(cls, left: Size, top: Size, right: Size, bottom: Size) -> "SizeBox":
        return cls(left=left, top=top, right=right, bottom=bottom)

    @classmethod
    def zero(cls) -> "SizeBox":
        return cls(
            left=Size.zero(),
            top=Size.zero(),
            right=Size.zero(),
            bottom=Size.zero(),
        )

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def _cmp(self, other: "SizeBox") -> Comparison:
        # Порядок полей: left, top, right, bottom
        return lexicographic_cmp(
            [
                (self.left.points, other.left.points),
                (self.top.points, other.top.points),
                (self.right.points, other.right.points),
                (self.bottom.points, other.bottom.points),
            ]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SizeBox):
            return NotImplemented
        return is_eq(self._cmp(other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SizeBox):
            return NotImplemented
        return is_lt(self._cmp(other))

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SizeBox):
            return NotImplemented
        return is_le(self._cmp(other))

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SizeBox):
            return NotImplemented
        return is_gt(self._cmp(other))

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SizeBox):
            return NotImplemented
        return is_ge(self._cmp(other))

    def __hash__(self) -> int:
        return hash((self.left, self.top, self.right, self.bottom))

    def __str__(self) -> str:
        return (
            f"[left: {self.left}, top: {self.top}, "
            f"right: {self.right}, bottom: {self.bottom}]"
        )

    def __repr__(self) -> str:
        return str(self)
