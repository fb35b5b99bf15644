"""
Size2D: позиция или протяжённость на плоскости

Пара Size (x, y). Арифметика покомпонентная, скаляры (int/float)
применяются к обеим компонентам. Порядок производный: сначала x, затем y.
"""

from pydantic import BaseModel, Field

from spacing.core.domain.size import Size
from spacing.core.math.float32 import EPS_F32_COMPARE_ABS, EPS_F32_COMPARE_REL, is_scalar
from spacing.core.math.ordering import (
    Comparison,
    is_eq,
    is_ge,
    is_gt,
    is_le,
    is_lt,
    lexicographic_cmp,
)


class Size2D(BaseModel):
    """
    2D вектор из двух длин.

    Immutable модель (frozen=True). Нулевой вектор допустим.
    """

    x: Size = Field(default_factory=Size.zero, description="Горизонтальная координата")
    y: Size = Field(default_factory=Size.zero, description="Вертикальная координата")

    model_config = {"frozen": True}

    @classmethod
    def new(cls, x: Size, y: Size) -> "Size2D":
        return cls(x=x, y=y)

    @classmethod
    def zero(cls) -> "Size2D":
        return cls(x=Size.zero(), y=Size.zero())

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __neg__(self) -> "Size2D":
        return Size2D(x=-self.x, y=-self.y)

    def __add__(self, other: object) -> "Size2D":
        if not isinstance(other, Size2D):
            return NotImplemented
        return Size2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: object) -> "Size2D":
        if not isinstance(other, Size2D):
            return NotImplemented
        return Size2D(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, other: object) -> "Size2D":
        if not is_scalar(other):
            return NotImplemented
        return Size2D(x=self.x * other, y=self.y * other)

    def __rmul__(self, other: object) -> "Size2D":
        if not is_scalar(other):
            return NotImplemented
        return Size2D(x=other * self.x, y=other * self.y)

    def __truediv__(self, other: object) -> "Size2D":
        if not is_scalar(other):
            return NotImplemented
        return Size2D(x=self.x / other, y=self.y / other)

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def _cmp(self, other: "Size2D") -> Comparison:
        return lexicographic_cmp(
            [
                (self.x.points, other.x.points),
                (self.y.points, other.y.points),
            ]
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size2D):
            return NotImplemented
        return is_eq(self._cmp(other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Size2D):
            return NotImplemented
        return is_lt(self._cmp(other))

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Size2D):
            return NotImplemented
        return is_le(self._cmp(other))

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Size2D):
            return NotImplemented
        return is_gt(self._cmp(other))

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Size2D):
            return NotImplemented
        return is_ge(self._cmp(other))

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def is_close(
        self,
        other: "Size2D",
        rel_tol: float = EPS_F32_COMPARE_REL,
        abs_tol: float = EPS_F32_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с учётом погрешности binary32."""
        return self.x.is_close(other.x, rel_tol, abs_tol) and self.y.is_close(
            other.y, rel_tol, abs_tol
        )

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"

    def __repr__(self) -> str:
        return str(self)
