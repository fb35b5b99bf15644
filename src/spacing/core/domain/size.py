"""
Size: скалярная типографская длина

Immutable Pydantic модель, хранящая длину в typographic points (1/72 inch)
с точностью binary32. Отрицательные значения допустимы (смещения,
направления), NaN/Inf не отклоняются и распространяются по IEEE-754.

Арифметика:
- -a, a + b, a - b
- a * k, k * a, a / k для int/float скаляров
- Size.sum(iterable): левая свёртка от Size.zero()

Составные операторы (+=, -=, *=, /=) перепривязывают имя к новому
значению; разделяемый экземпляр никогда не изменяется.
"""

from typing import Iterable

from pydantic import BaseModel, Field, field_validator

from spacing.core.domain.units import Unit, points_from, points_to
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
    to_f32,
)
from spacing.core.math.ordering import is_eq, is_ge, is_gt, is_le, is_lt, partial_cmp


class Size(BaseModel):
    """
    Длина в typographic points.

    Immutable модель (frozen=True). Конструирование через фабрики
    zero/from_points/from_inches/from_mm/from_cm или Size() (ноль).
    """

    points: float = Field(
        default=0.0, strict=True, description="Длина в points (binary32)"
    )

    model_config = {"frozen": True}

    @field_validator("points")
    @classmethod
    def round_to_f32(cls, v: float) -> float:
        """Магнитуда хранится с точностью binary32."""
        return to_f32(v)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "Size":
        """Нулевая длина (аддитивная единица)."""
        return cls(points=0.0)

    @classmethod
    def from_points(cls, points: float) -> "Size":
        return cls(points=points_from(points, Unit.PT))

    @classmethod
    def from_inches(cls, inches: float) -> "Size":
        return cls(points=points_from(inches, Unit.IN))

    @classmethod
    def from_mm(cls, mm: float) -> "Size":
        return cls(points=points_from(mm, Unit.MM))

    @classmethod
    def from_cm(cls, cm: float) -> "Size":
        return cls(points=points_from(cm, Unit.CM))

    @classmethod
    def from_unit(cls, value: float, unit: Unit) -> "Size":
        """
        Длина из величины в произвольной единице.

        Args:
            value: Величина в единицах unit
            unit: Единица (Unit или её строковое значение "pt"/"in"/"mm"/"cm")

        Returns:
            Size
        """
        return cls(points=points_from(value, unit))

    @classmethod
    def sum(cls, sizes: Iterable["Size"]) -> "Size":
        """
        Сумма последовательности длин.

        Левая свёртка от Size.zero() через сложение, результат совпадает
        с последовательным a + b + c.

        Args:
            sizes: Последовательность Size

        Returns:
            Суммарная длина (Size.zero() для пустой последовательности)
        """
        total = cls.zero()
        for size in sizes:
            total = total + size
        return total

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_points(self) -> float:
        return self.points

    def to_inches(self) -> float:
        return points_to(self.points, Unit.IN)

    def to_mm(self) -> float:
        return points_to(self.points, Unit.MM)

    def to_cm(self) -> float:
        return points_to(self.points, Unit.CM)

    def to_unit(self, unit: Unit) -> float:
        return points_to(self.points, unit)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __neg__(self) -> "Size":
        return Size(points=f32_neg(self.points))

    def __add__(self, other: object) -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(points=f32_add(self.points, other.points))

    def __sub__(self, other: object) -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(points=f32_sub(self.points, other.points))

    def __mul__(self, other: object) -> "Size":
        if not is_scalar(other):
            return NotImplemented
        return Size(points=f32_mul(self.points, other))

    def __rmul__(self, other: object) -> "Size":
        if not is_scalar(other):
            return NotImplemented
        return Size(points=f32_mul(other, self.points))

    def __truediv__(self, other: object) -> "Size":
        if not is_scalar(other):
            return NotImplemented
        return Size(points=f32_div(self.points, other))

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return is_eq(partial_cmp(self.points, other.points))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return is_lt(partial_cmp(self.points, other.points))

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return is_le(partial_cmp(self.points, other.points))

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return is_gt(partial_cmp(self.points, other.points))

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return is_ge(partial_cmp(self.points, other.points))

    def __hash__(self) -> int:
        # hash(0.0) == hash(-0.0), согласовано с __eq__
        return hash(self.points)

    def is_close(
        self,
        other: "Size",
        rel_tol: float = EPS_F32_COMPARE_REL,
        abs_tol: float = EPS_F32_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение длин с учётом погрешности binary32.

        Используется для проверок конверсий туда-обратно, где точное
        равенство не гарантируется.

        Args:
            other: Другая длина
            rel_tol: Относительная толерантность
            abs_tol: Абсолютная толерантность (в points)

        Returns:
            True если длины близки
        """
        return is_close_f32(self.points, other.points, rel_tol=rel_tol, abs_tol=abs_tol)

    # =========================================================================
    # ОТОБРАЖЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return f"{format_f32(self.points)}pt"

    def __repr__(self) -> str:
        return str(self)
