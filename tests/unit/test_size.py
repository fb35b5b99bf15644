"""
Тесты для модели Size

Проверяет:
1. Конструирование и конверсии единиц
2. Арифметику binary32 (neg/add/sub/mul/div/sum)
3. Частичный порядок и равенство (NaN, ±0)
4. Отображение "<magnitude>pt"
5. Immutability (frozen=True) и валидацию типов
"""

import math

import pytest
from pydantic import ValidationError

from spacing import Size, Unit
from spacing.core.math.float32 import to_f32

NAN = float("nan")


def pt(value: float) -> Size:
    return Size.from_points(value)


# =============================================================================
# КОНСТРУИРОВАНИЕ И КОНВЕРСИИ
# =============================================================================


class TestConstruction:
    """Тесты конструкторов Size"""

    def test_zero(self) -> None:
        """Нулевая длина"""
        assert Size.zero().to_points() == 0.0

    def test_default_is_zero(self) -> None:
        """Size() эквивалентен Size.zero()"""
        assert Size() == Size.zero()
        assert Size().to_points() == 0.0

    def test_from_points_identity(self) -> None:
        """Инвариант: from_points(p).to_points() == p"""
        for p in [0.0, 12.0, -7.5, 0.25, 1e6, math.inf]:
            assert Size.from_points(p).to_points() == p

    def test_from_points_stores_binary32(self) -> None:
        """Магнитуда хранится с точностью binary32"""
        size = Size.from_points(0.1)
        assert size.to_points() == to_f32(0.1)
        assert size.to_points() != 0.1

    def test_from_inches(self) -> None:
        assert Size.from_inches(1.0).to_points() == 72.0
        assert Size.from_inches(0.5) == pt(36.0)

    def test_from_mm(self) -> None:
        assert Size.from_mm(10.0).to_points() == pytest.approx(28.3465, rel=1e-6)

    def test_from_cm(self) -> None:
        assert Size.from_cm(1.0).to_points() == to_f32(28.3465)

    def test_from_cm_matches_ten_mm(self) -> None:
        assert Size.from_cm(1.0).is_close(Size.from_mm(10.0))

    def test_int_magnitudes(self) -> None:
        assert Size.from_points(12) == pt(12.0)
        assert Size.from_inches(2) == pt(144.0)

    def test_from_unit(self) -> None:
        assert Size.from_unit(1.0, Unit.IN) == Size.from_inches(1.0)
        assert Size.from_unit(3.0, "pt") == pt(3.0)


class TestConversions:
    """Тесты конверсий в единицы"""

    def test_to_points(self) -> None:
        assert pt(12.0).to_points() == 12.0

    @pytest.mark.parametrize("p", [0.5, 1.0, 8.5, -2.0, 11.69])
    def test_inches_roundtrip_approximate(self, p: float) -> None:
        """from_inches(p).to_inches() ≈ p (приближённые литералы)"""
        assert Size.from_inches(p).to_inches() == pytest.approx(p, rel=1e-5)

    @pytest.mark.parametrize("p", [1.0, 210.0, 297.0, -4.0])
    def test_mm_roundtrip_approximate(self, p: float) -> None:
        assert Size.from_mm(p).to_mm() == pytest.approx(p, rel=1e-5)

    @pytest.mark.parametrize("p", [1.0, 21.0, 29.7, -0.5])
    def test_cm_roundtrip_approximate(self, p: float) -> None:
        assert Size.from_cm(p).to_cm() == pytest.approx(p, rel=1e-5)

    def test_to_unit(self) -> None:
        size = pt(72.0)
        assert size.to_unit(Unit.PT) == 72.0
        assert size.to_unit(Unit.IN) == size.to_inches()
        assert size.to_unit("cm") == size.to_cm()

    def test_zero_converts_to_zero(self) -> None:
        zero = Size.zero()
        assert zero.to_inches() == 0.0
        assert zero.to_mm() == 0.0
        assert zero.to_cm() == 0.0


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты арифметики Size"""

    def test_negation(self) -> None:
        assert -pt(3.0) == pt(-3.0)
        assert -(-pt(4.5)) == pt(4.5)

    def test_addition(self) -> None:
        assert pt(1.5) + pt(2.25) == pt(3.75)

    def test_subtraction(self) -> None:
        assert pt(1.5) - pt(2.25) == pt(-0.75)

    def test_addition_commutative(self) -> None:
        """a + b == b + a"""
        a, b = pt(0.1), pt(0.7)
        assert a + b == b + a

    def test_addition_associative_approximately(self) -> None:
        """(a + b) + c ≈ a + (b + c)"""
        a, b, c = pt(0.1), pt(0.2), pt(0.3)
        assert ((a + b) + c).is_close(a + (b + c))

    def test_zero_is_additive_identity(self) -> None:
        """a + 0 == a"""
        a = pt(12.345)
        assert a + Size.zero() == a

    def test_self_subtraction_is_zero(self) -> None:
        """a - a == 0 для конечных a"""
        for value in [0.0, 1.0, -3.3, 1e30]:
            a = pt(value)
            assert a - a == Size.zero()

    def test_multiplication_float(self) -> None:
        assert pt(3.0) * 2.0 == pt(6.0)

    def test_multiplication_int(self) -> None:
        assert pt(3.0) * 2 == pt(6.0)
        assert 2 * pt(3.0) == pt(6.0)

    def test_multiplication_commutative(self) -> None:
        """2.0 * a == a * 2.0"""
        assert 2.0 * pt(3.0) == pt(3.0) * 2.0
        assert 0.3 * pt(1.7) == pt(1.7) * 0.3

    def test_division_float(self) -> None:
        assert pt(6.0) / 4.0 == pt(1.5)

    def test_division_int(self) -> None:
        assert pt(6.0) / 2 == pt(3.0)

    def test_mul_div_roundtrip_approximate(self) -> None:
        """(a * k) / k ≈ a"""
        a = pt(12.345)
        for k in [0.3, 7, -2.5, 1e-3]:
            assert ((a * k) / k).is_close(a)

    def test_division_by_zero_is_ieee(self) -> None:
        """Деление на ноль не бросает исключение"""
        assert (pt(1.0) / 0).to_points() == math.inf
        assert (pt(-1.0) / 0.0).to_points() == -math.inf
        assert math.isnan((pt(0.0) / 0).to_points())

    def test_nan_propagates(self) -> None:
        assert math.isnan((pt(NAN) + pt(1.0)).to_points())
        assert math.isnan((pt(NAN) * 0).to_points())

    def test_overflow_gives_inf(self) -> None:
        assert (pt(3e38) + pt(3e38)).to_points() == math.inf


class TestCompoundAssignment:
    """Тесты составных операторов"""

    def test_add_assign(self) -> None:
        size = pt(1.0)
        size += pt(2.0)
        assert size == pt(3.0)

    def test_sub_assign(self) -> None:
        size = pt(1.0)
        size -= pt(2.0)
        assert size == pt(-1.0)

    def test_mul_assign(self) -> None:
        size = pt(1.5)
        size *= 4
        assert size == pt(6.0)
        size *= 0.5
        assert size == pt(3.0)

    def test_div_assign(self) -> None:
        size = pt(6.0)
        size /= 4
        assert size == pt(1.5)
        size /= 0.5
        assert size == pt(3.0)

    def test_value_semantics(self) -> None:
        """Составной оператор не меняет значение под другим именем"""
        original = pt(1.0)
        alias = original
        alias += pt(5.0)
        assert original == pt(1.0)
        assert alias == pt(6.0)


class TestSum:
    """Тесты суммирования"""

    def test_sum_matches_iterative_addition(self) -> None:
        """sum([s1, s2, s3]) == s1 + s2 + s3"""
        s1, s2, s3 = pt(0.1), pt(0.2), pt(0.3)
        assert Size.sum([s1, s2, s3]) == s1 + s2 + s3

    def test_sum_empty_is_zero(self) -> None:
        assert Size.sum([]) == Size.zero()

    def test_sum_accepts_generator(self) -> None:
        assert Size.sum(pt(float(i)) for i in range(5)) == pt(10.0)

    def test_builtin_sum_with_zero_start(self) -> None:
        sizes = [pt(1.0), pt(2.5), pt(-0.5)]
        assert sum(sizes, Size.zero()) == Size.sum(sizes)


class TestUnsupportedOperands:
    """Неподдерживаемые операнды дают TypeError"""

    def test_add_number(self) -> None:
        with pytest.raises(TypeError):
            pt(1.0) + 1.0

    def test_multiply_sizes(self) -> None:
        with pytest.raises(TypeError):
            pt(1.0) * pt(2.0)

    def test_number_divided_by_size(self) -> None:
        with pytest.raises(TypeError):
            1.0 / pt(2.0)

    def test_bool_scalar(self) -> None:
        with pytest.raises(TypeError):
            pt(1.0) * True

    def test_builtin_sum_without_start(self) -> None:
        with pytest.raises(TypeError):
            sum([pt(1.0), pt(2.0)])


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


class TestOrdering:
    """Тесты порядка и равенства"""

    def test_less_than(self) -> None:
        assert pt(1.0) < pt(2.0)
        assert pt(1.0) <= pt(2.0)
        assert not pt(1.0) > pt(2.0)
        assert not pt(1.0) >= pt(2.0)

    def test_equal(self) -> None:
        assert pt(2.0) == pt(2.0)
        assert pt(2.0) <= pt(2.0)
        assert pt(2.0) >= pt(2.0)
        assert not pt(2.0) != pt(2.0)

    def test_signed_zeros_equal(self) -> None:
        """0.0 и -0.0 равны"""
        assert pt(0.0) == pt(-0.0)
        assert -Size.zero() == Size.zero()

    def test_nan_comparisons_always_false(self) -> None:
        """Сравнения с NaN никогда не True"""
        nan_size = pt(NAN)
        for other in [pt(1.0), pt(NAN), nan_size]:
            assert not nan_size < other
            assert not nan_size <= other
            assert not nan_size > other
            assert not nan_size >= other
            assert not nan_size == other
            assert nan_size != other

    def test_sorting(self) -> None:
        sizes = [pt(3.0), pt(-1.0), pt(2.0)]
        assert sorted(sizes) == [pt(-1.0), pt(2.0), pt(3.0)]
        assert max(sizes) == pt(3.0)

    def test_not_equal_to_other_types(self) -> None:
        assert pt(1.0) != 1.0

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(pt(0.0)) == hash(pt(-0.0))
        assert len({pt(1.0), Size.from_points(1), pt(2.0)}) == 2

    def test_is_close(self) -> None:
        assert pt(1.0).is_close(pt(1.000001))
        assert not pt(1.0).is_close(pt(1.1))
        assert pt(1.0).is_close(pt(1.1), rel_tol=0.2)


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


class TestDisplay:
    """Тесты отображения"""

    def test_integral(self) -> None:
        assert str(pt(12.0)) == "12pt"

    def test_fractional(self) -> None:
        assert str(pt(0.5)) == "0.5pt"
        assert str(pt(0.1)) == "0.1pt"

    def test_negative(self) -> None:
        assert str(pt(-3.0)) == "-3pt"

    def test_zero(self) -> None:
        assert str(Size.zero()) == "0pt"

    def test_repr_matches_str(self) -> None:
        size = pt(12.0)
        assert repr(size) == str(size) == "12pt"

    def test_format(self) -> None:
        assert f"{pt(4.0)}" == "4pt"

    def test_non_finite(self) -> None:
        assert str(pt(NAN)) == "NaNpt"
        assert str(pt(math.inf)) == "infpt"
        assert str(pt(-math.inf)) == "-infpt"


# =============================================================================
# IMMUTABILITY И ВАЛИДАЦИЯ
# =============================================================================


class TestValidation:
    """Тесты frozen модели и валидации типов"""

    def test_frozen(self) -> None:
        """Size immutable (frozen=True)"""
        size = pt(1.0)
        with pytest.raises(ValidationError):
            size.points = 2.0

    def test_string_magnitude_rejected(self) -> None:
        """Строки не приводятся к числу"""
        with pytest.raises(ValidationError):
            Size(points="12")

    def test_bool_magnitude_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Size(points=True)

    def test_factory_rejects_string(self) -> None:
        with pytest.raises(TypeError):
            Size.from_points("12")

    def test_keyword_construction_rounds_to_binary32(self) -> None:
        assert Size(points=0.1).to_points() == to_f32(0.1)
