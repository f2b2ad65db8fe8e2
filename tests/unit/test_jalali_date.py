"""
Тесты для модели JalaliDate

Проверяет:
1. Создание и валидацию модели Pydantic
2. Длины месяцев Jalali (Esfand 30 только в високосный год)
3. Диапазон годов jdatetime
4. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.calendar import JalaliDate, JalaliTriple
from src.core.calendar.jalali_date import JALALI_MAX_YEAR, JALALI_MIN_YEAR


# =============================================================================
# JALALI DATE TESTS
# =============================================================================


class TestJalaliDate:
    """Тесты для модели JalaliDate"""

    def test_creation(self) -> None:
        value = JalaliDate(year=1403, month=8, day=20)
        assert value.year == 1403
        assert value.month == 8
        assert value.day == 20

    def test_second_month_has_31_days(self) -> None:
        assert JalaliDate(year=1403, month=2, day=31).day == 31

    def test_seventh_month_rejects_31(self) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            JalaliDate(year=1403, month=7, day=31)

    def test_esfand_30_leap_year(self) -> None:
        assert JalaliDate(year=1403, month=12, day=30).day == 30

    def test_esfand_30_common_year(self) -> None:
        with pytest.raises(ValidationError, match="max 29"):
            JalaliDate(year=1402, month=12, day=30)

    @pytest.mark.parametrize(
        "fields",
        [
            {"year": 0, "month": 1, "day": 1},
            {"year": 1403, "month": 0, "day": 1},
            {"year": 1403, "month": 13, "day": 1},
            {"year": 1403, "month": 1, "day": 0},
            {"year": 1403, "month": 1, "day": 32},
        ],
    )
    def test_out_of_range_fields(self, fields) -> None:
        with pytest.raises(ValidationError):
            JalaliDate(**fields)

    def test_immutable(self) -> None:
        value = JalaliDate(year=1403, month=8, day=20)
        with pytest.raises(ValidationError):
            value.day = 21

    def test_triple_conversion(self) -> None:
        value = JalaliDate.from_triple(JalaliTriple(1403, 1, 1))
        assert value == JalaliDate(year=1403, month=1, day=1)
        assert value.as_triple() == (1403, 1, 1)

    def test_isoformat(self) -> None:
        assert JalaliDate(year=1403, month=8, day=9).isoformat() == "1403-08-09"


# =============================================================================
# YEAR RANGE TESTS
# =============================================================================


class TestJalaliYearRange:
    """Годы ограничены диапазоном jdatetime"""

    def test_bounds(self) -> None:
        assert (JALALI_MIN_YEAR, JALALI_MAX_YEAR) == (1, 9377)

    def test_min_year_accepted(self) -> None:
        assert JalaliDate(year=JALALI_MIN_YEAR, month=1, day=1).year == 1

    def test_max_year_accepted(self) -> None:
        assert JalaliDate(year=JALALI_MAX_YEAR, month=1, day=1).year == 9377

    def test_year_after_max_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            JalaliDate(year=JALALI_MAX_YEAR + 1, month=1, day=1)
        assert exc_info.value.errors()[0]["loc"] == ("year",)

    def test_negative_year_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            JalaliDate.from_triple(JalaliTriple(-500, 10, 11))
        assert exc_info.value.errors()[0]["loc"] == ("year",)

    def test_invalid_day_has_no_field_location(self) -> None:
        """Ошибка длины месяца приходит из model_validator, а не из поля year"""
        with pytest.raises(ValidationError) as exc_info:
            JalaliDate(year=1402, month=12, day=30)
        assert all(error["loc"] != ("year",) for error in exc_info.value.errors())
