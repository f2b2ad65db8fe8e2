"""
JalaliDate — Валидированная дата календаря Jalali

Immutable Pydantic модель. Адаптеры из persian.py строят её из вычисленного
JalaliTriple: ValidationError означает, что дата Jalali не существует или
вне диапазона jdatetime.
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator

from src.core.calendar.jalali import (
    JalaliTriple,
    is_valid_jalali_date,
    jalali_month_length,
)

# Диапазон годов jdatetime
JALALI_MIN_YEAR: Final[int] = 1
JALALI_MAX_YEAR: Final[int] = 9377


class JalaliDate(BaseModel):
    """
    Дата календаря Jalali.

    Инварианты:
    - JALALI_MIN_YEAR <= year <= JALALI_MAX_YEAR
    - 1 <= month <= 12
    - 1 <= day <= длина месяца (Esfand: 30 только в високосный год)
    """

    year: int = Field(..., ge=JALALI_MIN_YEAR, le=JALALI_MAX_YEAR, description="Jalali год")
    month: int = Field(..., ge=1, le=12, description="Jalali месяц 1..12")
    day: int = Field(..., ge=1, le=31, description="Jalali день 1..31")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "JalaliDate":
        """Проверка, что день не выходит за длину месяца"""
        if not is_valid_jalali_date(self.year, self.month, self.day):
            raise ValueError(
                f"Day {self.day} out of range for Jalali {self.year}-{self.month:02d} "
                f"(max {jalali_month_length(self.year, self.month)})"
            )
        return self

    @classmethod
    def from_triple(cls, triple: JalaliTriple) -> "JalaliDate":
        """Создание из JalaliTriple"""
        return cls(year=triple.year, month=triple.month, day=triple.day)

    def as_triple(self) -> JalaliTriple:
        return JalaliTriple(self.year, self.month, self.day)

    def isoformat(self) -> str:
        """YYYY-MM-DD"""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
