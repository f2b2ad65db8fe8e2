"""
Calendar modules для persian-chrono

Конверсия Gregorian → Jalali и timezone-aware адаптеры.
Внутренние константы алгоритма доступны через src.core.calendar.jalali.
"""

from src.core.calendar.jalali import JalaliTriple, gregorian_to_jalali
from src.core.calendar.jalali_date import JalaliDate
from src.core.calendar.persian import (
    ConversionResult,
    InvalidJalaliDate,
    PersianConverter,
    PersianConverterConfig,
    local_to_persian,
    naive_to_persian,
    to_persian_equivalent,
    utc_to_persian,
)
from src.core.calendar.timezones import IRAN_STANDARD_TIME, ZERO_OFFSET, TemporalKind

__all__ = [
    # Conversion
    "to_persian_equivalent",
    "utc_to_persian",
    "local_to_persian",
    "naive_to_persian",
    "gregorian_to_jalali",
    # Types
    "JalaliTriple",
    "JalaliDate",
    "TemporalKind",
    "ConversionResult",
    "InvalidJalaliDate",
    # Config
    "PersianConverter",
    "PersianConverterConfig",
    "IRAN_STANDARD_TIME",
    "ZERO_OFFSET",
]
