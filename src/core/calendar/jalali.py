"""
Jalali — Gregorian → Solar Hijri (Jalali) date arithmetic

Источник алгоритма: jdf (https://jdf.scr.ir)

Модуль содержит чистую функцию конверсии григорианской даты в дату
календаря Jalali и базовые факты о календаре Jalali:
- Абсолютный счёт дней от эпохи, выровненной на Jalali год -1595
- Разбиение на 33-летние циклы (12053 дня) и 4-летние группы (1461 день)
- Длины месяцев: 1-6 → 31 день, 7-11 → 30 дней, 12 → 29/30 дней
- Високосные годы 33-летнего цикла

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Только целочисленная арифметика, деление через floor division (//, %)
2. Функция конверсии тотальна: входная дата НЕ валидируется
   (2023-02-30 обрабатывается как 2023-03-02)
3. Для любой валидной григорианской даты результат является валидной датой Jalali
4. Все операции детерминированы и воспроизводимы
"""

from datetime import date
from typing import Final, NamedTuple

# =============================================================================
# КОНСТАНТЫ АЛГОРИТМА
# =============================================================================

# Дни, прошедшие до начала месяца m (без учёта високосного дня)
GREGORIAN_DAYS_BEFORE_MONTH: Final[tuple[int, ...]] = (
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Сдвиг эпохи: день 0 счёта соответствует началу Jalali года -1595
JALALI_EPOCH_DAY_OFFSET: Final[int] = 355666
JALALI_EPOCH_YEAR: Final[int] = -1595

# 33 года Jalali = 12053 дня (8 високосных лет в цикле)
DAYS_PER_33_YEAR_CYCLE: Final[int] = 12053
YEARS_PER_CYCLE: Final[int] = 33

# Группа из 4 лет = 1461 день (1 високосный + 3 обычных)
DAYS_PER_4_YEAR_GROUP: Final[int] = 1461

# Первые 6 месяцев по 31 дню = 186 дней
DAYS_IN_FIRST_HALF: Final[int] = 186

# Позиции високосных лет внутри 33-летнего цикла (year % 33)
JALALI_LEAP_REMAINDERS: Final[frozenset[int]] = frozenset({1, 5, 9, 13, 17, 22, 26, 30})


# =============================================================================
# TYPES
# =============================================================================


class JalaliTriple(NamedTuple):
    """Дата календаря Jalali как (year, month, day)."""
    year: int
    month: int  # 1..12
    day: int  # 1..31


# =============================================================================
# GREGORIAN → JALALI
# =============================================================================


def gregorian_to_jalali(gy: int, gm: int, gd: int) -> JalaliTriple:
    """
    Конверсия григорианской даты (gy, gm, gd) в дату Jalali.

    Алгоритм:
        gy2 = gy + 1 если gm > 2, иначе gy  (граница високосного дня → март)
        days = 355666 + 365*gy + (gy2+3)//4 - (gy2+99)//100 + (gy2+399)//400
               + gd + days_before_month[gm-1]
        jy = -1595 + 33 * (days // 12053);  days %= 12053
        jy += 4 * (days // 1461);           days %= 1461
        если days > 365: jy += (days-1)//365; days = (days-1) % 365
        days < 186 → месяцы по 31 дню, иначе → по 30 дней

    Валидность входной даты не проверяется.

    Args:
        gy: Григорианский год (валидированный диапазон: >= 1)
        gm: Григорианский месяц 1..12
        gd: Григорианский день 1..31

    Returns:
        JalaliTriple(year, month, day)

    Examples:
        >>> gregorian_to_jalali(2024, 11, 10)
        JalaliTriple(year=1403, month=8, day=20)
        >>> gregorian_to_jalali(2024, 3, 20)
        JalaliTriple(year=1403, month=1, day=1)
        >>> gregorian_to_jalali(2017, 1, 1)
        JalaliTriple(year=1395, month=10, day=12)
    """
    gy2 = gy + 1 if gm > 2 else gy

    days = (
        JALALI_EPOCH_DAY_OFFSET
        + 365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + gd
        + GREGORIAN_DAYS_BEFORE_MONTH[gm - 1]
    )

    jy = JALALI_EPOCH_YEAR + YEARS_PER_CYCLE * (days // DAYS_PER_33_YEAR_CYCLE)
    days %= DAYS_PER_33_YEAR_CYCLE

    jy += 4 * (days // DAYS_PER_4_YEAR_GROUP)
    days %= DAYS_PER_4_YEAR_GROUP

    # Первый год 4-летней группы високосный (366 дней)
    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    if days < DAYS_IN_FIRST_HALF:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        jm = 7 + (days - DAYS_IN_FIRST_HALF) // 30
        jd = 1 + (days - DAYS_IN_FIRST_HALF) % 30

    return JalaliTriple(jy, jm, jd)


def date_to_jalali(value: date) -> JalaliTriple:
    """
    Конверсия datetime.date (или datetime.datetime по его полям даты).

    Часовой пояс НЕ учитывается: берутся поля year/month/day как есть.
    Для aware datetime используйте адаптеры из src.core.calendar.persian.

    Examples:
        >>> date_to_jalali(date(2023, 3, 21))
        JalaliTriple(year=1402, month=1, day=1)
    """
    return gregorian_to_jalali(value.year, value.month, value.day)


# =============================================================================
# ФАКТЫ КАЛЕНДАРЯ JALALI
# =============================================================================


def is_jalali_leap_year(jy: int) -> bool:
    """
    Високосный ли год Jalali (33-летний арифметический цикл).

    Совпадает с разбиением, которое использует gregorian_to_jalali:
    первый год каждой 4-летней группы цикла имеет 366 дней.

    Examples:
        >>> is_jalali_leap_year(1403)
        True
        >>> is_jalali_leap_year(1402)
        False
        >>> is_jalali_leap_year(1399)
        True
    """
    return jy % YEARS_PER_CYCLE in JALALI_LEAP_REMAINDERS


def jalali_month_length(jy: int, jm: int) -> int:
    """
    Количество дней в месяце jm года jy.

    Raises:
        ValueError: если jm вне диапазона 1..12

    Examples:
        >>> jalali_month_length(1403, 1)
        31
        >>> jalali_month_length(1403, 7)
        30
        >>> jalali_month_length(1403, 12)
        30
        >>> jalali_month_length(1402, 12)
        29
    """
    if not 1 <= jm <= 12:
        raise ValueError(f"Jalali month must be in 1..12, got {jm}")

    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_jalali_leap_year(jy) else 29


def is_valid_jalali_date(jy: int, jm: int, jd: int) -> bool:
    """
    Проверка, образует ли (jy, jm, jd) существующую дату Jalali.

    Год не ограничивается: проверяются только месяц и день.

    Examples:
        >>> is_valid_jalali_date(1403, 2, 31)
        True
        >>> is_valid_jalali_date(1403, 7, 31)
        False
        >>> is_valid_jalali_date(1402, 12, 30)
        False
    """
    if not 1 <= jm <= 12:
        return False
    return 1 <= jd <= jalali_month_length(jy, jm)
