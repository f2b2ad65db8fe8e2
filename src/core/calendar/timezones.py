"""
Timezones — Reference timezone и виды временных представлений

Модуль фиксирует две неизменяемые константы процесса:
- IRAN_STANDARD_TIME: фиксированный offset +03:30 (Iran Standard Time).
  Используется ТОЛЬКО для определения, какому календарному дню
  принадлежит момент времени перед конверсией.
- ZERO_OFFSET: фиксированный offset +00:00 для маркировки результата
  конверсии reference-timezone значений.

Константы создаются один раз при импорте модуля (import lock Python
гарантирует однократную инициализацию) и далее только читаются.

Это НЕ локальный часовой пояс ОС: "Local" в терминах библиотеки означает
привязку к IRAN_STANDARD_TIME.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

IRAN_STANDARD_TIME_OFFSET: Final[timedelta] = timedelta(hours=3, minutes=30)

IRAN_STANDARD_TIME: Final[timezone] = timezone(IRAN_STANDARD_TIME_OFFSET, "IRST")

# timezone(timedelta(0)) без имени == timezone.utc, поэтому имя обязательно
ZERO_OFFSET: Final[timezone] = timezone(timedelta(0), "+00:00")


# =============================================================================
# ENUMS
# =============================================================================


class TemporalKind(str, Enum):
    """Вид временного представления (вход и выход одного вида)."""

    NAIVE = "naive"  # Без часового пояса
    UTC = "utc"  # Момент в UTC
    LOCAL = "local"  # Момент, привязанный к IRAN_STANDARD_TIME


# =============================================================================
# CLASSIFICATION
# =============================================================================


def classify_datetime(value: datetime) -> TemporalKind:
    """
    Определение вида представления для datetime.

    Правила:
        tzinfo отсутствует или utcoffset() is None → NAIVE
        utcoffset() == 0                           → UTC
        любой другой offset                        → LOCAL

    Raises:
        TypeError: если value не datetime

    Examples:
        >>> classify_datetime(datetime(2024, 11, 9, 23, 7))
        <TemporalKind.NAIVE: 'naive'>
        >>> classify_datetime(datetime(2024, 11, 9, tzinfo=timezone.utc))
        <TemporalKind.UTC: 'utc'>
        >>> classify_datetime(datetime(2024, 11, 10, tzinfo=IRAN_STANDARD_TIME))
        <TemporalKind.LOCAL: 'local'>
    """
    if not isinstance(value, datetime):
        raise TypeError(f"Expected datetime, got {type(value).__name__}")

    offset: Optional[timedelta] = value.utcoffset()
    if offset is None:
        return TemporalKind.NAIVE
    if offset == timedelta(0):
        return TemporalKind.UTC
    return TemporalKind.LOCAL
