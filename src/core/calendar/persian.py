"""
Persian — Timezone-aware адаптеры Gregorian → Jalali

Для каждого вида представления (NAIVE / UTC / LOCAL) выполняется:
    normalize → convert date → reconstruct

- UTC:   момент переводится в IRAN_STANDARD_TIME, дата конвертируется,
         результат = дата Jalali + время IRST, метка timezone.utc
         (поля часов содержат IRST-время, обратного перевода в UTC нет)
- LOCAL: то же, метка результата ZERO_OFFSET (+00:00)
- NAIVE: к значению присоединяется IRAN_STANDARD_TIME (fold=0, самая ранняя
         интерпретация), дата конвертируется, результат снова naive

Отсутствие результата (None) вместо исключений:
- invalid_jalali_date: вычисленная дата Jalali не существует
- jalali_out_of_range: год Jalali вне диапазона jdatetime (1..9377)
- timezone_resolution_failed: не удалось привязать/перевести в IRST

Выходной тип: jdatetime.datetime того же вида (naive/aware), что и вход.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Optional

import jdatetime
from pydantic import ValidationError

from src.core.calendar.jalali import JalaliTriple, date_to_jalali
from src.core.calendar.jalali_date import JalaliDate
from src.core.calendar.timezones import (
    IRAN_STANDARD_TIME,
    ZERO_OFFSET,
    TemporalKind,
    classify_datetime,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidJalaliDate(ValueError):
    """
    Конверсия не дала валидной даты Jalali.

    Поднимается ТОЛЬКО из ConversionResult.unwrap(); адаптеры возвращают None.
    """


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат конверсии одного значения."""

    ok: bool
    block_reason: str

    kind: TemporalKind
    value: Optional[jdatetime.datetime]

    # Нормализованный (IRST) datetime и вычисленная дата, если дошли до них
    normalized: Optional[datetime] = None
    jalali: Optional[JalaliTriple] = None

    # Offset метки результата; None для NAIVE и при неуспехе
    utc_offset: Optional[timedelta] = None

    details: str = ""

    def unwrap(self) -> jdatetime.datetime:
        """
        Значение или исключение.

        Raises:
            InvalidJalaliDate: если ok=False
        """
        if not self.ok or self.value is None:
            raise InvalidJalaliDate(f"{self.block_reason}: {self.details}")
        return self.value


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PersianConverterConfig:
    """Конфигурация конвертера.

    Значения по умолчанию: фиксированные константы библиотеки.
    """

    # Часовой пояс, в котором определяется календарный день
    reference_tz: tzinfo = IRAN_STANDARD_TIME

    # Метка результата для UTC входа
    utc_output_tz: tzinfo = timezone.utc

    # Метка результата для LOCAL входа (+00:00, не +03:30)
    local_output_tz: tzinfo = ZERO_OFFSET


# =============================================================================
# CONVERTER
# =============================================================================


class PersianConverter:
    """Конвертер datetime → jdatetime.datetime.

    Stateless после инициализации; один экземпляр безопасно
    использовать из нескольких потоков.
    """

    def __init__(self, config: Optional[PersianConverterConfig] = None):
        self.config = config or PersianConverterConfig()
        self._handlers: dict[TemporalKind, Callable[[datetime], ConversionResult]] = {
            TemporalKind.NAIVE: self._convert_naive,
            TemporalKind.UTC: self._convert_utc,
            TemporalKind.LOCAL: self._convert_local,
        }

    def evaluate(
        self,
        value: datetime,
        kind: Optional[TemporalKind] = None,
    ) -> ConversionResult:
        """Конверсия value с явным или автоматически определённым видом.

        Args:
            value: исходный григорианский datetime
            kind: вид представления; None → classify_datetime(value)

        Returns:
            ConversionResult (ok=False вместо исключения при неуспехе)

        Raises:
            TypeError: если value не datetime
            ValueError: если kind=NAIVE для aware значения или
                        kind=UTC/LOCAL для naive значения
        """
        detected = classify_datetime(value)
        if kind is None:
            kind = detected
        else:
            kind = TemporalKind(kind)
            if (kind == TemporalKind.NAIVE) != (detected == TemporalKind.NAIVE):
                raise ValueError(
                    f"Cannot convert {detected.value} datetime as {kind.value}"
                )

        return self._handlers[kind](value)

    def convert(
        self,
        value: datetime,
        kind: Optional[TemporalKind] = None,
    ) -> Optional[jdatetime.datetime]:
        """То же, что evaluate(), но возвращает только значение или None."""
        return self.evaluate(value, kind).value

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _convert_utc(self, value: datetime) -> ConversionResult:
        return self._convert_aware(value, TemporalKind.UTC, self.config.utc_output_tz)

    def _convert_local(self, value: datetime) -> ConversionResult:
        return self._convert_aware(value, TemporalKind.LOCAL, self.config.local_output_tz)

    def _convert_aware(
        self,
        value: datetime,
        kind: TemporalKind,
        output_tz: tzinfo,
    ) -> ConversionResult:
        # 1. Normalize: тот же момент, увиденный в reference timezone
        try:
            normalized = value.astimezone(self.config.reference_tz)
        except (OverflowError, ValueError) as e:
            return _failure(
                kind,
                "timezone_resolution_failed",
                f"Cannot express {value.isoformat()} in reference timezone: {e}",
            )

        # 2-3. Convert date + reconstruct с новой меткой
        return self._reconstruct(normalized, kind, output_tz)

    def _convert_naive(self, value: datetime) -> ConversionResult:
        kind = TemporalKind.NAIVE

        # 1. Normalize: присоединяем reference timezone, fold=0 → earliest
        attached = value.replace(tzinfo=self.config.reference_tz, fold=0)
        try:
            resolved = attached.utcoffset() is not None
        except (OverflowError, ValueError):
            resolved = False
        if not resolved:
            return _failure(
                kind,
                "timezone_resolution_failed",
                f"Cannot attach reference timezone to {value.isoformat()}",
            )

        # 2-3. Convert date + reconstruct без timezone
        return self._reconstruct(attached, kind, None)

    def _reconstruct(
        self,
        normalized: datetime,
        kind: TemporalKind,
        output_tz: Optional[tzinfo],
    ) -> ConversionResult:
        triple = date_to_jalali(normalized)

        try:
            jalali_date = JalaliDate.from_triple(triple)
        except ValidationError as e:
            year_error = any(error["loc"] == ("year",) for error in e.errors())
            return _failure(
                kind,
                "jalali_out_of_range" if year_error else "invalid_jalali_date",
                f"Jalali {triple.year}-{triple.month:02d}-{triple.day:02d} is not a valid date",
                normalized=normalized,
                jalali=triple,
            )

        value = jdatetime.datetime(
            jalali_date.year,
            jalali_date.month,
            jalali_date.day,
            normalized.hour,
            normalized.minute,
            normalized.second,
            normalized.microsecond,
            tzinfo=output_tz,
        )

        utc_offset = None
        if output_tz is not None:
            utc_offset = output_tz.utcoffset(normalized.replace(tzinfo=None))

        return ConversionResult(
            ok=True,
            block_reason="",
            kind=kind,
            value=value,
            normalized=normalized,
            jalali=triple,
            utc_offset=utc_offset,
            details="OK",
        )


def _failure(
    kind: TemporalKind,
    block_reason: str,
    details: str,
    normalized: Optional[datetime] = None,
    jalali: Optional[JalaliTriple] = None,
) -> ConversionResult:
    return ConversionResult(
        ok=False,
        block_reason=block_reason,
        kind=kind,
        value=None,
        normalized=normalized,
        jalali=jalali,
        details=details,
    )


# Экземпляр по умолчанию (константы библиотеки)
_DEFAULT_CONVERTER = PersianConverter()


# =============================================================================
# PUBLIC API
# =============================================================================


def to_persian_equivalent(
    value: datetime,
    kind: Optional[TemporalKind] = None,
) -> Optional[jdatetime.datetime]:
    """
    Jalali-эквивалент datetime того же вида представления.

    Диапазон результата ограничен jdatetime (Jalali годы 1..9377):
    валидные григорианские даты до 0622-03-21 (по IRST) и после 9999-03-20
    дают None с block_reason="jalali_out_of_range", хотя
    gregorian_to_jalali для них считается.

    Examples:
        >>> utc = datetime(2024, 11, 9, 22, 38, 28, tzinfo=timezone.utc)
        >>> p = to_persian_equivalent(utc)
        >>> (p.year, p.month, p.day, p.hour, p.minute, p.second)
        (1403, 8, 20, 2, 8, 28)
        >>> p.tzinfo is timezone.utc
        True
        >>> naive = datetime(2024, 11, 9, 23, 7)
        >>> p = to_persian_equivalent(naive)
        >>> (p.year, p.month, p.day, p.hour, p.minute, p.tzinfo)
        (1403, 8, 19, 23, 7, None)
    """
    return _DEFAULT_CONVERTER.convert(value, kind)


def utc_to_persian(value: datetime) -> Optional[jdatetime.datetime]:
    """UTC момент → jdatetime с меткой UTC (поля = дата Jalali + время IRST)."""
    return _DEFAULT_CONVERTER.convert(value, TemporalKind.UTC)


def local_to_persian(value: datetime) -> Optional[jdatetime.datetime]:
    """Момент в +03:30 → jdatetime с меткой ZERO_OFFSET."""
    return _DEFAULT_CONVERTER.convert(value, TemporalKind.LOCAL)


def naive_to_persian(value: datetime) -> Optional[jdatetime.datetime]:
    """Naive datetime → naive jdatetime."""
    return _DEFAULT_CONVERTER.convert(value, TemporalKind.NAIVE)
