# -*- coding: utf-8 -*-
"""Date filters for log queries.

A query selects entries by exactly one of three shapes: a single calendar
day, an explicit range, or a rolling window of the last N days. Each shape
is resolved once into a concrete :class:`DateRange` before it reaches the
store. All calendar arithmetic happens in UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

from .errors import ValidationError

_END_OF_DAY = time(23, 59, 59, 999000)


@dataclass(frozen=True)
class ExactDay:
    day: date


@dataclass(frozen=True)
class Range:
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class RollingWindow:
    days: int


DateFilter = Union[ExactDay, Range, RollingWindow]


@dataclass(frozen=True)
class DateRange:
    """Inclusive [start, end] bounds; ``None`` leaves that side open."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, _END_OF_DAY, tzinfo=timezone.utc)


def to_storage(value: datetime) -> str:
    """Fixed-width UTC text, so string order equals time order in SQL."""
    dt = as_utc(value)
    return f"{dt.year:04d}-" + dt.strftime("%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def resolve(date_filter: Optional[DateFilter], now: Optional[datetime] = None) -> DateRange:
    if date_filter is None:
        return DateRange()
    if isinstance(date_filter, ExactDay):
        return DateRange(start_of_day(date_filter.day), end_of_day(date_filter.day))
    if isinstance(date_filter, Range):
        start = as_utc(date_filter.start) if date_filter.start else None
        end = as_utc(date_filter.end) if date_filter.end else None
        return DateRange(start, end)
    if isinstance(date_filter, RollingWindow):
        if date_filter.days < 0:
            raise ValidationError("days must not be negative")
        today = as_utc(now or utc_now()).date()
        # Open-ended: entries dated after today still fall inside the window.
        return DateRange(start_of_day(today - timedelta(days=date_filter.days)), None)
    raise TypeError(f"unsupported date filter: {date_filter!r}")


def parse_when(value: str, *, field: str = "date", end: bool = False) -> datetime:
    """Parse an ISO date or datetime from a query string.

    A bare ``YYYY-MM-DD`` becomes the start of that day, or its last
    millisecond when ``end`` is set, so ranges stay inclusive.
    """
    raw = (value or "").strip()
    if not raw:
        raise ValidationError(f"{field}: value is required")
    try:
        if len(raw) == 10:
            day = date.fromisoformat(raw)
            return end_of_day(day) if end else start_of_day(day)
        return as_utc(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError as exc:
        raise ValidationError(f"{field}: invalid date '{raw}'") from exc


def filter_from_query(
    day: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Optional[DateFilter]:
    if day:
        return ExactDay(parse_when(day, field="date").date())
    if start_date or end_date:
        return Range(
            parse_when(start_date, field="startDate") if start_date else None,
            parse_when(end_date, field="endDate", end=True) if end_date else None,
        )
    return None
