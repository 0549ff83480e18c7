# -*- coding: utf-8 -*-
"""Metrics engine: pure computations over in-memory log entries.

Nothing here touches the database. Entries may be pydantic models or plain
dicts; missing numeric fields count as 0. Every rounded value uses
:func:`round_one` (one decimal, half rounds up).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .dates import as_utc
from .nutrition.models import NutritionDay, NutritionTotals
from .progress.models import ProgressSummary
from .workouts.models import WorkoutDay

_NUTRITION_FIELDS = ("calories", "protein", "fat", "carbs")


def round_one(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def _get(entry: Any, name: str) -> Any:
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def _num(entry: Any, name: str) -> float:
    value = _get(entry, name)
    return float(value) if value else 0.0


def compute_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> float:
    if not weight_kg or not height_cm or height_cm <= 0:
        return 0.0
    height_m = height_cm / 100
    return round_one(weight_kg / (height_m * height_m))


def daily_totals(entries: Iterable[Any]) -> NutritionTotals:
    """Sum calories/protein/fat/carbs; totals themselves are not rounded."""
    items = list(entries)
    sums = {name: math.fsum(_num(e, name) for e in items) for name in _NUTRITION_FIELDS}
    return NutritionTotals(**sums)


def _entry_time(entry: Any) -> datetime:
    value = _get(entry, "date")
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return as_utc(value)


def period_summary(entries: Iterable[Any], period: str) -> ProgressSummary:
    ordered = sorted(entries, key=_entry_time)
    if not ordered:
        return ProgressSummary(period=period)

    first, last = ordered[0], ordered[-1]
    start_weight = _num(first, "weight")
    end_weight = _num(last, "weight")
    avg_bmi = math.fsum(_num(e, "bmi") for e in ordered) / len(ordered)
    return ProgressSummary(
        period=period,
        entries=len(ordered),
        start_weight=start_weight,
        end_weight=end_weight,
        weight_change=round_one(end_weight - start_weight),
        avg_bmi=round_one(avg_bmi),
        latest_bmi=_num(last, "bmi"),
    )


def day_key(value: Any) -> str:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return as_utc(value).strftime("%Y-%m-%d")


@dataclass
class DayBucket:
    day: str
    totals: Dict[str, float] = field(default_factory=dict)
    count: int = 0
    distinct: List[str] = field(default_factory=list)


def bucket_by_day(
    entries: Iterable[Any],
    date_field: str,
    group_fields: Sequence[str],
    distinct_field: Optional[str] = None,
) -> List[DayBucket]:
    """Group entries by UTC calendar day and sum ``group_fields`` per day.

    With ``distinct_field`` each bucket also collects the set of distinct
    non-empty values of that field (sorted for stable output).
    """
    values: Dict[str, Dict[str, List[float]]] = {}
    counts: Dict[str, int] = {}
    seen: Dict[str, set] = {}

    for entry in entries:
        day = day_key(_get(entry, date_field))
        per_field = values.setdefault(day, {name: [] for name in group_fields})
        for name in group_fields:
            per_field[name].append(_num(entry, name))
        counts[day] = counts.get(day, 0) + 1
        if distinct_field:
            marker = _get(entry, distinct_field)
            bucket_seen = seen.setdefault(day, set())
            if marker:
                bucket_seen.add(str(marker))

    out: List[DayBucket] = []
    for day in sorted(values.keys()):
        out.append(
            DayBucket(
                day=day,
                totals={name: math.fsum(v) for name, v in values[day].items()},
                count=counts[day],
                distinct=sorted(seen.get(day, ())),
            )
        )
    return out


def nutrition_by_day(entries: Iterable[Any]) -> List[NutritionDay]:
    return [
        NutritionDay(
            date=b.day,
            total_calories=b.totals["calories"],
            total_protein=b.totals["protein"],
            total_fat=b.totals["fat"],
            total_carbs=b.totals["carbs"],
            meal_count=b.count,
        )
        for b in bucket_by_day(entries, "date", _NUTRITION_FIELDS)
    ]


def workouts_by_day(entries: Iterable[Any]) -> List[WorkoutDay]:
    return [
        WorkoutDay(
            date=b.day,
            total_duration=b.totals["duration"],
            total_calories_burned=b.totals["calories_burned"],
            workout_count=b.count,
            muscles=b.distinct,
        )
        for b in bucket_by_day(entries, "date", ("duration", "calories_burned"), distinct_field="muscle")
    ]
