# -*- coding: utf-8 -*-
"""Summary service.

Each query reads the owner's entries for a resolved date range and hands
them to the metrics engine. Nothing is cached; every call hits the store.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..dates import ExactDay, RollingWindow, as_utc, resolve, utc_now
from ..errors import ValidationError, validate_payload
from ..metrics import compute_bmi, daily_totals, nutrition_by_day, period_summary, workouts_by_day
from ..nutrition.models import NutritionDay, NutritionTotals, TodayNutrition
from ..nutrition.storage import nutrition_store
from ..progress.models import ProgressCreate, ProgressEntry, ProgressRecord, ProgressSummary
from ..progress.storage import progress_store
from ..users.models import DEFAULT_HEIGHT_CM
from ..workouts.models import WorkoutDay
from ..workouts.storage import workout_store
from .models import Dashboard

logger = logging.getLogger(__name__)

T = TypeVar("T")

PERIOD_DAYS = {"weekly": 7, "monthly": 30}

# Upper bound on entries pulled into one aggregation window.
_WINDOW_LIMIT = 10_000


def today_nutrition(user_id: str, now: Optional[datetime] = None) -> TodayNutrition:
    today = as_utc(now or utc_now()).date()
    entries = nutrition_store.find_by_user_and_range(user_id, resolve(ExactDay(today)), limit=_WINDOW_LIMIT)
    return TodayNutrition(
        date=today.isoformat(),
        totals=daily_totals(entries),
        count=len(entries),
        entries=entries,
    )


def nutrition_summary(user_id: str, days: int = 7, now: Optional[datetime] = None) -> List[NutritionDay]:
    window = resolve(RollingWindow(days), now=now)
    entries = nutrition_store.find_by_user_and_range(user_id, window, limit=_WINDOW_LIMIT)
    return nutrition_by_day(entries)


def workout_summary(user_id: str, days: int = 7, now: Optional[datetime] = None) -> List[WorkoutDay]:
    window = resolve(RollingWindow(days), now=now)
    entries = workout_store.find_by_user_and_range(user_id, window, limit=_WINDOW_LIMIT)
    return workouts_by_day(entries)


def progress_summary(user_id: str, period: str = "weekly", now: Optional[datetime] = None) -> ProgressSummary:
    days = PERIOD_DAYS.get(period)
    if days is None:
        raise ValidationError(f"period must be one of: {', '.join(PERIOD_DAYS)}")
    window = resolve(RollingWindow(days), now=now)
    entries = progress_store.find_by_user_and_range(user_id, window, limit=_WINDOW_LIMIT)
    return period_summary(entries, period)


def bmi_for_user(user: Dict[str, Any], weight: Optional[float]) -> float:
    return compute_bmi(weight, user.get("height") or DEFAULT_HEIGHT_CM)


def record_progress(user: Dict[str, Any], fields: Any) -> ProgressEntry:
    """Store a measurement with its BMI fixed at the user's current height."""
    data = validate_payload(ProgressCreate, fields)
    record = ProgressRecord(**data.model_dump(), bmi=bmi_for_user(user, data.weight))
    return progress_store.create(user["id"], record)


def _degrade(name: str, query: Callable[[], T], default: T, warnings: List[str]) -> T:
    try:
        return query()
    except Exception:
        logger.warning("Dashboard part %s failed; using default", name, exc_info=True)
        warnings.append(f"{name} unavailable")
        return default


def dashboard(user_id: str, now: Optional[datetime] = None) -> Dashboard:
    """Independent sub-queries; one failing leaves the others intact."""
    now = as_utc(now or utc_now())
    warnings: List[str] = []

    today = _degrade(
        "today",
        lambda: today_nutrition(user_id, now=now),
        TodayNutrition(date=now.date().isoformat(), totals=NutritionTotals()),
        warnings,
    )
    latest = _degrade(
        "latest_progress",
        lambda: next(iter(progress_store.find_by_user_and_range(user_id, limit=1)), None),
        None,
        warnings,
    )
    nutrition_week = _degrade("nutrition_week", lambda: nutrition_summary(user_id, 7, now=now), [], warnings)
    workout_week = _degrade("workout_week", lambda: workout_summary(user_id, 7, now=now), [], warnings)
    progress_week = _degrade(
        "progress_week",
        lambda: progress_summary(user_id, "weekly", now=now),
        ProgressSummary(period="weekly"),
        warnings,
    )
    return Dashboard(
        today=today,
        latest_progress=latest,
        nutrition_week=nutrition_week,
        workout_week=workout_week,
        progress_week=progress_week,
        warnings=warnings,
    )
