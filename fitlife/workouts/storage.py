# -*- coding: utf-8 -*-
"""Workouts domain: SQLite storage."""

from __future__ import annotations

from ..log_store import LogStore
from .models import WorkoutLogCreate, WorkoutLogEntry

workout_store: LogStore[WorkoutLogEntry] = LogStore(
    table="workout_logs",
    create_model=WorkoutLogCreate,
    entry_model=WorkoutLogEntry,
    default_limit=50,
    label="Log",
)
