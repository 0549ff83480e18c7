# -*- coding: utf-8 -*-
"""Nutrition domain: SQLite storage."""

from __future__ import annotations

from ..log_store import LogStore
from .models import NutritionLogCreate, NutritionLogEntry

nutrition_store: LogStore[NutritionLogEntry] = LogStore(
    table="nutrition_logs",
    create_model=NutritionLogCreate,
    entry_model=NutritionLogEntry,
    default_limit=50,
    label="Log",
)


def describe_entry(entry: NutritionLogEntry) -> str:
    """One-line confirmation shown to the user after logging food."""
    calories = f"{entry.calories:g}"
    protein = f"{entry.protein:g}"
    return f"Added {entry.serving_size or '1 serving'} {entry.food_name}: {calories} kcal, {protein}g protein"
