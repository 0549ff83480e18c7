# -*- coding: utf-8 -*-
"""Summary: Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ..nutrition.models import NutritionDay, TodayNutrition
from ..progress.models import ProgressEntry, ProgressSummary
from ..workouts.models import WorkoutDay


class Dashboard(BaseModel):
    today: TodayNutrition
    latest_progress: Optional[ProgressEntry] = None
    nutrition_week: List[NutritionDay] = Field(default_factory=list)
    workout_week: List[WorkoutDay] = Field(default_factory=list)
    progress_week: ProgressSummary
    warnings: List[str] = Field(default_factory=list)


class DashboardResponse(BaseModel):
    success: bool = True
    data: Dashboard
