# -*- coding: utf-8 -*-
"""Workouts domain: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..dates import as_utc, utc_now

# "" stands for an unspecified difficulty.
Difficulty = Literal["beginner", "intermediate", "expert", ""]


class WorkoutLogCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    exercise_name: str
    muscle: str = ""
    difficulty: Difficulty = ""
    equipment: str = "body_only"
    type: str = ""
    instructions: str = ""
    sets: int = Field(0, ge=0)
    reps: int = Field(0, ge=0)
    duration: float = Field(0.0, ge=0, description="minutes")
    calories_burned: float = Field(0.0, ge=0)
    date: datetime = Field(default_factory=utc_now)
    notes: str = ""

    @field_validator("exercise_name")
    @classmethod
    def _exercise_name_required(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("Exercise name is required")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_default(cls, value: Any) -> Any:
        return value or utc_now()

    @field_validator("date")
    @classmethod
    def _date_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class WorkoutLogEntry(WorkoutLogCreate):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class WorkoutDay(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    total_duration: float = 0.0
    total_calories_burned: float = 0.0
    workout_count: int = Field(0, ge=0)
    muscles: List[str] = Field(default_factory=list)


class WorkoutLogResponse(BaseModel):
    success: bool = True
    data: WorkoutLogEntry


class WorkoutLogListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[WorkoutLogEntry]


class WorkoutSummaryResponse(BaseModel):
    success: bool = True
    data: List[WorkoutDay]
