# -*- coding: utf-8 -*-
"""Nutrition domain: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..dates import as_utc, utc_now

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class NutritionLogCreate(BaseModel):
    """Fields a user may set when logging food; anything else is dropped."""

    model_config = ConfigDict(extra="ignore")

    food_name: str
    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fiber: float = Field(0.0, ge=0)
    serving_size: str = "100g"
    meal_type: MealType = "snack"
    date: datetime = Field(default_factory=utc_now)
    notes: str = ""

    @field_validator("food_name")
    @classmethod
    def _food_name_required(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("Food name is required")
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _date_default(cls, value: Any) -> Any:
        return value or utc_now()

    @field_validator("date")
    @classmethod
    def _date_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class NutritionLogEntry(NutritionLogCreate):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class NutritionTotals(BaseModel):
    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0


class NutritionDay(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_fat: float = 0.0
    total_carbs: float = 0.0
    meal_count: int = Field(0, ge=0)


class TodayNutrition(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    totals: NutritionTotals
    count: int = 0
    entries: List[NutritionLogEntry] = Field(default_factory=list)


class NutritionLogResponse(BaseModel):
    success: bool = True
    data: NutritionLogEntry
    note: Optional[str] = None


class NutritionLogListResponse(BaseModel):
    success: bool = True
    count: int
    totals: NutritionTotals
    data: List[NutritionLogEntry]


class NutritionSummaryResponse(BaseModel):
    success: bool = True
    data: List[NutritionDay]


class TodayNutritionResponse(BaseModel):
    success: bool = True
    data: TodayNutrition
