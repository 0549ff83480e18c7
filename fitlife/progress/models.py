# -*- coding: utf-8 -*-
"""Progress domain: Pydantic models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..dates import as_utc, utc_now


class ProgressCreate(BaseModel):
    """User input for a measurement; ``bmi`` is derived, never accepted."""

    model_config = ConfigDict(extra="ignore")

    weight: float = Field(..., gt=0, description="kg")
    body_fat: float = Field(0.0, ge=0, le=100, description="percent")
    waist: float = Field(0.0, ge=0)
    date: datetime = Field(default_factory=utc_now)
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _date_default(cls, value: Any) -> Any:
        return value or utc_now()

    @field_validator("date")
    @classmethod
    def _date_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class ProgressRecord(ProgressCreate):
    """Validated row content; ``bmi`` is filled in by the service."""

    bmi: float = Field(0.0, ge=0)


class ProgressEntry(ProgressRecord):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class ProgressSummary(BaseModel):
    period: str
    entries: int = 0
    start_weight: Optional[float] = None
    end_weight: Optional[float] = None
    weight_change: float = 0.0
    avg_bmi: float = 0.0
    latest_bmi: Optional[float] = None


class ProgressEntryResponse(BaseModel):
    success: bool = True
    data: ProgressEntry


class ProgressListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[ProgressEntry]


class ProgressSummaryResponse(BaseModel):
    success: bool = True
    data: ProgressSummary
