# -*- coding: utf-8 -*-
"""Workouts domain: API endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from ..dates import filter_from_query, resolve
from ..summary.service import workout_summary
from ..users.security import get_current_user
from .models import WorkoutLogListResponse, WorkoutLogResponse, WorkoutSummaryResponse
from .storage import workout_store

router = APIRouter(prefix="/api/v1/workouts", tags=["Workouts"])


@router.post("/log", response_model=WorkoutLogResponse, status_code=201, summary="Log a workout")
def log_workout(payload: Dict[str, Any] = Body(...), user: dict = Depends(get_current_user)):
    return WorkoutLogResponse(data=workout_store.create(user["id"], payload))


@router.get("/logs", response_model=WorkoutLogListResponse, summary="List workout logs")
def get_logs(
    date: Optional[str] = Query(None, description="YYYY-MM-DD (one calendar day, UTC)"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    limit: int = Query(50, ge=1, le=500),
    user: dict = Depends(get_current_user),
):
    date_range = resolve(filter_from_query(date, start_date, end_date))
    logs = workout_store.find_by_user_and_range(user["id"], date_range, limit=limit)
    return WorkoutLogListResponse(count=len(logs), data=logs)


@router.delete("/log/{log_id}", summary="Delete a workout log")
def delete_log(log_id: str, user: dict = Depends(get_current_user)):
    workout_store.delete_owned(log_id, user["id"])
    return {"success": True, "message": "Workout log deleted"}


@router.get("/summary", response_model=WorkoutSummaryResponse, summary="Per-day workout volume")
def get_workout_summary(days: int = Query(7, ge=1, le=365), user: dict = Depends(get_current_user)):
    return WorkoutSummaryResponse(data=workout_summary(user["id"], days))
