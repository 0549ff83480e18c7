# -*- coding: utf-8 -*-
"""Nutrition domain: API endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from ..dates import filter_from_query, resolve
from ..metrics import daily_totals
from ..summary.service import nutrition_summary, today_nutrition
from ..users.security import get_current_user
from .models import (
    NutritionLogListResponse,
    NutritionLogResponse,
    NutritionSummaryResponse,
    TodayNutritionResponse,
)
from .storage import describe_entry, nutrition_store

router = APIRouter(prefix="/api/v1/nutrition", tags=["Nutrition"])


@router.post("/log", response_model=NutritionLogResponse, status_code=201, summary="Log a nutrition entry")
def log_nutrition(payload: Dict[str, Any] = Body(...), user: dict = Depends(get_current_user)):
    entry = nutrition_store.create(user["id"], payload)
    return NutritionLogResponse(data=entry, note=describe_entry(entry))


@router.get("/logs", response_model=NutritionLogListResponse, summary="List nutrition logs")
def get_logs(
    date: Optional[str] = Query(None, description="YYYY-MM-DD (one calendar day, UTC)"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    limit: int = Query(50, ge=1, le=500),
    user: dict = Depends(get_current_user),
):
    date_range = resolve(filter_from_query(date, start_date, end_date))
    logs = nutrition_store.find_by_user_and_range(user["id"], date_range, limit=limit)
    return NutritionLogListResponse(count=len(logs), totals=daily_totals(logs), data=logs)


@router.get("/today", response_model=TodayNutritionResponse, summary="Today's entries and totals")
def get_today(user: dict = Depends(get_current_user)):
    return TodayNutritionResponse(data=today_nutrition(user["id"]))


@router.delete("/log/{log_id}", summary="Delete a nutrition log")
def delete_log(log_id: str, user: dict = Depends(get_current_user)):
    nutrition_store.delete_owned(log_id, user["id"])
    return {"success": True, "message": "Log deleted"}


@router.get("/summary", response_model=NutritionSummaryResponse, summary="Per-day nutrition totals")
def get_daily_summary(days: int = Query(7, ge=1, le=365), user: dict = Depends(get_current_user)):
    return NutritionSummaryResponse(data=nutrition_summary(user["id"], days))
