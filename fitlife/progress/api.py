# -*- coding: utf-8 -*-
"""Progress domain: API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query

from ..summary.service import progress_summary, record_progress
from ..users.security import get_current_user
from .models import ProgressEntryResponse, ProgressListResponse, ProgressSummaryResponse
from .storage import progress_store

router = APIRouter(prefix="/api/v1/progress", tags=["Progress"])


@router.post("", response_model=ProgressEntryResponse, status_code=201, summary="Add a progress entry")
def add_progress(payload: Dict[str, Any] = Body(...), user: dict = Depends(get_current_user)):
    return ProgressEntryResponse(data=record_progress(user, payload))


@router.get("", response_model=ProgressListResponse, summary="Progress history, newest first")
def get_progress(limit: int = Query(90, ge=1, le=500), user: dict = Depends(get_current_user)):
    entries = progress_store.find_by_user_and_range(user["id"], limit=limit)
    return ProgressListResponse(count=len(entries), data=entries)


@router.get("/summary", response_model=ProgressSummaryResponse, summary="Weekly or monthly progress stats")
def get_summary(
    period: str = Query("weekly", pattern="^(weekly|monthly)$"),
    user: dict = Depends(get_current_user),
):
    return ProgressSummaryResponse(data=progress_summary(user["id"], period))


@router.delete("/{entry_id}", summary="Delete a progress entry")
def delete_progress(entry_id: str, user: dict = Depends(get_current_user)):
    progress_store.delete_owned(entry_id, user["id"])
    return {"success": True, "message": "Progress entry deleted"}
