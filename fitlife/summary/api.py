# -*- coding: utf-8 -*-
"""Summary: API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..users.security import get_current_user
from .models import DashboardResponse
from .service import dashboard

router = APIRouter(prefix="/api/v1/dashboard", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse, summary="Today, latest progress and 7-day summaries")
def get_dashboard(user: dict = Depends(get_current_user)):
    return DashboardResponse(data=dashboard(user["id"]))
