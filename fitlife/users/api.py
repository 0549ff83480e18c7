# -*- coding: utf-8 -*-
"""Users: API endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..errors import AuthError
from .models import AuthResponse, LoginRequest, ProfileUpdateRequest, RegisterRequest, UserPublic, UserResponse
from .security import create_access_token, get_current_user, hash_password, verify_password
from .storage import create_user, get_user_by_email, update_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["Users"])


def _user_public(row: Dict[str, Any]) -> UserPublic:
    return UserPublic.model_validate({k: v for k, v in row.items() if k != "password_hash"})


@router.post("/register", response_model=AuthResponse, status_code=201, summary="Register a new user")
def register(request: RegisterRequest):
    user = create_user(
        name=request.name,
        email=request.email,
        password_hash=hash_password(request.password),
        height=request.height,
        goals=request.goals,
    )
    return AuthResponse(token=create_access_token(user_id=user["id"]), user=_user_public(user))


@router.post("/login", response_model=AuthResponse, summary="Login")
def login(request: LoginRequest):
    user = get_user_by_email(request.email)
    if not user or not verify_password(request.password, user["password_hash"]):
        raise AuthError("Invalid credentials")
    logger.info("User %s logged in", user["id"])
    return AuthResponse(token=create_access_token(user_id=user["id"]), user=_user_public(user))


@router.get("/profile", response_model=UserResponse, summary="Get current user profile")
def get_profile(user: dict = Depends(get_current_user)):
    return UserResponse(user=_user_public(user))


@router.put("/profile", response_model=UserResponse, summary="Update profile (allow-listed fields only)")
def put_profile(request: ProfileUpdateRequest, user: dict = Depends(get_current_user)):
    updated = update_profile(user["id"], request.model_dump(exclude_unset=True))
    return UserResponse(user=_user_public(updated))
