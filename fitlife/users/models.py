# -*- coding: utf-8 -*-
"""Users: Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HEIGHT_CM = 170.0


class Goals(BaseModel):
    daily_calories: float = Field(2000, ge=0)
    daily_protein: float = Field(150, ge=0)
    target_weight: float = Field(70, ge=0)
    daily_steps: int = Field(10000, ge=0)


class GoalsUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    daily_calories: Optional[float] = Field(None, ge=0)
    daily_protein: Optional[float] = Field(None, ge=0)
    target_weight: Optional[float] = Field(None, ge=0)
    daily_steps: Optional[int] = Field(None, ge=0)


def _normalize_email(value: str) -> str:
    value = (value or "").strip().lower()
    if "@" not in value:
        raise ValueError("Please provide a valid email")
    return value


def _require_name(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError("Name is required")
    return value


class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    height: float = Field(DEFAULT_HEIGHT_CM, gt=0, description="cm")
    goals: Goals = Field(default_factory=Goals)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return _require_name(value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        return _normalize_email(value)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)


class ProfileUpdateRequest(BaseModel):
    """Only these fields can change; any other key in the body is ignored."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, min_length=3, max_length=254)
    avatar: Optional[str] = None
    goals: Optional[GoalsUpdate] = None
    height: Optional[float] = Field(None, gt=0)
    notifications: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _require_name(value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _normalize_email(value)


class UserPublic(BaseModel):
    id: str
    name: str
    email: str
    height: float = DEFAULT_HEIGHT_CM
    avatar: Optional[str] = None
    goals: Goals = Field(default_factory=Goals)
    notifications: bool = True
    created_at: str


class AuthResponse(BaseModel):
    success: bool = True
    token: str
    user: UserPublic


class UserResponse(BaseModel):
    success: bool = True
    user: UserPublic
