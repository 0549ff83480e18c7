# -*- coding: utf-8 -*-
"""Users: DB storage helpers."""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Dict, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import to_storage, utc_now
from ..errors import DuplicateError, NotFoundError
from .models import DEFAULT_HEIGHT_CM, Goals

logger = logging.getLogger(__name__)

_PROFILE_COLUMNS = ("name", "email", "avatar", "height", "notifications")
# An explicit null clears these; for the rest null means "leave unchanged".
_CLEARABLE_COLUMNS = ("avatar",)


def _row_to_user(row: Any) -> Dict[str, Any]:
    data = dict(row)
    raw_goals = data.pop("goals_json", None)
    try:
        goals = json.loads(raw_goals) if raw_goals else {}
    except ValueError:
        goals = {}
    data["goals"] = Goals.model_validate(goals).model_dump()
    data["notifications"] = bool(data.get("notifications"))
    return data


def get_user_by_email(email: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE email = ?", (email.lower().strip(),)).fetchone()
        return _row_to_user(row) if row else None


def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        return _row_to_user(row) if row else None


def create_user(
    *,
    name: str,
    email: str,
    password_hash: str,
    height: float = DEFAULT_HEIGHT_CM,
    goals: Optional[Goals] = None,
) -> Dict[str, Any]:
    """Insert a user; the UNIQUE email index rejects a second registration."""
    user_id = str(uuid4())
    now = to_storage(utc_now())
    email_norm = email.lower().strip()
    goals_json = (goals or Goals()).model_dump_json()
    try:
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                """
                INSERT INTO users (id, name, email, password_hash, height, avatar, goals_json, notifications, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, NULL, ?, 1, ?, ?)
                """,
                (user_id, name.strip(), email_norm, password_hash, float(height), goals_json, now, now),
            )
    except sqlite3.IntegrityError as exc:
        raise DuplicateError("Email already registered") from exc
    logger.info("Registered user %s", user_id)
    return get_user_by_id(user_id)  # type: ignore[return-value]


def update_profile(user_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Apply allow-listed profile changes. ``goals`` merges into the stored goals."""
    current = get_user_by_id(user_id)
    if not current:
        raise NotFoundError("User not found")

    assignments = []
    params: list = []
    for column in _PROFILE_COLUMNS:
        if column not in updates:
            continue
        value = updates[column]
        if value is None and column not in _CLEARABLE_COLUMNS:
            continue
        if column == "notifications":
            value = 1 if value else 0
        assignments.append(f"{column} = ?")
        params.append(value)
    if updates.get("goals"):
        merged = dict(current["goals"])
        merged.update({k: v for k, v in updates["goals"].items() if v is not None})
        assignments.append("goals_json = ?")
        params.append(Goals.model_validate(merged).model_dump_json())
    if not assignments:
        return current

    assignments.append("updated_at = ?")
    params.append(to_storage(utc_now()))
    params.append(user_id)
    try:
        with db_conn(settings.app_db_path) as conn:
            conn.execute(f"UPDATE users SET {', '.join(assignments)} WHERE id = ?", tuple(params))
    except sqlite3.IntegrityError as exc:
        raise DuplicateError("Email already registered") from exc
    return get_user_by_id(user_id)  # type: ignore[return-value]
