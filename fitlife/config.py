# -*- coding: utf-8 -*-
"""Centralized configuration for the FitLife API."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Runtime settings, read once from the environment."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("FITLIFE_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("FITLIFE_DB_PATH") or (self.data_root / "fitlife.db")
        ).expanduser()
        # In production you MUST set FITLIFE_JWT_SECRET. The dev secret keeps local
        # demos easy, but is not safe for public deployments.
        self.jwt_secret: str = os.environ.get("FITLIFE_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("FITLIFE_TOKEN_TTL_DAYS") or "7")
        self.log_level: str = (os.environ.get("FITLIFE_LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("FITLIFE_HOST") or os.environ.get("HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("FITLIFE_PORT") or os.environ.get("PORT") or "5000")

        cors = os.environ.get("FITLIFE_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()
