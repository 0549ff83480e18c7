# -*- coding: utf-8 -*-
"""FitLife error kinds and their HTTP mapping."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class FitLifeError(Exception):
    """Base exception for the FitLife API."""

    status_code = 500
    default_message = "Server Error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(FitLifeError):
    """Missing/malformed field or enumerated value outside its set (400)."""

    status_code = 400
    default_message = "Validation failed"


class NotFoundError(FitLifeError):
    """Entity absent or owned by someone else (404).

    Both cases share one message so callers cannot probe for other users' ids.
    """

    status_code = 404
    default_message = "Resource not found"


class DuplicateError(FitLifeError):
    """Unique constraint violated (400)."""

    status_code = 400
    default_message = "Duplicate field value entered"


class AuthError(FitLifeError):
    """Missing, invalid or expired credential (401)."""

    status_code = 401
    default_message = "Not authenticated"


def _field_name(loc: Any) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


def _error_message(error: Mapping[str, Any]) -> str:
    msg = str(error.get("msg") or "invalid value")
    # field_validator messages arrive as "Value error, <text>"
    if msg.startswith("Value error, "):
        return msg[len("Value error, "):]
    return f"{_field_name(error.get('loc') or ())}: {msg}"


def join_errors(errors: Any) -> str:
    return ", ".join(_error_message(e) for e in errors)


def validate_payload(model_cls: Type[ModelT], data: Any) -> ModelT:
    """Validate ``data`` against ``model_cls``; every violated field is reported."""
    if isinstance(data, model_cls):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return model_cls.model_validate(data)
    except PydanticValidationError as exc:
        errors = exc.errors()
        raise ValidationError(
            join_errors(errors),
            details={"fields": [_field_name(e.get("loc") or ()) for e in errors]},
        ) from exc


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(FitLifeError)
    async def _fitlife_error(request: Request, exc: FitLifeError):  # noqa: ARG001
        return _failure(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):  # noqa: ARG001
        return _failure(400, join_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            return _failure(404, f"Route {request.url.path} not found")
        return _failure(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _failure(500, "Server Error")
