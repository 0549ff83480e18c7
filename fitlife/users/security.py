# -*- coding: utf-8 -*-
"""Users: password hashing, bearer tokens and the current-user dependency.

Passwords are stored as ``pbkdf2_<alg>$<iterations>$<salt>$<digest>``.
Tokens are compact HS256 JWTs whose ``sub`` is the user id.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from fastapi import Request

from ..config import settings
from ..errors import AuthError
from .storage import get_user_by_id

_HASH_ALG = "sha256"
_HASH_ROUNDS = 200_000
_TOKEN_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _unb64(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _derive(password: str, salt: bytes, alg: str = _HASH_ALG, rounds: int = _HASH_ROUNDS) -> bytes:
    return hashlib.pbkdf2_hmac(alg, password.encode("utf-8"), salt, rounds)


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    parts = (f"pbkdf2_{_HASH_ALG}", str(_HASH_ROUNDS), _b64(salt), _b64(_derive(password, salt)))
    return "$".join(parts)


def verify_password(password: str, password_hash: str) -> bool:
    """False for a wrong password and for any stored value we cannot parse."""
    scheme, _, rest = (password_hash or "").partition("$")
    if not scheme.startswith("pbkdf2_"):
        return False
    try:
        rounds, salt, digest = rest.split("$")
        actual = _derive(password, _unb64(salt), scheme[len("pbkdf2_"):], int(rounds))
    except (ValueError, TypeError):
        return False
    return hmac.compare_digest(actual, _unb64(digest))


def _sign(signing_input: str) -> str:
    mac = hmac.new(settings.jwt_secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256)
    return _b64(mac.digest())


def _segment(obj: Dict[str, Any]) -> str:
    return _b64(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def create_access_token(*, user_id: str, now: Optional[datetime] = None) -> str:
    issued = now or datetime.now(timezone.utc)
    expires = issued + timedelta(days=int(settings.token_ttl_days))
    claims = {"sub": user_id, "iat": int(issued.timestamp()), "exp": int(expires.timestamp())}
    signing_input = f"{_segment(_TOKEN_HEADER)}.{_segment(claims)}"
    return f"{signing_input}.{_sign(signing_input)}"


def _split_token(token: str) -> Tuple[str, str]:
    signing_input, dot, signature = token.rpartition(".")
    if not dot or not token.isascii() or signing_input.count(".") != 1:
        raise AuthError("Invalid token")
    return signing_input, signature


def decode_token(token: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Verify the signature and expiry and return the claims."""
    signing_input, signature = _split_token(token)
    if not hmac.compare_digest(_sign(signing_input), signature):
        raise AuthError("Invalid token")
    try:
        claims = json.loads(_unb64(signing_input.split(".", 1)[1]))
    except (ValueError, UnicodeDecodeError) as exc:
        raise AuthError("Invalid token") from exc
    if not isinstance(claims, dict):
        raise AuthError("Invalid token")

    current = int((now or datetime.now(timezone.utc)).timestamp())
    if int(claims.get("exp") or 0) < current:
        raise AuthError("Token expired")
    return claims


def bearer_token(request: Request) -> Optional[str]:
    scheme, _, token = (request.headers.get("authorization") or "").partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_current_user(request: Request) -> Dict[str, Any]:
    """Resolve the bearer token to a user row; handlers pass ``user["id"]`` on explicitly."""
    token = bearer_token(request)
    if not token:
        raise AuthError("Not authorized, no token")

    user_id = str(decode_token(token).get("sub") or "")
    if not user_id:
        raise AuthError("Invalid token")

    user_row = get_user_by_id(user_id)
    if not user_row:
        raise AuthError("User not found")
    return user_row
