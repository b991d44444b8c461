"""
Auth dependencies for protected FastAPI routes.

A single API key (env `API_KEY`) guards the API. When it is empty, auth is
disabled and every request passes.
"""

from __future__ import annotations

import logging
import secrets

from fastapi import Header, HTTPException, status

from core import config

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def bearer_token(authorization: str | None) -> str:
    """
    Token from `Authorization: Bearer <token>`; the scheme is case-insensitive.
    """
    raw = (authorization or "").strip()
    if not raw:
        raise _unauthorized("Missing Authorization header.")

    scheme, _, token = raw.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise _unauthorized("Authorization must be: Bearer <api key>.")
    return token.strip()


async def require_api_key(authorization: str | None = Header(default=None)) -> None:
    expected = config.api_key()
    if not expected:
        return None

    token = bearer_token(authorization)
    if not secrets.compare_digest(token.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("auth_rejected reason=invalid_api_key")
        raise _unauthorized("Invalid API key.")
    return None
