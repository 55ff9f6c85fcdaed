"""Authentication dependencies for FastAPI routes."""

import logging
from dataclasses import dataclass

import jwt
from fastapi import Depends, Request

from jobly.errors import ErrorKind, JoblyError
from jobly.services.auth_service import decode_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    username: str
    is_admin: bool = False


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_current_user(request: Request) -> CurrentUser | None:
    """Return the caller from a valid bearer token, or None for anonymous callers.

    A bad token is treated as anonymous; routes that need a user reject it.
    """
    token = _bearer_token(request)
    if not token:
        return None
    try:
        claims = decode_token(token, request.app.state.settings)
    except jwt.InvalidTokenError as e:
        logger.debug("Ignoring invalid token: %s", e)
        return None
    username = claims.get("username")
    if not username:
        return None
    return CurrentUser(username=username, is_admin=bool(claims.get("isAdmin", False)))


async def require_admin(user: CurrentUser | None = Depends(get_current_user)) -> CurrentUser:
    """Return the logged-in admin or raise 401."""
    if not user or not user.is_admin:
        raise JoblyError(ErrorKind.UNAUTHORIZED, "Unauthorized")
    return user
