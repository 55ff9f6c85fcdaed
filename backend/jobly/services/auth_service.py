"""Authentication helpers: bcrypt password hashing, JWT bearer tokens, user lookups."""

import logging
from typing import Any

import bcrypt
import jwt
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.config import Settings
from jobly.errors import ErrorKind, JoblyError
from jobly.helpers.sql import bind_params

logger = logging.getLogger(__name__)


def hash_password(password: str, work_factor: int = 12) -> str:
    """Hash a plaintext password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=work_factor)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


def create_token(user: dict[str, Any], settings: Settings) -> str:
    """Sign a token carrying the username and admin flag."""
    payload = {
        "username": user["username"],
        "isAdmin": bool(user.get("isAdmin", False)),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.token_algorithm)


def decode_token(token: str, settings: Settings) -> dict[str, Any]:
    """Verify a token and return its claims. Raises jwt.InvalidTokenError."""
    return jwt.decode(token, settings.secret_key, algorithms=[settings.token_algorithm])


async def authenticate(db: AsyncSession, username: str, password: str) -> dict[str, Any]:
    """Return the user for valid credentials, else raise an unauthorized error."""
    result = await db.execute(
        text("""SELECT username,
                       password,
                       first_name AS "firstName",
                       last_name AS "lastName",
                       email,
                       is_admin AS "isAdmin"
                FROM users
                WHERE username = :p1"""),
        bind_params([username]),
    )
    row = result.mappings().first()
    if row and verify_password(password, row["password"]):
        user = dict(row)
        del user["password"]
        user["isAdmin"] = bool(user["isAdmin"])
        return user

    logger.info("Failed login for %s", username)
    raise JoblyError(ErrorKind.UNAUTHORIZED, "Invalid username/password")


async def register(db: AsyncSession, data: dict[str, Any], settings: Settings) -> dict[str, Any]:
    """Create a regular (non-admin) user.

    Raises a conflict error if the username is taken.
    """
    username = data["username"]
    duplicate_check = await db.execute(
        text("SELECT username FROM users WHERE username = :p1"),
        bind_params([username]),
    )
    if duplicate_check.first():
        raise JoblyError(ErrorKind.CONFLICT, f"Duplicate username: {username}")

    hashed = hash_password(data["password"], settings.bcrypt_work_factor)
    result = await db.execute(
        text("""INSERT INTO users
                (username, password, first_name, last_name, email, is_admin)
                VALUES (:p1, :p2, :p3, :p4, :p5, :p6)
                RETURNING username,
                          first_name AS "firstName",
                          last_name AS "lastName",
                          email,
                          is_admin AS "isAdmin"
             """),
        bind_params([
            username,
            hashed,
            data["first_name"],
            data["last_name"],
            data["email"],
            False,
        ]),
    )
    user = dict(result.mappings().one())
    user["isAdmin"] = bool(user["isAdmin"])
    logger.info("Registered user %s", username)
    return user
