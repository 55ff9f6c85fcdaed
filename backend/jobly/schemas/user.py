"""Pydantic schemas for authentication."""

from pydantic import Field

from jobly.schemas.common import CamelModel


class UserRegister(CamelModel):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=5, max_length=20)
    first_name: str = Field(min_length=1, max_length=30)
    last_name: str = Field(min_length=1, max_length=30)
    email: str = Field(min_length=6, max_length=60, pattern=r"^[^@\s]+@[^@\s]+$")


class TokenRequest(CamelModel):
    username: str = Field(min_length=1, max_length=25)
    password: str = Field(min_length=1)


class TokenResponse(CamelModel):
    token: str
