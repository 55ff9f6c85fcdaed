"""Token endpoints: log in and register."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.models.base import get_db
from jobly.schemas.user import TokenRequest, TokenResponse, UserRegister
from jobly.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/token", response_model=TokenResponse)
async def get_token(
    request: Request,
    payload: TokenRequest,
    db: AsyncSession = Depends(get_db),
):
    """Exchange a username and password for a bearer token."""
    user = await auth_service.authenticate(db, payload.username, payload.password)
    return {"token": auth_service.create_token(user, request.app.state.settings)}


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(
    request: Request,
    payload: UserRegister,
    db: AsyncSession = Depends(get_db),
):
    """Register a regular user and return a token for them."""
    settings = request.app.state.settings
    user = await auth_service.register(db, payload.model_dump(), settings)
    return {"token": auth_service.create_token(user, settings)}
