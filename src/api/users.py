"""User registration and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from src.api.dependencies import get_password_hasher, get_token_service
from src.database import get_db
from src.schemas.auth import MessageResponse, UserLogin, UserRegister
from src.services.auth import PasswordHasher, TokenService, authenticate_user, register_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=MessageResponse)
def register(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    user_data: Annotated[UserRegister | None, Body()] = None,
):
    """Register a new user. No token is issued; log in separately."""
    user_data = user_data or UserRegister()
    register_user(db, hasher, user_data.email, user_data.password, user_data.name)
    return MessageResponse(response="Registration successful")


@router.post("/login", response_model=MessageResponse)
def login(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    credentials: Annotated[UserLogin | None, Body()] = None,
):
    """Login with email and password; the token is returned as the response."""
    credentials = credentials or UserLogin()
    token = authenticate_user(db, hasher, tokens, credentials.email, credentials.password)
    return MessageResponse(response=token)
