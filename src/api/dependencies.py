"""FastAPI dependencies for authentication and services."""

import logging
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from src.config import Settings, get_settings
from src.database import get_db
from src.errors import InvalidTokenError, UnauthenticatedError
from src.models.user import User
from src.services.auth import PasswordHasher, TokenService, get_user_by_id

logger = logging.getLogger(__name__)


def get_password_hasher() -> PasswordHasher:
    """Get password hasher instance."""
    return PasswordHasher()


def get_token_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenService:
    """Get token service configured with the signing secret."""
    return TokenService(settings.jwt_secret, settings.jwt_algorithm)


def extract_token(authorization: str | None) -> str | None:
    """Take the token from an Authorization header, with or without a Bearer scheme."""
    if authorization is None:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if credentials and scheme.lower() == "bearer":
        return credentials.strip()
    return authorization.strip()


def get_current_user(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve the request's token to a user and attach it to ``request.state``."""
    try:
        payload = tokens.verify(extract_token(authorization))
    except InvalidTokenError as e:
        raise UnauthenticatedError(e.message) from e

    user = get_user_by_id(db, payload.id)
    if user is None:
        raise UnauthenticatedError("User not found")

    logger.debug(f"Authenticated user {user.id}")
    request.state.user = user
    return user
