"""Authentication service for tokens, password digests and credentials."""

import logging

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel
from pydantic import ValidationError as PayloadError
from sqlalchemy.orm import Session

from src.errors import (
    ConflictError,
    InvalidTokenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from src.models.user import User
from src.services.repository import Repository

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Deterministic one-way password digests.

    The scheme is unsalted hex SHA-256 so that login can recompute the digest
    and compare it with the stored one. Existing user records depend on it.
    """

    def __init__(self) -> None:
        self._context = CryptContext(schemes=["hex_sha256"])

    def hash(self, password: str | None) -> str:
        """Hash a password. A missing password hashes as the empty string."""
        return self._context.hash(password or "")

    def verify(self, password: str | None, digest: str) -> bool:
        """Recompute the digest of ``password`` and compare it with ``digest``."""
        return self._context.verify(password or "", digest)


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    id: int


class TokenService:
    """Issue and verify signed access tokens.

    Tokens carry only the user id and have no expiry.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def issue(self, user_id: int) -> str:
        """Create a signed token for ``user_id``."""
        return jwt.encode({"id": str(user_id)}, self.secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> TokenPayload:
        """Check the signature and decode the payload.

        Raises ``InvalidTokenError`` for a missing, tampered or malformed token.
        """
        if not token:
            raise InvalidTokenError("Token is invalid")
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return TokenPayload.model_validate(claims)
        except (JWTError, PayloadError) as e:
            raise InvalidTokenError("Token is invalid") from e


def get_user_by_email(db: Session, email: str | None) -> User | None:
    """Get a user by email."""
    return Repository(db, User).find_one(email=email)


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return Repository(db, User).find_one(id=user_id)


def register_user(
    db: Session,
    hasher: PasswordHasher,
    email: str | None,
    password: str | None,
    name: str | None = None,
) -> User:
    """Create a new user after checking the email is present and unused."""
    if not email:
        raise ValidationError("Email is required")

    users = Repository(db, User)
    if users.exists(email=email):
        raise ConflictError("User already exists with this email")

    user = users.add_one(name=name, email=email, password=hasher.hash(password))
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(
    db: Session,
    hasher: PasswordHasher,
    tokens: TokenService,
    email: str | None,
    password: str | None,
) -> str:
    """Check credentials and return a fresh access token."""
    user = get_user_by_email(db, email)
    if not user:
        raise NotFoundError("User not found")

    if not hasher.verify(password, user.password):
        raise UnauthorizedError("Password is incorrect")

    logger.info(f"User {user.id} logged in")
    return tokens.issue(user.id)
