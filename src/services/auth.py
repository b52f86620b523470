"""Authentication service: account lookup, registration and credential checks."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Protocol

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.exceptions import AuthenticationError, BusinessRuleError
from src.models.user import User

logger = logging.getLogger(__name__)

settings = get_settings()

ACCOUNT_NOT_FOUND = "Account not found for the supplied email."
INVALID_PASSWORD = "Invalid password."  # noqa: S105
EMAIL_ALREADY_REGISTERED = "An account already exists with this email."
INVALID_NAME = "Enter a valid name."

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class PasswordHasher(Protocol):
    """Hashes passwords on registration and verifies them on login."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, digest: str) -> bool: ...


class BcryptPasswordHasher:
    """Password hasher backed by passlib's bcrypt scheme."""

    def __init__(self, context: CryptContext | None = None):
        self.context = context or pwd_context

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, digest: str) -> bool:
        return self.context.verify(password, digest)


class AccountStore(Protocol):
    """Persistence operations the auth service needs for accounts."""

    def find_by_id(self, user_id: int) -> User | None: ...

    def find_by_email(self, email: str) -> User | None: ...

    def exists_by_email(self, email: str) -> bool: ...

    def save(self, user: User) -> User: ...


class SqlAlchemyAccountStore:
    """Account store backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def save(self, user: User) -> User:
        """Insert or update a user and return it with its id assigned.

        Raises BusinessRuleError if the email collides with another account.
        """
        email = user.email
        user_id = user.id
        user = self.db.merge(user) if user.id is not None else user
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # Only a clash with another account's email is a business rule violation
            existing = self.find_by_email(email) if email is not None else None
            if existing is None or existing.id == user_id:
                raise
            logger.warning("Unique constraint rejected a duplicate account email")
            raise BusinessRuleError(EMAIL_ALREADY_REGISTERED) from e
        self.db.refresh(user)
        return user


class AuthService:
    """Login verification and registration validation over an account store."""

    def __init__(self, store: AccountStore, hasher: PasswordHasher | None = None):
        self.store = store
        self.hasher = hasher or BcryptPasswordHasher()

    def authenticate(self, email: str, password: str) -> User:
        """Return the account matching the credentials or raise AuthenticationError."""
        user = self.store.find_by_email(email)
        if user is None:
            raise AuthenticationError(ACCOUNT_NOT_FOUND)
        if not self.hasher.verify(password, user.password_hash):
            raise AuthenticationError(INVALID_PASSWORD)
        return user

    def validate_email_available(self, email: str) -> None:
        """Raise BusinessRuleError if an account already uses this email."""
        if self.store.exists_by_email(email):
            raise BusinessRuleError(EMAIL_ALREADY_REGISTERED)

    def register_account(self, candidate: User, password: str) -> User:
        """Validate and persist a new account.

        The candidate must not have an id yet. Nothing is written when the
        name is blank or the email is already taken.
        """
        if candidate.name is None or not candidate.name.strip():
            raise BusinessRuleError(INVALID_NAME)
        self.validate_email_available(candidate.email)
        candidate.password_hash = self.hasher.hash(password)
        user = self.store.save(candidate)
        logger.info(f"Registered account {user.id}")
        return user

    def lookup_by_id(self, user_id: int) -> User | None:
        """Get an account by id, or None if it does not exist."""
        return self.store.find_by_id(user_id)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None
