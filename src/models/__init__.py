"""SQLAlchemy models."""

from src.models.transaction import Transaction
from src.models.user import User

__all__ = [
    "User",
    "Transaction",
]
