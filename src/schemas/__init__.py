"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    AuthResponse,
    BalanceResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from src.schemas.transaction import (
    TransactionCreate,
    TransactionFilter,
    TransactionResponse,
    TransactionStatusUpdate,
    TransactionUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "BalanceResponse",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionStatusUpdate",
    "TransactionFilter",
    "TransactionResponse",
]
