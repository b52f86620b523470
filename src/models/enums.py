"""Enums for model fields."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction entry."""

    INCOME = "income"
    EXPENSE = "expense"


class TransactionStatus(str, Enum):
    """Lifecycle status of a transaction entry."""

    PENDING = "pending"
    CANCELLED = "cancelled"
    SETTLED = "settled"
