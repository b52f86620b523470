"""Transaction schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import TransactionStatus, TransactionType


class TransactionCreate(BaseModel):
    """Create a new transaction entry.

    Business checks (positive amount, month range, ...) live in
    TransactionService.validate so they apply to every caller.
    """

    description: str = Field(..., max_length=255)
    month: int
    year: int
    amount: Decimal
    type: TransactionType


class TransactionUpdate(BaseModel):
    """Update a transaction entry."""

    description: str | None = Field(None, max_length=255)
    month: int | None = None
    year: int | None = None
    amount: Decimal | None = None
    type: TransactionType | None = None


class TransactionStatusUpdate(BaseModel):
    """Change the status of a transaction entry."""

    status: TransactionStatus


class TransactionFilter(BaseModel):
    """Search template: every non-null field must match."""

    user_id: int | None = None
    description: str | None = None
    month: int | None = None
    year: int | None = None
    type: TransactionType | None = None
    status: TransactionStatus | None = None


class TransactionResponse(BaseModel):
    """Transaction entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    description: str
    month: int
    year: int
    amount: Decimal
    type: TransactionType
    status: TransactionStatus
    created_at: datetime
    updated_at: datetime
