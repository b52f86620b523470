"""Transaction API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_current_user, get_transaction_service
from src.models.enums import TransactionStatus, TransactionType
from src.models.transaction import Transaction
from src.models.user import User
from src.schemas.transaction import (
    TransactionCreate,
    TransactionFilter,
    TransactionResponse,
    TransactionStatusUpdate,
    TransactionUpdate,
)
from src.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


def get_user_transaction(
    transaction_service: TransactionService, transaction_id: int, user: User
) -> Transaction:
    """Get an entry owned by the user."""
    entry = transaction_service.get_by_id(transaction_id)
    # Entries of other users are reported as missing
    if entry is None or entry.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return entry


@router.get("", response_model=list[TransactionResponse])
def search_transactions(
    current_user: Annotated[User, Depends(get_current_user)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
    description: str | None = Query(default=None, description="Substring of the description"),
    month: int | None = Query(default=None),
    year: int | None = Query(default=None),
    entry_type: TransactionType | None = Query(default=None, alias="type"),
    entry_status: TransactionStatus | None = Query(default=None, alias="status"),
):
    """Search the current user's entries. Omitted parameters are not filtered on."""
    filters = TransactionFilter(
        user_id=current_user.id,
        description=description,
        month=month,
        year=year,
        type=entry_type,
        status=entry_status,
    )
    return transaction_service.search(filters)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction_data: TransactionCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
):
    """Create a new entry owned by the current user."""
    entry = Transaction(
        user_id=current_user.id,
        description=transaction_data.description,
        month=transaction_data.month,
        year=transaction_data.year,
        amount=transaction_data.amount,
        type=transaction_data.type,
    )
    return transaction_service.save(entry)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
):
    """Get a single entry."""
    return get_user_transaction(transaction_service, transaction_id, current_user)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
):
    """Update an entry."""
    entry = get_user_transaction(transaction_service, transaction_id, current_user)

    for field, value in transaction_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(entry, field, value)

    return transaction_service.update(entry)


@router.patch("/{transaction_id}/status", response_model=TransactionResponse)
def update_transaction_status(
    transaction_id: int,
    status_data: TransactionStatusUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
):
    """Change the status of an entry."""
    entry = get_user_transaction(transaction_service, transaction_id, current_user)
    return transaction_service.update_status(entry, status_data.status)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
):
    """Delete an entry."""
    entry = get_user_transaction(transaction_service, transaction_id, current_user)
    transaction_service.delete(entry)
