"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_auth_service, get_current_user, get_transaction_service
from src.models.user import User
from src.schemas.auth import BalanceResponse, UserResponse
from src.services.auth import AuthService
from src.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_own_user(auth_service: AuthService, user_id: int, current_user: User) -> User:
    """Get a user by id, only allowing access to the caller's own account."""
    user = auth_service.lookup_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if user.id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return user


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get a user's account information."""
    return get_own_user(auth_service, user_id, current_user)


@router.get("/{user_id}/balance", response_model=BalanceResponse)
def get_user_balance(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
):
    """Get the balance (income minus expenses) of a user's entries."""
    user = get_own_user(auth_service, user_id, current_user)
    return BalanceResponse(user_id=user.id, balance=transaction_service.get_balance(user.id))
