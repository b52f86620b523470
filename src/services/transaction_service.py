"""Transaction service for income/expense entries and balances."""

import logging
from decimal import Decimal

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from src.exceptions import BusinessRuleError
from src.models.enums import TransactionStatus, TransactionType
from src.models.transaction import Transaction
from src.schemas.transaction import TransactionFilter

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
# Numeric(16, 2) holds at most 14 integer digits
MAX_AMOUNT = Decimal("99999999999999.99")


class TransactionService:
    """Service for transaction entry operations."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, entry: Transaction) -> Transaction:
        """Validate and insert a new entry. New entries always start as pending."""
        self.validate(entry)
        entry.status = TransactionStatus.PENDING
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        logger.info(f"Saved transaction {entry.id} for user {entry.user_id}")
        return entry

    def update(self, entry: Transaction) -> Transaction:
        """Validate and persist changes to an existing entry."""
        if entry.id is None:
            raise BusinessRuleError("Transaction entry must be saved before it can be updated.")
        try:
            self.validate(entry)
        except BusinessRuleError:
            # Discard the rejected in-memory changes
            self.db.rollback()
            raise
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def delete(self, entry: Transaction) -> None:
        """Delete an existing entry."""
        if entry.id is None:
            raise BusinessRuleError("Transaction entry must be saved before it can be deleted.")
        self.db.delete(entry)
        self.db.commit()
        logger.info(f"Deleted transaction {entry.id}")

    def search(self, filters: TransactionFilter) -> list[Transaction]:
        """Find entries matching every non-null field of the filter.

        Description matches as a case-insensitive substring, the rest exactly.
        """
        query = self.db.query(Transaction)

        if filters.user_id is not None:
            query = query.filter(Transaction.user_id == filters.user_id)
        if filters.description is not None:
            query = query.filter(
                Transaction.description.icontains(filters.description, autoescape=True)
            )
        if filters.month is not None:
            query = query.filter(Transaction.month == filters.month)
        if filters.year is not None:
            query = query.filter(Transaction.year == filters.year)
        if filters.type is not None:
            query = query.filter(Transaction.type == filters.type)
        if filters.status is not None:
            query = query.filter(Transaction.status == filters.status)

        return query.order_by(Transaction.year, Transaction.month, Transaction.id).all()

    def update_status(self, entry: Transaction, status: TransactionStatus) -> Transaction:
        """Set the status of an entry and persist it."""
        entry.status = status
        return self.update(entry)

    def validate(self, entry: Transaction) -> None:
        """Raise BusinessRuleError describing the first invalid field."""
        if entry.description is None or not entry.description.strip():
            raise BusinessRuleError("Enter a valid description.")

        if entry.month is None or entry.month < 1 or entry.month > 12:
            raise BusinessRuleError("Enter a valid month.")

        # Four-digit years only
        if entry.year is None or entry.year < 1000 or entry.year > 9999:
            raise BusinessRuleError("Enter a valid year.")

        if entry.user_id is None and entry.user is None:
            raise BusinessRuleError("Enter the owner of the entry.")

        if entry.amount is None:
            raise BusinessRuleError("Enter a valid amount.")
        amount = Decimal(str(entry.amount))
        if amount <= 0 or amount > MAX_AMOUNT:
            raise BusinessRuleError("Enter a valid amount.")
        if amount != amount.quantize(CENTS):
            raise BusinessRuleError("Amounts support at most two decimal places.")

        if entry.type is None:
            raise BusinessRuleError("Enter the type of the entry.")

    def get_by_id(self, entry_id: int) -> Transaction | None:
        """Get an entry by id."""
        return self.db.query(Transaction).filter(Transaction.id == entry_id).first()

    def get_balance(self, user_id: int) -> Decimal:
        """Sum of income minus sum of expenses, ignoring cancelled entries."""
        signed_amount = case(
            (Transaction.type == TransactionType.INCOME, Transaction.amount),
            else_=-Transaction.amount,
        )
        total = (
            self.db.query(func.coalesce(func.sum(signed_amount), 0))
            .filter(
                Transaction.user_id == user_id,
                Transaction.status != TransactionStatus.CANCELLED,
            )
            .scalar()
        )
        return Decimal(str(total)).quantize(CENTS)
