"""Transaction entry model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import TransactionStatus, TransactionType
from src.models.mixins import TimestampMixin


class Transaction(Base, TimestampMixin):
    """A single income or expense entry owned by a user."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    description = Column(String(255), nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    amount = Column(Numeric(16, 2), nullable=False)
    type = Column(
        Enum(
            TransactionType,
            name="transactiontype",
            values_callable=lambda x: [e.value for e in x],
        ),
        nullable=False,
    )
    status = Column(
        Enum(
            TransactionStatus,
            name="transactionstatus",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=TransactionStatus.PENDING,
        nullable=False,
    )

    # Relationships
    user = relationship("User", back_populates="transactions")
