"""
Transaction database model.
"""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, Index
from finance_tracker.database import Base


class TransactionType(str, enum.Enum):
    """Direction of a money movement."""
    income = "income"
    expense = "expense"


class Transaction(Base):
    """Transaction model. Amounts are always positive; `type` carries the sign."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    date = Column(Date, nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    type = Column(Enum(TransactionType), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_transaction_type_date", "type", "date"),
    )
