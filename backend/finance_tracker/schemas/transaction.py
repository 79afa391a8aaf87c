"""
Transaction schemas.
"""

import datetime
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal

from finance_tracker.models.transaction import TransactionType


class TransactionBase(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)


class TransactionCreate(TransactionBase):
    date: datetime.date
    type: TransactionType


class TransactionUpdate(TransactionBase):
    # `date` is left untouched when omitted
    type: TransactionType = TransactionType.expense
    date: Optional[datetime.date] = None


class TransactionResponse(BaseModel):
    id: str
    date: datetime.date
    amount: float
    description: str
    category: str
    type: TransactionType
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int
