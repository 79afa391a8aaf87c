"""
Transaction API endpoints.
"""

import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from finance_tracker.dependencies import get_db
from finance_tracker.models.transaction import Transaction
from finance_tracker.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse
)
from finance_tracker.services import store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


def _get_or_404(db: Session, transaction_id: str) -> Transaction:
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db)
):
    """List transactions, newest first, sliced by offset/limit"""
    transactions = store.list_transactions(db)

    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in transactions[offset:offset + limit]],
        total=len(transactions)
    )


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    db: Session = Depends(get_db)
):
    """Create a transaction"""
    db_transaction = Transaction(**transaction.model_dump())
    db.add(db_transaction)
    db.commit()
    db.refresh(db_transaction)

    logger.info("Created %s transaction %s in %s", db_transaction.type.value, db_transaction.id, db_transaction.category)
    return TransactionResponse.model_validate(db_transaction)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db)
):
    """Get a single transaction"""
    return TransactionResponse.model_validate(_get_or_404(db, transaction_id))


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    update: TransactionUpdate,
    db: Session = Depends(get_db)
):
    """Replace a transaction's amount, category, description and type"""
    transaction = _get_or_404(db, transaction_id)

    update_data = update.model_dump(exclude_none=True)
    for field, value in update_data.items():
        setattr(transaction, field, value)
    transaction.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(transaction)

    logger.info("Updated transaction %s", transaction.id)
    return TransactionResponse.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    db: Session = Depends(get_db)
):
    """Delete a transaction"""
    transaction = _get_or_404(db, transaction_id)
    db.delete(transaction)
    db.commit()

    logger.info("Deleted transaction %s", transaction_id)
    return None
