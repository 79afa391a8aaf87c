"""Shared test fixtures."""

import os

# Point the app at an in-memory database before it is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal

from finance_tracker.database import Base
from finance_tracker.dependencies import get_db
from finance_tracker.main import app
from finance_tracker.models.budget import Budget
from finance_tracker.models.transaction import Transaction, TransactionType


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_transaction(db_session):
    """Create a sample expense."""
    txn = Transaction(
        date=date(2024, 3, 15),
        amount=Decimal("50.00"),
        description="Weekly groceries",
        category="Food & Dining",
        type=TransactionType.expense,
    )
    db_session.add(txn)
    db_session.commit()
    db_session.refresh(txn)
    return txn


@pytest.fixture
def sample_budget(db_session):
    """Create a sample budget for March 2024."""
    budget = Budget(
        category="Food & Dining",
        amount=Decimal("500.00"),
        month="2024-03",
    )
    db_session.add(budget)
    db_session.commit()
    db_session.refresh(budget)
    return budget
