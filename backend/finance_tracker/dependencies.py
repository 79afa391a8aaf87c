"""
Request-scoped dependencies for the API routers.
"""

from typing import Iterator
from sqlalchemy.orm import Session
from finance_tracker.database import SessionLocal


def get_db() -> Iterator[Session]:
    """Open one session per request; routers commit their own writes."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
