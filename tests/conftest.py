"""Pytest configuration and shared fixtures."""

import os

# Point settings at SQLite before the application modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from repairshop.db.base import Base
from repairshop.db.session import get_db
from repairshop.domain import ExpenseRecord, TicketPriority, TicketRecord, TicketStatus

# Wednesday
NOW = datetime(2026, 3, 18, 12, 0, tzinfo=timezone.utc)


def make_ticket(
    status=TicketStatus.COMPLETED,
    created_days_ago=5,
    completed_days_ago=None,
    actual_cost=None,
    estimated_cost=None,
    priority=TicketPriority.MEDIUM,
    estimated_completion=None,
    now=NOW,
) -> TicketRecord:
    return TicketRecord(
        id=uuid.uuid4(),
        status=status,
        priority=priority,
        created_at=now - timedelta(days=created_days_ago),
        actual_completion_date=(
            now - timedelta(days=completed_days_ago) if completed_days_ago is not None else None
        ),
        estimated_completion_date=estimated_completion,
        actual_cost=Decimal(actual_cost) if actual_cost is not None else None,
        estimated_cost=Decimal(estimated_cost) if estimated_cost is not None else None,
    )


def make_expense(ticket: TicketRecord, quantity, price, days_ago=1, now=NOW) -> ExpenseRecord:
    return ExpenseRecord(
        ticket_id=ticket.id,
        quantity=Decimal(quantity),
        price=Decimal(price),
        created_at=now - timedelta(days=days_ago),
    )


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session) -> TestClient:
    from repairshop.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
