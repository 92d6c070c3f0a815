"""Integration tests for GET /api/v1/dashboard/stats.

Run with: pytest tests/test_dashboard_api.py -v
"""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from repairshop.api.deps import get_dashboard_service
from repairshop.core.security import create_access_token
from repairshop.domain import TicketStatus
from repairshop.models import Expense, RepairTicket, Store, User
from repairshop.services.dashboard_stats import DashboardStatsService
from repairshop.stores.interfaces import TicketReader

URL = "/api/v1/dashboard/stats"


@pytest.fixture
def store(db_session) -> Store:
    store = Store(name="Fix It Corner")
    db_session.add(store)
    db_session.commit()
    return store


def auth_headers(db_session, store=None, is_active=True) -> dict:
    user = User(
        email=f"tech-{uuid.uuid4().hex}@example.com",
        store_id=store.id if store else None,
        is_active=is_active,
    )
    db_session.add(user)
    db_session.commit()
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


class BrokenTickets(TicketReader):
    def fetch_tickets(self, store_id, start, end=None):
        raise RuntimeError("Database error")

    def fetch_open_tickets(self, store_id):
        raise RuntimeError("Database error")


class TestDashboardStats:
    """Tests for GET /api/v1/dashboard/stats"""

    def test_returns_stats_in_camel_case(self, client: TestClient, db_session, store):
        now = datetime.now(timezone.utc)
        ticket = RepairTicket(
            store_id=store.id,
            ticket_number="T-1",
            device_type="Laptop",
            issue_description="Does not boot",
            status=TicketStatus.COMPLETED,
            actual_cost=Decimal("200.00"),
            created_at=now - timedelta(days=3),
            actual_completion_date=now - timedelta(days=1),
        )
        db_session.add(ticket)
        db_session.commit()
        db_session.add(Expense(ticket_id=ticket.id, name="SSD", quantity=Decimal("1"),
                               price=Decimal("60.00"), created_at=now - timedelta(days=1)))
        db_session.commit()

        response = client.get(URL, params={"period": "7d"}, headers=auth_headers(db_session, store))

        assert response.status_code == 200
        data = response.json()
        assert data["totalRepairs"] == 1
        assert data["income"] == 200.0
        assert data["expenses"] == 60.0
        assert data["grossProfit"] == 140.0
        assert data["grossProfitPercentage"] == 70.0
        assert data["completionRate"] == 100.0
        assert len(data["chartData"]) == 8
        assert set(data["chartData"][0]) == {"date", "income", "expenses", "profit", "profitPercentage"}
        assert data["revenueGrowth"] == 100.0

    @pytest.mark.parametrize(
        "period, points", [("7d", {8}), ("30d", {31}), ("180d", {26, 27}), ("360d", {12, 13})]
    )
    def test_each_period_returns_full_series(self, client, db_session, store, period, points):
        response = client.get(URL, params={"period": period}, headers=auth_headers(db_session, store))

        assert response.status_code == 200
        # Week and month counts depend on today's weekday and day of month
        assert len(response.json()["chartData"]) in points

    def test_default_period_is_30_days(self, client, db_session, store):
        response = client.get(URL, headers=auth_headers(db_session, store))

        assert response.status_code == 200
        assert len(response.json()["chartData"]) == 31

    def test_missing_token_returns_401(self, client: TestClient):
        response = client.get(URL)

        assert response.status_code == 401

    def test_invalid_token_returns_401(self, client: TestClient):
        response = client.get(URL, headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401

    def test_inactive_user_returns_403(self, client, db_session, store):
        response = client.get(URL, headers=auth_headers(db_session, store, is_active=False))

        assert response.status_code == 403

    def test_user_without_store_returns_404(self, client: TestClient, db_session):
        response = client.get(URL, headers=auth_headers(db_session))

        assert response.status_code == 404
        assert response.json() == {"detail": "User store not found"}

    def test_store_failure_returns_zeroed_stats(self, client: TestClient, db_session, store):
        from repairshop.main import app
        from repairshop.stores import SqlDashboardStore

        def broken_service():
            sql = SqlDashboardStore(db_session)
            return DashboardStatsService(tickets=BrokenTickets(), expenses=sql, shop=sql)

        app.dependency_overrides[get_dashboard_service] = broken_service

        response = client.get(URL, params={"period": "7d"}, headers=auth_headers(db_session, store))

        assert response.status_code == 200
        data = response.json()
        assert data["totalRepairs"] == 0
        assert data["income"] == 0
        assert data["grossProfit"] == 0
        assert data["chartData"] == []
        assert data["statusDistribution"] == []
        assert data["revenueGrowth"] is None
