"""SQLAlchemy implementation of the dashboard readers."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from repairshop.domain import (
    ExpenseRecord,
    InventoryLevel,
    TicketPriority,
    TicketRecord,
    TicketStatus,
)
from repairshop.models.customer import Customer
from repairshop.models.inventory import InventoryItem
from repairshop.models.ticket import Expense, RepairTicket
from repairshop.stores.interfaces import ExpenseReader, ShopReader, TicketReader

CLOSED_STATUSES = (TicketStatus.COMPLETED, TicketStatus.CANCELLED)


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    # Backends without timezone support hand back naive UTC values
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _decimal(value) -> Optional[Decimal]:
    if value is None:
        return None
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _to_ticket_record(row: RepairTicket) -> TicketRecord:
    return TicketRecord(
        id=row.id,
        status=TicketStatus(row.status),
        priority=TicketPriority(row.priority),
        actual_cost=_decimal(row.actual_cost),
        estimated_cost=_decimal(row.estimated_cost),
        actual_completion_date=_aware(row.actual_completion_date),
        estimated_completion_date=_aware(row.estimated_completion_date),
        created_at=_aware(row.created_at),
    )


class SqlDashboardStore(TicketReader, ExpenseReader, ShopReader):
    """Relational store backing the dashboard, scoped per request session."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def fetch_tickets(
        self, store_id: UUID, start: datetime, end: Optional[datetime] = None
    ) -> List[TicketRecord]:
        query = self._db.query(RepairTicket).filter(
            RepairTicket.store_id == store_id,
            RepairTicket.created_at >= start,
        )
        if end is not None:
            query = query.filter(RepairTicket.created_at < end)
        return [_to_ticket_record(t) for t in query.all()]

    def fetch_open_tickets(self, store_id: UUID) -> List[TicketRecord]:
        rows = (
            self._db.query(RepairTicket)
            .filter(
                RepairTicket.store_id == store_id,
                RepairTicket.status.notin_(CLOSED_STATUSES),
            )
            .all()
        )
        return [_to_ticket_record(t) for t in rows]

    def fetch_expenses(self, ticket_ids: Iterable[UUID]) -> List[ExpenseRecord]:
        ids = list(ticket_ids)
        if not ids:
            return []
        rows = self._db.query(Expense).filter(Expense.ticket_id.in_(ids)).all()
        return [
            ExpenseRecord(
                ticket_id=e.ticket_id,
                quantity=_decimal(e.quantity),
                price=_decimal(e.price),
                created_at=_aware(e.created_at),
            )
            for e in rows
        ]

    def count_customers(self, store_id: UUID) -> int:
        return (
            self._db.query(func.count(Customer.id))
            .filter(Customer.store_id == store_id)
            .scalar()
        ) or 0

    def fetch_inventory_levels(self, store_id: UUID) -> List[InventoryLevel]:
        rows = (
            self._db.query(InventoryItem.current_quantity, InventoryItem.min_quantity)
            .filter(InventoryItem.store_id == store_id)
            .all()
        )
        return [
            InventoryLevel(
                current_quantity=_decimal(r.current_quantity),
                min_quantity=_decimal(r.min_quantity),
            )
            for r in rows
        ]
