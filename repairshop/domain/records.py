"""Read-only reporting views of store data.

These are the shapes the dashboard aggregation consumes. They carry no
persistence concerns; ORM models live in repairshop/models.
"""

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID


class TicketStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    WAITING_PARTS = "waiting_parts"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TicketPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


@dataclass(frozen=True)
class TicketRecord:
    """Reporting view of a repair ticket."""

    id: UUID
    status: TicketStatus
    created_at: datetime
    priority: TicketPriority = TicketPriority.MEDIUM
    actual_cost: Optional[Decimal] = None
    estimated_cost: Optional[Decimal] = None
    actual_completion_date: Optional[datetime] = None
    estimated_completion_date: Optional[datetime] = None

    @property
    def is_completed(self) -> bool:
        return self.status == TicketStatus.COMPLETED

    @property
    def attributed_cost(self) -> Decimal:
        """Actual cost when known, else the estimate, else zero."""
        if self.actual_cost is not None:
            return self.actual_cost
        if self.estimated_cost is not None:
            return self.estimated_cost
        return Decimal("0")


@dataclass(frozen=True)
class ExpenseRecord:
    """Reporting view of a ticket expense line."""

    ticket_id: UUID
    quantity: Decimal
    price: Decimal
    created_at: datetime

    @property
    def amount(self) -> Decimal:
        return self.quantity * self.price


@dataclass(frozen=True)
class InventoryLevel:
    """Stock level of one inventory item."""

    current_quantity: Decimal
    min_quantity: Decimal

    @property
    def is_low(self) -> bool:
        return self.current_quantity <= self.min_quantity
