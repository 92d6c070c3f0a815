"""Store interfaces (repository pattern).

Readers must be swappable and return domain records, never ORM rows.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional
from uuid import UUID

from repairshop.domain import ExpenseRecord, InventoryLevel, TicketRecord


class TicketReader(ABC):
    """Read access to a store's repair tickets."""

    @abstractmethod
    def fetch_tickets(
        self, store_id: UUID, start: datetime, end: Optional[datetime] = None
    ) -> List[TicketRecord]:
        """Return tickets created in ``[start, end)``; open-ended when end is None."""
        ...

    @abstractmethod
    def fetch_open_tickets(self, store_id: UUID) -> List[TicketRecord]:
        """Return every ticket that is neither completed nor cancelled."""
        ...


class ExpenseReader(ABC):
    """Read access to ticket expenses."""

    @abstractmethod
    def fetch_expenses(self, ticket_ids: Iterable[UUID]) -> List[ExpenseRecord]:
        """Return expenses belonging to any of ``ticket_ids``."""
        ...


class ShopReader(ABC):
    """Read access to store-wide customer and inventory figures."""

    @abstractmethod
    def count_customers(self, store_id: UUID) -> int:
        ...

    @abstractmethod
    def fetch_inventory_levels(self, store_id: UUID) -> List[InventoryLevel]:
        ...
