from repairshop.domain.errors import DomainError, ErrorCode, StoreNotFoundError
from repairshop.domain.records import (
    ExpenseRecord,
    InventoryLevel,
    TicketPriority,
    TicketRecord,
    TicketStatus,
)

__all__ = [
    "DomainError",
    "ErrorCode",
    "StoreNotFoundError",
    "ExpenseRecord",
    "InventoryLevel",
    "TicketPriority",
    "TicketRecord",
    "TicketStatus",
]
