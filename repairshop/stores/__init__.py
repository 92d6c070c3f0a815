from repairshop.stores.interfaces import ExpenseReader, ShopReader, TicketReader
from repairshop.stores.sql_store import SqlDashboardStore

__all__ = ["ExpenseReader", "ShopReader", "TicketReader", "SqlDashboardStore"]
