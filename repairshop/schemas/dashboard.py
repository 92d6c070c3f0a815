from typing import Optional, List
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # Dashboard clients read camelCase keys
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChartDataPoint(CamelModel):
    date: str            # "2026-02-25" | "2026-02-23" (week of) | "2026-02"
    income: float
    expenses: float
    profit: float
    profit_percentage: float


class StatusDistributionItem(CamelModel):
    status: str
    count: int
    percentage: float


class DashboardStats(CamelModel):
    total_repairs: int = 0
    in_progress_repairs: int = 0
    waiting_repairs: int = 0
    income: float = 0
    expenses: float = 0
    gross_profit: float = 0
    gross_profit_percentage: float = 0
    average_repair_time: float = 0
    completion_rate: float = 0
    chart_data: List[ChartDataPoint] = []
    overdue_tickets: int = 0
    high_priority_tickets: int = 0
    total_clients: int = 0
    # Percentage change against the previous period of equal length
    revenue_growth: Optional[float] = None
    low_stock_items: int = 0
    status_distribution: List[StatusDistributionItem] = []


def empty_stats() -> DashboardStats:
    """All-zero stats rendered when the dashboard data cannot be computed."""
    return DashboardStats()
