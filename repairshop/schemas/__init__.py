from repairshop.schemas.common import ErrorResponse
from repairshop.schemas.dashboard import (
    ChartDataPoint, StatusDistributionItem, DashboardStats, empty_stats,
)
