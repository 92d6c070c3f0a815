import logging
import time
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Header, Query

from repairshop.api.deps import get_dashboard_service, get_store_id
from repairshop.core.config import settings
from repairshop.core.logging import generate_request_id
from repairshop.schemas.common import ErrorResponse
from repairshop.schemas.dashboard import DashboardStats
from repairshop.services.bucketing import resolve_period_days
from repairshop.services.dashboard_stats import DashboardStatsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/stats",
    response_model=DashboardStats,
    responses={404: {"model": ErrorResponse, "description": "User store not found"}},
)
def get_dashboard_stats(
    period: Optional[str] = Query(None, description="7d | 30d | 180d | 360d (unknown values mean 30d)"),
    x_request_id: Optional[str] = Header(None),
    store_id: UUID = Depends(get_store_id),
    service: DashboardStatsService = Depends(get_dashboard_service),
):
    """
    Repair and financial summary of the caller's store.

    - counters: total / in progress / waiting / overdue / high priority repairs
    - money: income, expenses, gross profit (+ percentage), revenue growth
    - `chartData` — income/expenses per day (<= 30d), week (<= 180d) or month

    Failures while reading store data return all-zero stats, not an error.
    """
    request_id = generate_request_id(x_request_id)
    period = period or settings.DEFAULT_STATS_PERIOD
    started = time.monotonic()

    logger.info(
        "Fetching dashboard stats store=%s period=%s days=%d request_id=%s",
        store_id, period, resolve_period_days(period), request_id,
    )
    stats = service.compute_stats(store_id, period)
    logger.info(
        "Dashboard stats fetched period=%s duration_ms=%d request_id=%s",
        period, (time.monotonic() - started) * 1000, request_id,
    )
    return stats
