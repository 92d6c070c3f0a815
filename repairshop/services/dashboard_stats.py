"""Dashboard statistics for one store over one reporting period.

``compute_dashboard_stats`` is a pure reduction over already fetched
records. ``DashboardStatsService`` does the fetching through the store
readers and turns any failure into the all-zero result, so a broken query
renders an empty dashboard instead of an error page.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, List, Optional, Sequence
from uuid import UUID

from repairshop.domain import (
    ExpenseRecord,
    InventoryLevel,
    TicketPriority,
    TicketRecord,
    TicketStatus,
)
from repairshop.schemas.dashboard import (
    ChartDataPoint,
    DashboardStats,
    StatusDistributionItem,
    empty_stats,
)
from repairshop.services.bucketing import (
    bucket_key_for,
    bucket_keys,
    interval_for_days,
    resolve_period_days,
)
from repairshop.stores.interfaces import ExpenseReader, ShopReader, TicketReader

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
CENT = Decimal("0.01")
TENTH = Decimal("0.1")
SECONDS_PER_DAY = Decimal(86400)

WAITING_STATUSES = (TicketStatus.PENDING, TicketStatus.WAITING_PARTS)
HIGH_PRIORITIES = (TicketPriority.HIGH, TicketPriority.URGENT)
# Display order of the status breakdown
STATUS_ORDER = (
    TicketStatus.PENDING,
    TicketStatus.IN_PROGRESS,
    TicketStatus.WAITING_PARTS,
    TicketStatus.COMPLETED,
    TicketStatus.CANCELLED,
)


def _round(value: Decimal, step: Decimal = CENT) -> float:
    return float(value.quantize(step, rounding=ROUND_HALF_UP))


def _percentage(part: Decimal, whole: Decimal) -> Decimal:
    if whole > 0:
        return part / whole * 100
    return ZERO


def _day(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def _completed_income(tickets: Sequence[TicketRecord]) -> Decimal:
    return sum((t.attributed_cost for t in tickets if t.is_completed), ZERO)


# ---------------------------------------------------------------------------
# Chart series
# ---------------------------------------------------------------------------


def build_chart_data(
    days: int,
    completed: Sequence[TicketRecord],
    expenses: Sequence[ExpenseRecord],
    now: datetime,
) -> List[ChartDataPoint]:
    """Income/expense series bucketed by day, week or month.

    Every bucket of the period is present even when nothing happened in it.
    Amounts dated outside the seeded buckets are left off the chart.
    """
    interval = interval_for_days(days)
    buckets: Dict[str, Dict[str, Decimal]] = {
        key: {"income": ZERO, "expenses": ZERO}
        for key in bucket_keys(_day(now), days, interval)
    }

    for ticket in completed:
        cost = ticket.attributed_cost
        if cost <= 0:
            continue
        when = ticket.actual_completion_date or ticket.created_at
        bucket = buckets.get(bucket_key_for(_day(when), interval))
        if bucket is not None:
            bucket["income"] += cost

    for expense in expenses:
        bucket = buckets.get(bucket_key_for(_day(expense.created_at), interval))
        if bucket is not None:
            bucket["expenses"] += expense.amount

    points = []
    for key in sorted(buckets):
        income = buckets[key]["income"]
        profit = (income - buckets[key]["expenses"]).quantize(CENT, rounding=ROUND_HALF_UP)
        points.append(
            ChartDataPoint(
                date=key,
                income=_round(income),
                expenses=_round(buckets[key]["expenses"]),
                profit=float(profit),
                profit_percentage=_round(_percentage(profit, income)),
            )
        )
    return points


# ---------------------------------------------------------------------------
# Summary figures
# ---------------------------------------------------------------------------


def average_repair_time(completed: Sequence[TicketRecord], now: datetime) -> Decimal:
    """Mean repair duration in days.

    Tickets with a zero or negative duration are left out of both the sum
    and the count. A ticket with no completion date is measured up to now.
    """
    total = ZERO
    count = 0
    for ticket in completed:
        finished = ticket.actual_completion_date or now
        elapsed = Decimal(str((finished - ticket.created_at).total_seconds())) / SECONDS_PER_DAY
        if elapsed > 0:
            total += elapsed
            count += 1
    return total / count if count else ZERO


def revenue_growth(income: Decimal, previous_income: Decimal) -> Optional[float]:
    """Percentage change of income against the previous period.

    Undefined (None) when neither period earned anything.
    """
    previous = previous_income.quantize(CENT, rounding=ROUND_HALF_UP)
    if previous > 0 and income > 0:
        return _round((income - previous) / previous * 100)
    if previous == 0 and income > 0:
        return 100.0
    if previous > 0 and income == 0:
        return -100.0
    return None


def status_distribution(tickets: Sequence[TicketRecord]) -> List[StatusDistributionItem]:
    counts = {status: 0 for status in STATUS_ORDER}
    for ticket in tickets:
        counts[TicketStatus(ticket.status)] += 1
    total = Decimal(len(tickets))
    return [
        StatusDistributionItem(
            status=status.value,
            count=counts[status],
            percentage=_round(_percentage(Decimal(counts[status]), total)),
        )
        for status in STATUS_ORDER
    ]


def count_overdue(open_tickets: Sequence[TicketRecord], today: date) -> int:
    return sum(
        1
        for t in open_tickets
        if t.status not in (TicketStatus.COMPLETED, TicketStatus.CANCELLED)
        and t.estimated_completion_date is not None
        and _day(t.estimated_completion_date) < today
    )


def compute_dashboard_stats(
    period: Optional[str],
    tickets: Sequence[TicketRecord],
    expenses: Sequence[ExpenseRecord],
    now: datetime,
    *,
    open_tickets: Sequence[TicketRecord] = (),
    previous_tickets: Sequence[TicketRecord] = (),
    total_clients: int = 0,
    inventory: Sequence[InventoryLevel] = (),
) -> DashboardStats:
    """Reduce one period's tickets and expenses to the dashboard figures.

    ``expenses`` must already be limited to the completed tickets. Money is
    summed as Decimal and only rounded on the way out.
    """
    days = resolve_period_days(period)
    completed = [t for t in tickets if t.is_completed]

    total_repairs = len(tickets)
    in_progress = sum(1 for t in tickets if t.status == TicketStatus.IN_PROGRESS)
    waiting = sum(1 for t in tickets if t.status in WAITING_STATUSES)

    income = _completed_income(completed)
    total_expenses = sum((e.amount for e in expenses), ZERO)
    gross_profit = income - total_expenses

    completion_rate = _percentage(Decimal(len(completed)), Decimal(total_repairs))

    return DashboardStats(
        total_repairs=total_repairs,
        in_progress_repairs=in_progress,
        waiting_repairs=waiting,
        income=_round(income),
        expenses=_round(total_expenses),
        gross_profit=_round(gross_profit),
        gross_profit_percentage=_round(_percentage(gross_profit, income)),
        average_repair_time=_round(average_repair_time(completed, now), TENTH),
        completion_rate=_round(completion_rate),
        chart_data=build_chart_data(days, completed, expenses, now),
        overdue_tickets=count_overdue(open_tickets, _day(now)),
        high_priority_tickets=sum(1 for t in tickets if t.priority in HIGH_PRIORITIES),
        total_clients=total_clients,
        revenue_growth=revenue_growth(income, _completed_income(previous_tickets)),
        low_stock_items=sum(1 for item in inventory if item.is_low),
        status_distribution=status_distribution(tickets),
    )


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class DashboardStatsService:
    """Fetches a store's reporting data and computes its dashboard stats."""

    def __init__(
        self,
        tickets: TicketReader,
        expenses: ExpenseReader,
        shop: ShopReader,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._tickets = tickets
        self._expenses = expenses
        self._shop = shop
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def compute_stats(self, store_id: UUID, period: Optional[str] = None) -> DashboardStats:
        """Return the stats for ``period``, or all zeros if anything fails.

        Never raises for data errors: the dashboard shows zeros instead.
        """
        try:
            return self._compute(store_id, period)
        except Exception:
            logger.exception(
                "Error computing dashboard stats for store %s (period=%s).", store_id, period
            )
            return empty_stats()

    def _compute(self, store_id: UUID, period: Optional[str]) -> DashboardStats:
        now = self._clock()
        days = resolve_period_days(period)
        start = now - timedelta(days=days)

        tickets = self._tickets.fetch_tickets(store_id, start)
        completed_ids = [t.id for t in tickets if t.is_completed]
        # Expense filter depends on the completed ids, so this read comes second
        expenses = self._expenses.fetch_expenses(completed_ids) if completed_ids else []

        previous = [
            t
            for t in self._tickets.fetch_tickets(store_id, now - timedelta(days=days * 2), start)
            if t.is_completed
        ]

        return compute_dashboard_stats(
            period,
            tickets,
            expenses,
            now,
            open_tickets=self._tickets.fetch_open_tickets(store_id),
            previous_tickets=previous,
            total_clients=self._shop.count_customers(store_id),
            inventory=self._shop.fetch_inventory_levels(store_id),
        )
