# ledger_api/services/dashboard.py
"""
Fleet-wide dashboard metrics for one user's ledger.

Windowed figures are attributed by each transaction's ``event_date`` (the
date the user recorded the event for), not its ``created_date``. Both
windows are closed intervals ending at ``now``: an entry exactly 7 days old
is still in the last-week window, and entries dated in the future are in
neither window.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Iterable, List, Optional, Protocol

from ledger_api.services.formatting import as_utc
from ledger_api.services.ledger import ZERO, summarize

WEEK_WINDOW = timedelta(days=7)
MONTH_WINDOW = timedelta(days=30)


class HasId(Protocol):
    id: str


class WindowedTransaction(Protocol):
    customer_id: str
    amount: Decimal
    event_date: datetime


@dataclass(frozen=True)
class DashboardSummary:
    last_week_amount: Decimal = ZERO
    last_month_amount: Decimal = ZERO
    total_customers: int = 0
    active_customers: int = 0
    credit_amount: Decimal = ZERO
    debit_amount: Decimal = ZERO


def in_window(when: datetime, now: datetime, span: timedelta) -> bool:
    when = as_utc(when)
    return now - span <= when <= now


def summarize_dashboard(
    customers: Iterable[HasId],
    transactions: Iterable[WindowedTransaction],
    now: Optional[datetime] = None,
) -> DashboardSummary:
    now = as_utc(now) if now is not None else datetime.now(timezone.utc)

    customer_ids = {c.id for c in customers}
    txns: List[WindowedTransaction] = list(transactions)

    week = [t for t in txns if in_window(t.event_date, now, WEEK_WINDOW)]
    month = [t for t in txns if in_window(t.event_date, now, MONTH_WINDOW)]

    active = {t.customer_id for t in month} & customer_ids
    all_time = summarize(txns)

    return DashboardSummary(
        last_week_amount=summarize(week).net_balance,
        last_month_amount=summarize(month).net_balance,
        total_customers=len(customer_ids),
        active_customers=len(active),
        credit_amount=all_time.credit_total,
        debit_amount=all_time.debit_total,
    )
