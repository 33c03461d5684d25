# ledger_api/api/dashboard.py

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ledger_api.api.deps import get_current_user_id
from ledger_api.db.engine import get_engine
from ledger_api.db.queries import fetch_customers, fetch_transactions
from ledger_api.models.dashboard import DashboardMetricsOut
from ledger_api.services.dashboard import summarize_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/metrics", response_model=DashboardMetricsOut)
def dashboard_metrics(
    as_of: Optional[datetime] = Query(
        default=None,
        description="ISO timestamp to compute the windows from; defaults to now (UTC)",
    ),
    user_id: str = Depends(get_current_user_id),
) -> DashboardMetricsOut:
    """
    Totals for the last 7 and 30 days (by event date), customer counts and
    the all-time credit/debit split.
    """
    engine = get_engine()
    with engine.connect() as conn:
        customer_rows = fetch_customers(conn, user_id)
        txn_rows = fetch_transactions(conn, user_id)

    summary = summarize_dashboard(customer_rows, txn_rows, now=as_of)
    return DashboardMetricsOut.model_validate(summary)
