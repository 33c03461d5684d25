# ledger_api/db/queries.py
"""
Owner-scoped reads and the pending-amount recompute.

Every query filters on ``user_id`` so a row owned by another user is
indistinguishable from a missing one.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.engine import Connection, Row

from ledger_api.db.schema import customers, transactions, utcnow
from ledger_api.services.ledger import net_balance

logger = logging.getLogger(__name__)


def fetch_customers(conn: Connection, user_id: str) -> List[Row]:
    """All customers owned by ``user_id``, newest first."""
    stmt = (
        select(customers)
        .where(customers.c.user_id == user_id)
        .order_by(customers.c.created_date.desc())
    )
    return list(conn.execute(stmt).all())


def fetch_customer(conn: Connection, user_id: str, customer_id: str) -> Optional[Row]:
    stmt = select(customers).where(
        customers.c.id == customer_id,
        customers.c.user_id == user_id,
    )
    return conn.execute(stmt).first()


def fetch_transactions(
    conn: Connection,
    user_id: str,
    customer_id: Optional[str] = None,
) -> List[Row]:
    """
    Transactions owned by ``user_id``, newest first; optionally only those
    of one customer.
    """
    stmt = select(transactions).where(transactions.c.user_id == user_id)
    if customer_id is not None:
        stmt = stmt.where(transactions.c.customer_id == customer_id)
    stmt = stmt.order_by(transactions.c.created_date.desc())
    return list(conn.execute(stmt).all())


def fetch_transaction(conn: Connection, user_id: str, transaction_id: str) -> Optional[Row]:
    stmt = select(transactions).where(
        transactions.c.id == transaction_id,
        transactions.c.user_id == user_id,
    )
    return conn.execute(stmt).first()


def refresh_pending_amount(conn: Connection, user_id: str, customer_id: str) -> Decimal:
    """
    Recompute a customer's stored pending amount from its transactions.

    Must run on the same connection/transaction as the write that changed
    the transaction set, so the cached column never lags the ledger.
    """
    rows = conn.execute(
        select(transactions.c.amount).where(
            transactions.c.customer_id == customer_id,
            transactions.c.user_id == user_id,
        )
    ).all()
    pending = net_balance(rows)

    conn.execute(
        update(customers)
        .where(customers.c.id == customer_id, customers.c.user_id == user_id)
        .values(pending_amount=pending, updated_at=utcnow())
    )
    logger.debug("Pending amount for customer %s recomputed: %s", customer_id, pending)
    return pending
