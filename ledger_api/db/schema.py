# ledger_api/db/schema.py

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Numeric, DateTime, ForeignKey, CheckConstraint, Text, Index
)

metadata = MetaData()


def _new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("user_id", String(36), nullable=False, index=True),
    Column("page_no", Integer, nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("village_name", String(100), nullable=False),
    Column("notes", Text),
    Column("pending_amount", Numeric(18, 2), nullable=False, default=0),
    Column("created_date", DateTime(timezone=True), nullable=False, default=utcnow),
    Column("updated_at", DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow),
    CheckConstraint("page_no > 0", name="ck_customers_page_no_positive"),
)

transactions = Table(
    "transactions",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column(
        "customer_id",
        String(36),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(36), nullable=False),
    Column("amount", Numeric(15, 2), nullable=False),
    Column("notes", Text),
    Column("event_date", DateTime(timezone=True), nullable=False),
    Column("created_date", DateTime(timezone=True), nullable=False, default=utcnow),
    Index("ix_transactions_user_customer", "user_id", "customer_id"),
)
