# scripts/ingest.py
"""
Import a ledger-book CSV export for one user.

One row per transaction:
    PageNo,FirstName,LastName,VillageName,Amount,EventDate,Notes

Customers are identified by (page, first name, last name, village). Rows
are validated with the same models the API uses, so a bad amount or an
empty name is counted as an error instead of being loaded.
"""

import csv
import logging
import os
from datetime import datetime, timezone

from pydantic import ValidationError
from sqlalchemy import select

from ledger_api.db.engine import get_engine
from ledger_api.db.queries import refresh_pending_amount
from ledger_api.db.schema import customers, transactions, metadata
from ledger_api.models.customers import CustomerCreate
from ledger_api.models.transactions import TransactionCreate

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

FILE_PATH = os.getenv("LEDGER_INGEST_FILE", "data/ledger_book.csv")

DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y")


# ---- Helpers ----

def parse_event_date(value: str) -> datetime:
    """
    Accept ISO timestamps and the day-first dates ledger books use.
    Date-only values are taken as midnight UTC.
    """
    value = (value or "").strip()
    if not value:
        raise ValueError("EventDate is required")
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def customer_key(customer: CustomerCreate) -> tuple:
    return (
        customer.page_no,
        customer.first_name.lower(),
        customer.last_name.lower(),
        customer.village_name.lower(),
    )


def parse_ledger_csv(file_path: str = FILE_PATH):
    customers_by_key = {}
    transactions_list = []

    n_rows = 0
    n_errors = 0
    error_examples = []

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                customer = CustomerCreate(
                    page_no=row["PageNo"],
                    first_name=row["FirstName"],
                    last_name=row["LastName"],
                    village_name=row["VillageName"],
                )
                txn = TransactionCreate(
                    amount=(row["Amount"] or "").strip(),
                    event_date=parse_event_date(row["EventDate"]),
                    notes=row.get("Notes"),
                )
            except (KeyError, ValueError, ValidationError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "row": dict(row),
                            "error": repr(e),
                        }
                    )
                continue

            key = customer_key(customer)
            customers_by_key.setdefault(key, customer)
            transactions_list.append((key, txn))

    stats = {
        "n_rows": n_rows,
        "n_customers": len(customers_by_key),
        "n_transactions": len(transactions_list),
        "n_errors": n_errors,
        "error_examples": error_examples,
    }
    return customers_by_key, transactions_list, stats


def _find_customer_id(conn, user_id: str, customer: CustomerCreate):
    # Case-insensitive match is done in Python; a user's book is small
    rows = conn.execute(
        select(
            customers.c.id,
            customers.c.page_no,
            customers.c.first_name,
            customers.c.last_name,
            customers.c.village_name,
        ).where(
            customers.c.user_id == user_id,
            customers.c.page_no == customer.page_no,
        )
    ).all()
    key = customer_key(customer)
    for row in rows:
        if (row.page_no, row.first_name.lower(), row.last_name.lower(), row.village_name.lower()) == key:
            return row.id
    return None


def _transaction_exists(conn, user_id: str, customer_id: str, txn: TransactionCreate) -> bool:
    stmt = select(transactions.c.amount, transactions.c.event_date, transactions.c.notes).where(
        transactions.c.user_id == user_id,
        transactions.c.customer_id == customer_id,
    )
    for row in conn.execute(stmt).all():
        if row.amount != txn.amount:
            continue
        event_date = row.event_date
        if event_date.tzinfo is None:
            event_date = event_date.replace(tzinfo=timezone.utc)
        if event_date == txn.event_date and row.notes == txn.notes:
            return True
    return False


def load_into_db(user_id: str, customers_by_key, transactions_list):
    """
    Insert parsed customers and transactions for ``user_id``.

    Re-running the same file is idempotent: existing customers are matched
    and identical transactions (same amount, event date and notes) are
    skipped. Returns ``(n_new_customers, n_new_transactions)``.
    """
    engine = get_engine()
    metadata.create_all(engine)

    ids_by_key = {}
    n_new_customers = 0
    n_new_transactions = 0

    with engine.begin() as conn:
        for key, customer in customers_by_key.items():
            customer_id = _find_customer_id(conn, user_id, customer)
            if customer_id is None:
                result = conn.execute(
                    customers.insert().values(user_id=user_id, **customer.model_dump())
                )
                customer_id = result.inserted_primary_key[0]
                n_new_customers += 1
            ids_by_key[key] = customer_id

        for key, txn in transactions_list:
            customer_id = ids_by_key[key]
            if _transaction_exists(conn, user_id, customer_id, txn):
                continue
            conn.execute(
                transactions.insert().values(
                    customer_id=customer_id,
                    user_id=user_id,
                    **txn.model_dump(),
                )
            )
            n_new_transactions += 1

        for customer_id in set(ids_by_key.values()):
            refresh_pending_amount(conn, user_id, customer_id)

    return n_new_customers, n_new_transactions


def main(user_id: str, file_path: str = FILE_PATH):
    customers_by_key, transactions_list, stats = parse_ledger_csv(file_path)
    n_new_customers, n_new_transactions = load_into_db(user_id, customers_by_key, transactions_list)

    logger.info("Total CSV rows read:   %s", stats["n_rows"])
    logger.info("Unique customers:      %s", stats["n_customers"])
    logger.info("Transactions parsed:   %s", stats["n_transactions"])
    logger.info("Rows with errors:      %s", stats["n_errors"])
    logger.info("New customers loaded:  %s", n_new_customers)
    logger.info("New transactions:      %s", n_new_transactions)

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        sys.exit("usage: python -m scripts.ingest USER_ID [CSV_PATH]")
    main(*sys.argv[1:3])
