# ledger_api/api/customers.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import delete, update

from ledger_api.api.deps import get_current_user_id
from ledger_api.db.engine import get_engine
from ledger_api.db.queries import (
    fetch_customer,
    fetch_customers,
    fetch_transaction,
    fetch_transactions,
    refresh_pending_amount,
)
from ledger_api.db.schema import customers, transactions
from ledger_api.models.customers import (
    CustomerCreate,
    CustomerLedgerOut,
    CustomerOut,
    CustomerPage,
    CustomerUpdate,
)
from ledger_api.models.transactions import TransactionCreate, TransactionList, TransactionOut
from ledger_api.services.ledger import summarize
from ledger_api.services.listing import (
    DEFAULT_PAGE_SIZE,
    CustomerFilters,
    filter_customers,
    paginate,
)

router = APIRouter(prefix="/customers", tags=["customers"])

logger = logging.getLogger(__name__)


@router.get("/", response_model=CustomerPage)
def list_customers(
    id: str = Query("", description="Substring of the customer id"),
    first_name: str = Query("", description="Case-insensitive substring"),
    last_name: str = Query("", description="Case-insensitive substring"),
    village_name: str = Query("", description="Case-insensitive substring"),
    page_no: str = Query("", description="Substring of the ledger-book page number"),
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=100),
    user_id: str = Depends(get_current_user_id),
) -> CustomerPage:
    """
    Return one page of the user's customers, newest first, after applying
    the column filters.
    """
    engine = get_engine()
    with engine.connect() as conn:
        rows = fetch_customers(conn, user_id)

    filters = CustomerFilters(
        id=id,
        first_name=first_name,
        last_name=last_name,
        village_name=village_name,
        page_no=page_no,
    )
    result = paginate(filter_customers(rows, filters), page=page, page_size=page_size)

    return CustomerPage(
        items=[CustomerOut.model_validate(row) for row in result.items],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.post("/", response_model=CustomerOut, status_code=201)
def create_customer(
    payload: CustomerCreate,
    user_id: str = Depends(get_current_user_id),
) -> CustomerOut:
    engine = get_engine()
    with engine.begin() as conn:
        result = conn.execute(
            customers.insert().values(user_id=user_id, **payload.model_dump())
        )
        customer_id = result.inserted_primary_key[0]
        row = fetch_customer(conn, user_id, customer_id)

    logger.info("Created customer %s for user %s", customer_id, user_id)
    return CustomerOut.model_validate(row)


@router.get("/{customer_id}", response_model=CustomerLedgerOut)
def get_customer(
    customer_id: str,
    user_id: str = Depends(get_current_user_id),
) -> CustomerLedgerOut:
    """
    Return a customer together with its transactions and ledger totals.
    """
    engine = get_engine()
    with engine.connect() as conn:
        row = fetch_customer(conn, user_id, customer_id)
        if row is None:
            raise HTTPException(status_code=404, detail="Customer not found")
        txn_rows = fetch_transactions(conn, user_id, customer_id)

    totals = summarize(txn_rows)
    return CustomerLedgerOut(
        customer=CustomerOut.model_validate(row),
        transactions=[TransactionOut.model_validate(t) for t in txn_rows],
        credit_total=totals.credit_total,
        debit_total=totals.debit_total,
        net_balance=totals.net_balance,
        transaction_count=totals.transaction_count,
    )


@router.patch("/{customer_id}", response_model=CustomerOut)
def update_customer(
    customer_id: str,
    payload: CustomerUpdate,
    user_id: str = Depends(get_current_user_id),
) -> CustomerOut:
    changes = payload.model_dump(exclude_unset=True)

    engine = get_engine()
    with engine.begin() as conn:
        if fetch_customer(conn, user_id, customer_id) is None:
            raise HTTPException(status_code=404, detail="Customer not found")

        if changes:
            conn.execute(
                update(customers)
                .where(customers.c.id == customer_id, customers.c.user_id == user_id)
                .values(**changes)
            )
            logger.info("Updated customer %s fields %s", customer_id, sorted(changes))

        row = fetch_customer(conn, user_id, customer_id)

    return CustomerOut.model_validate(row)


@router.delete("/{customer_id}", status_code=204)
def delete_customer(
    customer_id: str,
    user_id: str = Depends(get_current_user_id),
) -> Response:
    """
    Delete a customer; its transactions go with it via ON DELETE CASCADE.
    """
    engine = get_engine()
    with engine.begin() as conn:
        result = conn.execute(
            delete(customers).where(
                customers.c.id == customer_id,
                customers.c.user_id == user_id,
            )
        )

    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="Customer not found")

    logger.info("Deleted customer %s for user %s", customer_id, user_id)
    return Response(status_code=204)


@router.get("/{customer_id}/transactions", response_model=TransactionList)
def list_customer_transactions(
    customer_id: str,
    user_id: str = Depends(get_current_user_id),
) -> TransactionList:
    engine = get_engine()
    with engine.connect() as conn:
        if fetch_customer(conn, user_id, customer_id) is None:
            raise HTTPException(status_code=404, detail="Customer not found")
        rows = fetch_transactions(conn, user_id, customer_id)

    return TransactionList(
        items=[TransactionOut.model_validate(row) for row in rows],
        total=len(rows),
    )


@router.post("/{customer_id}/transactions", response_model=TransactionOut, status_code=201)
def create_transaction(
    customer_id: str,
    payload: TransactionCreate,
    user_id: str = Depends(get_current_user_id),
) -> TransactionOut:
    """
    Record a credit (positive) or debit (negative) against a customer and
    refresh its pending amount in the same database transaction.
    """
    engine = get_engine()
    with engine.begin() as conn:
        if fetch_customer(conn, user_id, customer_id) is None:
            raise HTTPException(status_code=404, detail="Customer not found")

        result = conn.execute(
            transactions.insert().values(
                customer_id=customer_id,
                user_id=user_id,
                **payload.model_dump(),
            )
        )
        transaction_id = result.inserted_primary_key[0]
        refresh_pending_amount(conn, user_id, customer_id)
        row = fetch_transaction(conn, user_id, transaction_id)

    logger.info("Recorded transaction %s for customer %s", transaction_id, customer_id)
    return TransactionOut.model_validate(row)
