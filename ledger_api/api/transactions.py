# ledger_api/api/transactions.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import delete, update

from ledger_api.api.deps import get_current_user_id
from ledger_api.db.engine import get_engine
from ledger_api.db.queries import fetch_transaction, fetch_transactions, refresh_pending_amount
from ledger_api.db.schema import transactions
from ledger_api.models.transactions import TransactionList, TransactionOut, TransactionUpdate

router = APIRouter(prefix="/transactions", tags=["transactions"])

logger = logging.getLogger(__name__)


@router.get("/", response_model=TransactionList)
def list_transactions(user_id: str = Depends(get_current_user_id)) -> TransactionList:
    """
    Transaction history across all of the user's customers, newest first.
    """
    engine = get_engine()
    with engine.connect() as conn:
        rows = fetch_transactions(conn, user_id)

    return TransactionList(
        items=[TransactionOut.model_validate(row) for row in rows],
        total=len(rows),
    )


@router.patch("/{transaction_id}", response_model=TransactionOut)
def update_transaction(
    transaction_id: str,
    payload: TransactionUpdate,
    user_id: str = Depends(get_current_user_id),
) -> TransactionOut:
    changes = payload.model_dump(exclude_unset=True)

    engine = get_engine()
    with engine.begin() as conn:
        existing = fetch_transaction(conn, user_id, transaction_id)
        if existing is None:
            raise HTTPException(status_code=404, detail="Transaction not found")

        if changes:
            conn.execute(
                update(transactions)
                .where(
                    transactions.c.id == transaction_id,
                    transactions.c.user_id == user_id,
                )
                .values(**changes)
            )
            if "amount" in changes:
                refresh_pending_amount(conn, user_id, existing.customer_id)
            logger.info("Updated transaction %s fields %s", transaction_id, sorted(changes))

        row = fetch_transaction(conn, user_id, transaction_id)

    return TransactionOut.model_validate(row)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    user_id: str = Depends(get_current_user_id),
) -> Response:
    engine = get_engine()
    with engine.begin() as conn:
        existing = fetch_transaction(conn, user_id, transaction_id)
        if existing is None:
            raise HTTPException(status_code=404, detail="Transaction not found")

        conn.execute(
            delete(transactions).where(
                transactions.c.id == transaction_id,
                transactions.c.user_id == user_id,
            )
        )
        refresh_pending_amount(conn, user_id, existing.customer_id)

    logger.info("Deleted transaction %s", transaction_id)
    return Response(status_code=204)
