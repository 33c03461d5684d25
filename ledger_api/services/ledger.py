# ledger_api/services/ledger.py
"""
Per-customer ledger totals.

Amounts are signed: positive is a credit (money in), negative a debit
(money out). A customer's pending amount is the net balance of its
transactions; the stored ``customers.pending_amount`` column is only a
cached copy of ``net_balance`` and is recomputed on every write.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Protocol

ZERO = Decimal("0")


class HasAmount(Protocol):
    amount: Decimal


@dataclass(frozen=True)
class LedgerTotals:
    credit_total: Decimal = ZERO
    debit_total: Decimal = ZERO
    net_balance: Decimal = ZERO
    transaction_count: int = 0


def credit_total(transactions: Iterable[HasAmount]) -> Decimal:
    return sum((t.amount for t in transactions if t.amount > ZERO), ZERO)


def debit_total(transactions: Iterable[HasAmount]) -> Decimal:
    """Magnitude of all debits; never negative."""
    return sum((-t.amount for t in transactions if t.amount < ZERO), ZERO)


def net_balance(transactions: Iterable[HasAmount]) -> Decimal:
    return sum((t.amount for t in transactions), ZERO)


def summarize(transactions: Iterable[HasAmount]) -> LedgerTotals:
    """
    Single-pass rollup of a transaction list.

    Zero-amount entries count towards ``transaction_count`` but towards
    neither total.
    """
    credits = ZERO
    debits = ZERO
    count = 0
    for t in transactions:
        count += 1
        if t.amount > ZERO:
            credits += t.amount
        elif t.amount < ZERO:
            debits -= t.amount

    return LedgerTotals(
        credit_total=credits,
        debit_total=debits,
        net_balance=credits - debits,
        transaction_count=count,
    )
