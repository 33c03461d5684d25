# ledger_api/services/formatting.py
"""
Display helpers for the fixed en-IN / INR locale.

Amounts are shown without paise and grouped the Indian way
(``₹12,34,567``). Dates follow the ``18 Oct 2026`` style.
"""

from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

RUPEE = "₹"


def as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back naive; they were written as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def group_indian(digits: str) -> str:
    """
    Insert Indian thousands separators into a plain digit string.

    The last three digits form one group, every group before that has two:
    ``12345678`` becomes ``1,23,45,678``.
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: Union[Decimal, int], signed: bool = False) -> str:
    """
    Render an amount as rupees with zero fractional digits.

    By default only the magnitude is shown; debits and credits are told
    apart by the caller. With ``signed=True`` a ``+`` or ``-`` is prefixed,
    ``+`` for zero.
    """
    value = Decimal(amount)
    rounded = abs(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    text = RUPEE + group_indian(str(int(rounded)))
    if signed:
        return ("-" if value < 0 else "+") + text
    return text


def format_date(value: Union[date, datetime]) -> str:
    return value.strftime("%d %b %Y")


def format_datetime(value: datetime) -> str:
    return value.strftime("%d %b %Y, %I:%M ") + value.strftime("%p").lower()
