# ledger_api/services/listing.py

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class CustomerFilters:
    """Text filters from the customer table header; blank means 'any'."""

    id: str = ""
    first_name: str = ""
    last_name: str = ""
    village_name: str = ""
    page_no: str = ""

    def matches(self, customer) -> bool:
        return (
            _contains(customer.id, self.id)
            and _contains(customer.first_name, self.first_name)
            and _contains(customer.last_name, self.last_name)
            and _contains(customer.village_name, self.village_name)
            and _contains(str(customer.page_no), self.page_no)
        )


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int
    total_pages: int


def _contains(value: str, needle: str) -> bool:
    needle = needle.lower()
    if not needle:
        return True
    return needle in value.lower()


def filter_customers(customers: Sequence[T], filters: CustomerFilters) -> List[T]:
    return [c for c in customers if filters.matches(c)]


def paginate(items: Sequence[T], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """
    Slice one 1-based page out of ``items``.

    Pages past the end come back empty rather than raising.
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")

    total = len(items)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )
