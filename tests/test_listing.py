from types import SimpleNamespace

import pytest

from ledger_api.services.listing import CustomerFilters, filter_customers, paginate


def make(cid, first, last, village, page_no):
    return SimpleNamespace(id=cid, first_name=first, last_name=last, village_name=village, page_no=page_no)


CUSTOMERS = [
    make("a1f0", "Ramesh", "Patil", "Shirur", 12),
    make("b2e1", "Sunita", "Jadhav", "Baramati", 3),
    make("c3d2", "Ganesh", "Patil", "Shirur", 120),
    make("d4c3", "Lata", "More", "Daund", 45),
]


def test_blank_filters_match_everything():
    assert filter_customers(CUSTOMERS, CustomerFilters()) == CUSTOMERS


def test_filters_are_case_insensitive_substrings():
    result = filter_customers(CUSTOMERS, CustomerFilters(last_name="pat", village_name="SHIR"))

    assert [c.first_name for c in result] == ["Ramesh", "Ganesh"]


def test_page_number_filter_matches_digits():
    result = filter_customers(CUSTOMERS, CustomerFilters(page_no="12"))

    assert [c.page_no for c in result] == [12, 120]


def test_filters_combine():
    result = filter_customers(CUSTOMERS, CustomerFilters(id="c3", last_name="patil"))

    assert [c.id for c in result] == ["c3d2"]


def test_paginate_splits_into_pages():
    items = list(range(23))

    first = paginate(items, page=1, page_size=10)
    last = paginate(items, page=3, page_size=10)

    assert first.items == list(range(10))
    assert first.total == 23
    assert first.total_pages == 3
    assert last.items == [20, 21, 22]


def test_page_past_the_end_is_empty():
    result = paginate(list(range(5)), page=4, page_size=10)

    assert result.items == []
    assert result.total == 5
    assert result.total_pages == 1


def test_no_results_has_zero_pages():
    result = paginate([], page=1)

    assert result.items == []
    assert result.total_pages == 0


@pytest.mark.parametrize("page,page_size", [(0, 10), (1, 0)])
def test_invalid_paging_arguments_raise(page, page_size):
    with pytest.raises(ValueError):
        paginate([1, 2, 3], page=page, page_size=page_size)


def test_filter_text_is_not_trimmed():
    customers = CUSTOMERS + [make("e5b4", "Mary Ann", "D Souza", "Daund", 7)]

    result = filter_customers(customers, CustomerFilters(first_name=" "))

    assert [c.id for c in result] == ["e5b4"]
