"""OrderLookupService: page bound, numeric ids and detail formatting.

Invariants:
    - page > 10 yields "Invalid Order Id", checked before the numeric test
    - page == 10 and an absent page are both accepted
    - purely numeric ids have no details (None)
"""

import pytest

from order_lookup.service import (
    INVALID_PAGE_MESSAGE,
    LookupOutcome,
    OrderLookupService,
    classify_result,
)


def test_alphanumeric_id_returns_details(lookup_service):
    assert lookup_service.get_order("ABC123", 5) == "Order details for id: ABC123"


def test_numeric_id_returns_none(lookup_service):
    assert lookup_service.get_order("12345", 5) is None


def test_page_above_bound_is_rejected(lookup_service):
    assert lookup_service.get_order("ABC123", 11) == "Invalid Order Id"


def test_bound_check_precedes_numeric_check(lookup_service):
    assert lookup_service.get_order("12345", 11) == INVALID_PAGE_MESSAGE


def test_page_at_bound_is_accepted(lookup_service):
    assert lookup_service.get_order("ABC123", 10) == "Order details for id: ABC123"
    assert lookup_service.get_order("12345", 10) is None


def test_absent_page_applies_no_bound(lookup_service):
    assert lookup_service.get_order("ABC123") == "Order details for id: ABC123"
    assert lookup_service.get_order("12345", None) is None


@pytest.mark.parametrize("page", [0, -3])
def test_low_pages_are_accepted(lookup_service, page):
    assert lookup_service.get_order("X1", page) == "Order details for id: X1"


@pytest.mark.parametrize("order_id", ["12a45", "-123", "1.5", " 123", ""])
def test_mixed_ids_are_not_numeric(lookup_service, order_id):
    assert lookup_service.get_order(order_id, 1) == "Order details for id: " + order_id


def test_unicode_digits_count_as_numeric(lookup_service):
    assert lookup_service.get_order("١٢٣", 1) is None


def test_missing_id_is_a_contract_violation(lookup_service):
    with pytest.raises(ValueError):
        lookup_service.get_order(None, 1)


def test_repeated_calls_are_identical():
    first, second = OrderLookupService(), OrderLookupService()
    for args in [("ABC123", 5), ("12345", 5), ("ABC123", 11), ("Z", None)]:
        assert first.get_order(*args) == first.get_order(*args) == second.get_order(*args)


def test_classify_result():
    assert classify_result(None) is LookupOutcome.NOT_FOUND
    assert classify_result(INVALID_PAGE_MESSAGE) is LookupOutcome.INVALID_PAGE
    assert classify_result("Order details for id: A") is LookupOutcome.FOUND
