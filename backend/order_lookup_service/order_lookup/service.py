# backend/order_lookup_service/order_lookup/service.py

from enum import Enum
from typing import Optional

MAX_PAGE = 10
INVALID_PAGE_MESSAGE = "Invalid Order Id"
ORDER_DETAILS_PREFIX = "Order details for id: "


class LookupOutcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID_PAGE = "invalid_page"


class OrderLookupService:
    """Resolves an order identifier to a detail string.

    Pure and stateless: the same inputs always give the same result.
    """

    def get_order(self, order_id: str, page: Optional[int] = None) -> Optional[str]:
        """Return the order details, ``INVALID_PAGE_MESSAGE``, or ``None``.

        A missing ``page`` applies no bound. Purely numeric ids have no
        details and return ``None``.
        """
        if order_id is None:
            raise ValueError("order_id is required")

        if page is not None and page > MAX_PAGE:
            return INVALID_PAGE_MESSAGE

        if order_id.isdecimal():
            return None
        return ORDER_DETAILS_PREFIX + order_id


def classify_result(result: Optional[str]) -> LookupOutcome:
    """Map a lookup result back to its outcome; detail strings always carry the prefix."""
    if result is None:
        return LookupOutcome.NOT_FOUND
    if result == INVALID_PAGE_MESSAGE:
        return LookupOutcome.INVALID_PAGE
    return LookupOutcome.FOUND
