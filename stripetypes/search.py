"""Parameters for the search endpoints of searchable resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from stripetypes.form import FormParams

__all__ = [
    "SearchParams",
    "ChargeSearchParams",
    "CustomerSearchParams",
    "InvoiceSearchParams",
    "PaymentIntentSearchParams",
    "PriceSearchParams",
    "ProductSearchParams",
    "SubscriptionSearchParams",
]


def _check_unsigned(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer: {value!r}")


@dataclass
class SearchParams(FormParams):
    """A search query with optional limit, page and expansions."""

    path: ClassVar[str] = ""

    query: str = ""
    limit: int | None = None
    page: int | None = None
    expand: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_unsigned("limit", self.limit)
        _check_unsigned("page", self.page)

    def to_dict(self) -> dict[str, Any]:
        """The query, any limit and page, and the expansions."""
        out: dict[str, Any] = {"query": self.query}
        if self.limit is not None:
            out["limit"] = self.limit
        if self.page is not None:
            out["page"] = self.page
        out["expand"] = list(self.expand)
        return out


class ChargeSearchParams(SearchParams):
    """Search parameters for charges."""

    path: ClassVar[str] = "/charges/search"


class CustomerSearchParams(SearchParams):
    """Search parameters for customers."""

    path: ClassVar[str] = "/customers/search"


class InvoiceSearchParams(SearchParams):
    """Search parameters for invoices."""

    path: ClassVar[str] = "/invoices/search"


class PaymentIntentSearchParams(SearchParams):
    """Search parameters for payment intents."""

    path: ClassVar[str] = "/payment_intents/search"


class PriceSearchParams(SearchParams):
    """Search parameters for prices."""

    path: ClassVar[str] = "/prices/search"


class ProductSearchParams(SearchParams):
    """Search parameters for products."""

    path: ClassVar[str] = "/products/search"


class SubscriptionSearchParams(SearchParams):
    """Search parameters for subscriptions."""

    path: ClassVar[str] = "/subscriptions/search"