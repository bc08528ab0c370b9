"""Parameters for capturing charges, previewing invoices and cancelling subscriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stripetypes.form import FormParams

__all__ = [
    "CaptureCharge",
    "RetrieveUpcomingInvoice",
    "SubscriptionItemFilter",
    "CancelSubscription",
]


def _check_unsigned(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer: {value!r}")


@dataclass
class CaptureCharge(FormParams):
    """Parameters for capturing a previously uncaptured charge."""

    amount: int | None = None
    application_fee: int | None = None
    receipt_email: str | None = None
    statement_descriptor: str | None = None

    def __post_init__(self) -> None:
        _check_unsigned("amount", self.amount)
        _check_unsigned("application_fee", self.application_fee)


@dataclass
class SubscriptionItemFilter(FormParams):
    """A subscription item to apply when previewing an upcoming invoice."""

    id: str | None = None
    deleted: bool | None = None
    metadata: dict[str, str] | None = None
    plan: str | None = None
    quantity: int | None = None

    def __post_init__(self) -> None:
        _check_unsigned("quantity", self.quantity)


@dataclass
class RetrieveUpcomingInvoice(FormParams):
    """Parameters for previewing a customer's upcoming invoice."""

    customer: str
    coupon: str | None = None
    subscription: str | None = None
    subscription_items: SubscriptionItemFilter | None = None
    subscription_prorate: bool | None = None
    subscription_proration_date: int | None = None
    subscription_tax_percent: float | None = None
    subscription_trial_end: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.customer, str):
            raise ValueError(f"invalid customer id: {self.customer!r}")


@dataclass
class CancelSubscription(FormParams):
    """Parameters for cancelling a subscription."""

    at_period_end: bool | None = None