"""Parameters for invoice items, login links, setup intents, transfer reversals, usage records and payment methods."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from stripetypes.currency import Currency
from stripetypes.form import FormParams

__all__ = [
    "CreateInvoiceLineItem",
    "CreateLoginLink",
    "ConfirmSetupIntent",
    "CancelSetupIntent",
    "CreateTransferReversal",
    "UsageRecordAction",
    "CreateUsageRecord",
    "AttachPaymentMethod",
]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


def _check_int(name: str, value: Any, low: int, high: int) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer: {value!r}")
    if not low <= value <= high:
        raise ValueError(f"{name} out of range: {value}")


@dataclass
class CreateInvoiceLineItem(FormParams):
    """Parameters for creating an invoice line item."""

    amount: int | None = None
    currency: Currency | None = None
    customer: str | None = None
    description: str | None = None
    discountable: bool | None = None
    invoice: str | None = None
    subscription: bool | None = None

    def __post_init__(self) -> None:
        _check_int("amount", self.amount, _I64_MIN, _I64_MAX)
        if self.currency is not None:
            self.currency = Currency.parse(self.currency)


@dataclass
class CreateLoginLink(FormParams):
    """Parameters for creating a dashboard login link for a connected account."""

    expand: list[str] = field(default_factory=list, metadata={"omit_empty": True})
    redirect_url: str | None = None

    @classmethod
    def for_redirect(cls, redirect_url: str) -> CreateLoginLink:
        """A login link that sends the user to ``redirect_url`` after logging out."""
        return cls(expand=[], redirect_url=str(redirect_url))


@dataclass
class ConfirmSetupIntent(FormParams):
    """Parameters for confirming a setup intent."""

    client_secret: str | None = None
    payment_method: str | None = None
    redirect_url: str | None = None


@dataclass
class CancelSetupIntent(FormParams):
    """Parameters for cancelling a setup intent."""

    cancellation_reason: str | None = None


@dataclass
class CreateTransferReversal(FormParams):
    """Parameters for reversing a transfer."""

    amount: int | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None
    refund_application_fee: bool | None = None

    def __post_init__(self) -> None:
        _check_int("amount", self.amount, 0, _U64_MAX)


class UsageRecordAction(enum.StrEnum):
    """How a usage quantity is applied at its timestamp."""

    INCREMENT = "increment"
    SET = "set"


@dataclass
class CreateUsageRecord(FormParams):
    """Parameters for reporting usage on a subscription item."""

    quantity: int = 0
    action: UsageRecordAction | None = None
    timestamp: int | None = None

    def __post_init__(self) -> None:
        _check_int("quantity", self.quantity, 0, _U64_MAX)
        _check_int("timestamp", self.timestamp, _I64_MIN, _I64_MAX)
        if self.action is not None:
            self.action = UsageRecordAction(self.action)


@dataclass
class AttachPaymentMethod(FormParams):
    """Parameters for attaching a payment method to a customer."""

    customer: str

    def __post_init__(self) -> None:
        if not isinstance(self.customer, str):
            raise ValueError(f"invalid customer id: {self.customer!r}")