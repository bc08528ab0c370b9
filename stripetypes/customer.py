"""Parameters for customer payment methods, bank account checks and balance transactions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from stripetypes.currency import Currency
from stripetypes.form import FormParams

__all__ = [
    "CustomerPaymentMethodRetrievalType",
    "CustomerPaymentMethodRetrieval",
    "VerifyBankAccount",
    "ListCustomerBalanceTransactions",
    "CreateCustomerBalanceTransaction",
    "UpdateCustomerBalanceTransaction",
]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
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


class CustomerPaymentMethodRetrievalType(enum.StrEnum):
    """The payment method type to filter a customer's payment methods by."""

    ACSS_DEBIT = "acss_debit"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALIPAY = "alipay"
    AU_BECS_DEBIT = "au_becs_debit"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    BOLETO = "boleto"
    CARD = "card"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    GRABPAY = "grabpay"
    IDEAL = "ideal"
    KLARNA = "klarna"
    OXXO = "oxxo"
    P24 = "p24"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    WECHAT_PAY = "wechat_pay"


@dataclass
class CustomerPaymentMethodRetrieval(FormParams):
    """Parameters for listing a customer's payment methods of one type."""

    type_: CustomerPaymentMethodRetrievalType = field(metadata={"wire": "type"})
    ending_before: str | None = None
    expand: list[str] = field(default_factory=list, metadata={"omit_empty": True})
    limit: int | None = None
    starting_after: str | None = None

    def __post_init__(self) -> None:
        self.type_ = CustomerPaymentMethodRetrievalType(self.type_)
        _check_int("limit", self.limit, _I32_MIN, _I32_MAX)


@dataclass
class VerifyBankAccount(FormParams):
    """Parameters for verifying a customer's bank account."""

    amounts: list[int] | None = None
    verification_method: str | None = None

    def __post_init__(self) -> None:
        for amount in self.amounts or ():
            _check_int("amount", amount, _I64_MIN, _I64_MAX)


@dataclass
class ListCustomerBalanceTransactions(FormParams):
    """Parameters for listing a customer's balance transactions."""

    expand: list[str] = field(default_factory=list, metadata={"omit_empty": True})
    ending_before: str | None = None
    limit: int | None = None
    starting_after: str | None = None

    def __post_init__(self) -> None:
        _check_int("limit", self.limit, 0, _U64_MAX)

    def set_last(self, item_id: str) -> None:
        """Continue the listing after the transaction with this id."""
        self.starting_after = item_id


@dataclass
class CreateCustomerBalanceTransaction(FormParams):
    """Parameters for creating a customer balance transaction."""

    amount: int
    currency: Currency
    description: str | None = None
    metadata: dict[str, str] | None = None

    def __post_init__(self) -> None:
        _check_int("amount", self.amount, _I64_MIN, _I64_MAX)
        self.currency = Currency.parse(self.currency)


@dataclass
class UpdateCustomerBalanceTransaction(FormParams):
    """Parameters for updating a balance transaction; only these fields can change."""

    description: str | None = None
    metadata: dict[str, str] | None = None