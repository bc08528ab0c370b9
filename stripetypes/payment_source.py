"""Parameters describing a payment source to attach or create."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stripetypes.currency import Currency
from stripetypes.form import FormParams

__all__ = ["PaymentSourceParams", "BankAccountParams", "CardParams"]

_KINDS = ("token", "source")


@dataclass(frozen=True)
class PaymentSourceParams:
    """A payment source given either as a token id or an existing source id."""

    id: str
    kind: str = "token"

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"invalid payment source kind: {self.kind!r}")
        if not isinstance(self.id, str):
            raise ValueError(f"invalid payment source id: {self.id!r}")

    @classmethod
    def token(cls, token_id: str) -> PaymentSourceParams:
        """A source created from tokenized payment details."""
        return cls(token_id, "token")

    @classmethod
    def source(cls, source_id: str) -> PaymentSourceParams:
        """An existing source."""
        return cls(source_id, "source")

    def to_json(self) -> str:
        """The value as it appears in a request: the bare id."""
        return self.id


@dataclass
class BankAccountParams(FormParams):
    """Raw bank account details for creating a bank account source."""

    country: str = ""
    currency: Currency = field(default_factory=Currency.default)
    account_holder_name: str | None = None
    account_holder_type: str | None = None
    routing_number: str | None = None
    account_number: str = ""

    def __post_init__(self) -> None:
        self.currency = Currency.parse(self.currency)

    def to_dict(self) -> dict[str, Any]:
        """The details tagged as a bank account; the holder type is not sent."""
        return {
            "object": "bank_account",
            "country": self.country,
            "currency": self.currency.value,
            "account_holder_name": self.account_holder_name,
            "routing_number": self.routing_number,
            "account_number": self.account_number,
        }


@dataclass
class CardParams(FormParams):
    """Raw card details for creating a card source."""

    exp_month: str = ""
    exp_year: str = ""
    number: str = ""
    name: str | None = None
    cvc: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """The details tagged as a card."""
        return {
            "object": "card",
            "exp_month": self.exp_month,
            "exp_year": self.exp_year,
            "number": self.number,
            "name": self.name,
            "cvc": self.cvc,
        }