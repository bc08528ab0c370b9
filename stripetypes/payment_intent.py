"""Payment intent enumerations and the parameters for updating, confirming, capturing and cancelling."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from stripetypes.currency import Currency
from stripetypes.form import FormParams

__all__ = [
    "PaymentErrorType",
    "PaymentIntentMethodType",
    "CaptureMethod",
    "ConfirmationMethod",
    "PaymentIntentNextActionType",
    "PaymentIntentUpdateParams",
    "PaymentIntentConfirmParams",
    "CapturePaymentIntent",
    "CancelPaymentIntent",
]

_U64_MAX = 2**64 - 1


def _check_unsigned(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer: {value!r}")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{name} out of range: {value}")


class PaymentErrorType(enum.StrEnum):
    """The kind of error on a failed payment; unrecognised kinds map to ``OTHER``.

    ``OTHER`` only describes received values and must not be sent.
    """

    API = "api_error"
    CONNECTION = "api_connection_error"
    AUTHENTICATION = "authentication_error"
    CARD = "card_error"
    IDEMPOTENCY = "idempotency_error"
    INVALID_REQUEST = "invalid_request_error"
    RATE_LIMIT = "rate_limit_error"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> PaymentErrorType:
        return cls.OTHER


class PaymentIntentMethodType(enum.StrEnum):
    """The way a payment intent needs to be fulfilled."""

    CARD = "card"
    IDEAL = "ideal"
    SEPA_DEBIT = "sepa_debit"


class CaptureMethod(enum.StrEnum):
    """How funds are captured; unrecognised values map to ``OTHER``."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> CaptureMethod:
        return cls.OTHER


class ConfirmationMethod(enum.StrEnum):
    """Which key may confirm a payment intent; unrecognised values map to ``OTHER``."""

    SECRET = "secret"
    PUBLISHABLE = "publishable"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> ConfirmationMethod:
        return cls.OTHER


class PaymentIntentNextActionType(enum.StrEnum):
    """The next action a customer must take; unrecognised values map to ``OTHER``."""

    REDIRECT_TO_URL = "redirect_to_url"
    USE_STRIPE_SDK = "use_stripe_sdk"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: object) -> PaymentIntentNextActionType:
        return cls.OTHER


@dataclass
class PaymentIntentUpdateParams(FormParams):
    """Parameters for updating a payment intent."""

    amount: int | None = None
    application_fee_amount: int | None = None
    currency: Currency | None = None
    customer: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None
    receipt_email: str | None = None
    save_source_to_customer: bool | None = None
    shipping: dict[str, Any] | None = None
    source: str | None = None
    transfer_group: str | None = None

    def __post_init__(self) -> None:
        _check_unsigned("amount", self.amount)
        _check_unsigned("application_fee_amount", self.application_fee_amount)
        if self.currency is not None:
            self.currency = Currency.parse(self.currency)


@dataclass
class PaymentIntentConfirmParams(FormParams):
    """Parameters for confirming a payment intent."""

    receipt_email: str | None = None
    return_url: str | None = None
    save_source_to_customer: bool | None = None
    shipping: dict[str, Any] | None = None
    source: str | None = None


@dataclass
class CapturePaymentIntent(FormParams):
    """Parameters for capturing an uncaptured payment intent."""

    amount_to_capture: int | None = None
    application_fee_amount: int | None = None

    def __post_init__(self) -> None:
        _check_unsigned("amount_to_capture", self.amount_to_capture)
        _check_unsigned("application_fee_amount", self.application_fee_amount)


@dataclass
class CancelPaymentIntent(FormParams):
    """Parameters for cancelling a payment intent."""

    cancellation_reason: str | None = None