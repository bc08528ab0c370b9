"""Enumerations used by card issuing: authorizations, cards, disputes and transactions."""

from __future__ import annotations

import enum

__all__ = [
    "IssuingAuthorizationCheck",
    "IssuingAuthorizationMethod",
    "IssuingAuthorizationReason",
    "IssuingAuthorizationWalletProvider",
    "IssuingCardPinStatus",
    "IssuingCardShippingStatus",
    "IssuingCardShippingType",
    "IssuingCardType",
    "IssuingDisputeReason",
    "IssuingDisputeStatus",
    "IssuingTransactionType",
]


class IssuingAuthorizationCheck(enum.StrEnum):
    """Outcome of a verification check on an authorization."""

    MATCH = "match"
    MISMATCH = "mismatch"
    NOT_PROVIDED = "not_provided"

    @classmethod
    def default(cls) -> IssuingAuthorizationCheck:
        """The check outcome assumed when none is given."""
        return cls.NOT_PROVIDED


class IssuingAuthorizationMethod(enum.StrEnum):
    """How the card details were provided for an authorization."""

    KEYED_IN = "keyed_in"
    SWIPE = "swipe"
    CHIP = "chip"
    CONTACTLESS = "contactless"
    ONLINE = "online"

    @classmethod
    def default(cls) -> IssuingAuthorizationMethod:
        """The method assumed when none is given."""
        return cls.ONLINE


class IssuingAuthorizationReason(enum.StrEnum):
    """Why an authorization request was approved or declined."""

    AUTHENTICATION_FAILED = "authentication_failed"
    AUTHORIZATION_CONTROLS = "authorization_controls"
    CARD_ACTIVE = "card_active"
    CARD_INACTIVE = "card_inactive"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    ACCOUNT_COMPLIANCE_DISABLED = "account_compliance_disabled"
    ACCOUNT_INACTIVE = "account_inactive"
    SUSPECTED_FRAUD = "suspected_fraud"
    WEBHOOK_APPROVED = "webhook_approved"
    WEBHOOK_DECLINED = "webhook_declined"
    WEBHOOK_TIMEOUT = "webhook_timeout"

    @classmethod
    def default(cls) -> IssuingAuthorizationReason:
        """The reason assumed when none is given."""
        return cls.AUTHENTICATION_FAILED


class IssuingAuthorizationWalletProvider(enum.StrEnum):
    """The digital wallet an authorization was made through."""

    APPLE_PAY = "apple_pay"
    GOOGLE_PAY = "google_pay"
    SAMSUNG_PAY = "samsung_pay"

    @classmethod
    def default(cls) -> IssuingAuthorizationWalletProvider:
        """The wallet provider assumed when none is given."""
        return cls.APPLE_PAY


class IssuingCardPinStatus(enum.StrEnum):
    """Possible values of a card PIN's ``status`` field."""

    ACTIVE = "active"
    BLOCKED = "blocked"


class IssuingCardShippingStatus(enum.StrEnum):
    """Possible values of a card shipment's ``status`` field."""

    CANCELED = "canceled"
    DELIVERED = "delivered"
    FAILURE = "failure"
    PENDING = "pending"
    RETURNED = "returned"
    SHIPPED = "shipped"


class IssuingCardShippingType(enum.StrEnum):
    """Possible values of a card shipment's ``type`` field."""

    BULK = "bulk"
    INDIVIDUAL = "individual"

    @classmethod
    def default(cls) -> IssuingCardShippingType:
        """The shipping type assumed when none is given."""
        return cls.INDIVIDUAL


class IssuingCardType(enum.StrEnum):
    """Possible values of an issued card's ``type`` field."""

    PHYSICAL = "physical"
    VIRTUAL = "virtual"

    @classmethod
    def default(cls) -> IssuingCardType:
        """The card type assumed when none is given."""
        return cls.PHYSICAL


class IssuingDisputeReason(enum.StrEnum):
    """Possible values of an issuing dispute's ``reason`` field."""

    FRAUDULENT = "fraudulent"
    OTHER = "other"


class IssuingDisputeStatus(enum.StrEnum):
    """Possible values of an issuing dispute's ``status`` field."""

    LOST = "lost"
    UNDER_REVIEW = "under_review"
    UNSUBMITTED = "unsubmitted"
    WON = "won"

    @classmethod
    def default(cls) -> IssuingDisputeStatus:
        """The dispute status assumed when none is given."""
        return cls.UNSUBMITTED


class IssuingTransactionType(enum.StrEnum):
    """Possible values of an issuing transaction's ``type`` field."""

    CAPTURE = "capture"
    CASH_WITHDRAWAL = "cash_withdrawal"
    DISPUTE = "dispute"
    DISPUTE_LOSS = "dispute_loss"
    REFUND = "refund"
    REFUND_REVERSAL = "refund_reversal"

    @classmethod
    def default(cls) -> IssuingTransactionType:
        """The transaction type assumed when none is given."""
        return cls.CAPTURE