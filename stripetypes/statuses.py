"""Status and kind enumerations for bank accounts, tokens, webhooks and reviews."""

from __future__ import annotations

import enum

__all__ = ["BankAccountStatus", "TokenType", "WebhookEndpointStatus", "ReviewReason"]


class BankAccountStatus(enum.StrEnum):
    """Possible values of a bank account's ``status`` field."""

    ERRORED = "errored"
    NEW = "new"
    VALIDATED = "validated"
    VERIFICATION_FAILED = "verification_failed"
    VERIFIED = "verified"


class TokenType(enum.StrEnum):
    """Possible values of a token's ``type`` field."""

    ACCOUNT = "account"
    BANK_ACCOUNT = "bank_account"
    CARD = "card"
    PII = "pii"

    @classmethod
    def default(cls) -> TokenType:
        """The token type assumed when none is given."""
        return cls.ACCOUNT


class WebhookEndpointStatus(enum.StrEnum):
    """Possible values of a webhook endpoint's ``status`` field."""

    DISABLED = "disabled"
    ENABLED = "enabled"


class ReviewReason(enum.StrEnum):
    """Possible values of a review's ``reason`` field."""

    APPROVED = "approved"
    DISPUTED = "disputed"
    MANUAL = "manual"
    REFUNDED = "refunded"
    REFUNDED_AS_FRAUD = "refunded_as_fraud"
    RULE = "rule"

    @classmethod
    def default(cls) -> ReviewReason:
        """The review reason assumed when none is given."""
        return cls.APPROVED