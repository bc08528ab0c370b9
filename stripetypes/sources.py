"""Status enumerations for payment sources and order list filters."""

from __future__ import annotations

import enum

__all__ = [
    "SourceStatus",
    "SourceUsage",
    "SourceRedirectFlowFailureReason",
    "SourceRedirectFlowStatus",
    "OrderStatusFilter",
]


class SourceStatus(enum.StrEnum):
    """Possible values of a source's ``status`` field."""

    CANCELED = "canceled"
    CHARGEABLE = "chargeable"
    CONSUMED = "consumed"
    FAILED = "failed"
    PENDING = "pending"

    @classmethod
    def default(cls) -> SourceStatus:
        """The status assumed when none is given."""
        return cls.PENDING


class SourceUsage(enum.StrEnum):
    """Possible values of a source's ``usage`` field."""

    REUSABLE = "reusable"
    SINGLE_USE = "single_use"


class SourceRedirectFlowFailureReason(enum.StrEnum):
    """Possible values of a redirect flow's ``failure_reason`` field."""

    DECLINED = "declined"
    PROCESSING_ERROR = "processing_error"
    USER_ABORT = "user_abort"

    @classmethod
    def default(cls) -> SourceRedirectFlowFailureReason:
        """The failure reason assumed when none is given."""
        return cls.DECLINED


class SourceRedirectFlowStatus(enum.StrEnum):
    """Possible values of a redirect flow's ``status`` field."""

    FAILED = "failed"
    NOT_REQUIRED = "not_required"
    PENDING = "pending"
    SUCCEEDED = "succeeded"

    @classmethod
    def default(cls) -> SourceRedirectFlowStatus:
        """The status assumed when none is given."""
        return cls.PENDING


class OrderStatusFilter(enum.StrEnum):
    """Possible values of the ``status`` filter when listing orders."""

    CREATED = "created"
    FULFILLED = "fulfilled"
    PAID = "paid"
    REFUNDED = "refunded"