"""Enumerations for balance transactions and their fees."""

from __future__ import annotations

import enum

__all__ = ["BalanceTransactionStatus", "FeeType"]


class BalanceTransactionStatus(enum.StrEnum):
    """Possible values of a balance transaction's ``status`` field."""

    AVAILABLE = "available"
    PENDING = "pending"

    @classmethod
    def default(cls) -> BalanceTransactionStatus:
        """The status assumed when none is given."""
        return cls.PENDING


class FeeType(enum.StrEnum):
    """Possible values of a fee's ``type`` field."""

    APPLICATION_FEE = "application_fee"
    STRIPE_FEE = "stripe_fee"
    TAX = "tax"

    @classmethod
    def default(cls) -> FeeType:
        """The fee type assumed when none is given."""
        return cls.APPLICATION_FEE