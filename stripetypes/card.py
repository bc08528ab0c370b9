"""Card brand and funding type as reported on card objects."""

from __future__ import annotations

import enum

__all__ = ["CardBrand", "CardType"]


class CardBrand(enum.StrEnum):
    """The network brand of a card; unrecognised brands map to ``UNKNOWN``."""

    AMERICAN_EXPRESS = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    JCB = "JCB"
    VISA = "Visa"
    MASTER_CARD = "MasterCard"
    UNION_PAY = "UnionPay"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> CardBrand:
        return cls.UNKNOWN

    @classmethod
    def default(cls) -> CardBrand:
        """The brand assumed when none is known."""
        return cls.UNKNOWN


class CardType(enum.StrEnum):
    """The funding type of a card; unrecognised types map to ``UNKNOWN``."""

    CREDIT = "credit"
    DEBIT = "debit"
    PREPAID = "prepaid"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> CardType:
        return cls.UNKNOWN

    @classmethod
    def default(cls) -> CardType:
        """The funding type assumed when none is known."""
        return cls.UNKNOWN