import pytest

from stripetypes.issuing import (
    IssuingAuthorizationCheck,
    IssuingAuthorizationMethod,
    IssuingAuthorizationReason,
    IssuingAuthorizationWalletProvider,
    IssuingCardPinStatus,
    IssuingCardShippingStatus,
    IssuingCardShippingType,
    IssuingCardType,
    IssuingDisputeReason,
    IssuingDisputeStatus,
    IssuingTransactionType,
)


@pytest.mark.parametrize(
    ("enum_cls", "expected"),
    [
        (IssuingAuthorizationCheck, IssuingAuthorizationCheck.NOT_PROVIDED),
        (IssuingAuthorizationMethod, IssuingAuthorizationMethod.ONLINE),
        (IssuingAuthorizationReason, IssuingAuthorizationReason.AUTHENTICATION_FAILED),
        (IssuingAuthorizationWalletProvider, IssuingAuthorizationWalletProvider.APPLE_PAY),
        (IssuingCardShippingType, IssuingCardShippingType.INDIVIDUAL),
        (IssuingCardType, IssuingCardType.PHYSICAL),
        (IssuingDisputeStatus, IssuingDisputeStatus.UNSUBMITTED),
        (IssuingTransactionType, IssuingTransactionType.CAPTURE),
    ],
)
def test_defaults(enum_cls, expected):
    assert enum_cls.default() is expected


def test_wallet_provider_strings():
    assert str(IssuingAuthorizationWalletProvider("apple_pay")) == "apple_pay"
    assert (
        IssuingAuthorizationWalletProvider("google_pay")
        is IssuingAuthorizationWalletProvider.GOOGLE_PAY
    )
    assert (
        IssuingAuthorizationWalletProvider("samsung_pay")
        is IssuingAuthorizationWalletProvider.SAMSUNG_PAY
    )
    assert str(IssuingAuthorizationWalletProvider.GOOGLE_PAY) == "google_pay"


def test_dispute_and_transaction_strings():
    assert IssuingDisputeStatus("under_review") is IssuingDisputeStatus.UNDER_REVIEW
    assert IssuingDisputeStatus.UNDER_REVIEW == "under_review"
    assert IssuingTransactionType("cash_withdrawal") is IssuingTransactionType.CASH_WITHDRAWAL
    assert IssuingTransactionType.REFUND_REVERSAL.value == "refund_reversal"
    assert f"{IssuingCardShippingStatus('delivered')}" == "delivered"


def test_snake_case_wire_values():
    assert IssuingAuthorizationCheck("not_provided") is IssuingAuthorizationCheck.NOT_PROVIDED
    assert IssuingAuthorizationMethod("keyed_in") is IssuingAuthorizationMethod.KEYED_IN


def test_every_value_round_trips():
    for member in IssuingAuthorizationCheck:
        assert IssuingAuthorizationCheck(str(member)) is member
    for member in IssuingAuthorizationMethod:
        assert IssuingAuthorizationMethod(str(member)) is member
    for member in IssuingAuthorizationReason:
        assert IssuingAuthorizationReason(str(member)) is member
    for member in IssuingAuthorizationWalletProvider:
        assert IssuingAuthorizationWalletProvider(str(member)) is member
    for member in IssuingCardPinStatus:
        assert IssuingCardPinStatus(str(member)) is member
    for member in IssuingCardShippingStatus:
        assert IssuingCardShippingStatus(str(member)) is member
    for member in IssuingCardShippingType:
        assert IssuingCardShippingType(str(member)) is member
    for member in IssuingCardType:
        assert IssuingCardType(str(member)) is member
    for member in IssuingDisputeReason:
        assert IssuingDisputeReason(str(member)) is member
    for member in IssuingDisputeStatus:
        assert IssuingDisputeStatus(str(member)) is member
    for member in IssuingTransactionType:
        assert IssuingTransactionType(str(member)) is member


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        IssuingAuthorizationCheck("no_such_value")
    with pytest.raises(ValueError):
        IssuingAuthorizationMethod("no_such_value")
    with pytest.raises(ValueError):
        IssuingAuthorizationReason("no_such_value")
    with pytest.raises(ValueError):
        IssuingAuthorizationWalletProvider("no_such_value")
    with pytest.raises(ValueError):
        IssuingCardPinStatus("no_such_value")
    with pytest.raises(ValueError):
        IssuingCardShippingStatus("no_such_value")
    with pytest.raises(ValueError):
        IssuingCardShippingType("no_such_value")
    with pytest.raises(ValueError):
        IssuingCardType("no_such_value")
    with pytest.raises(ValueError):
        IssuingDisputeReason("no_such_value")
    with pytest.raises(ValueError):
        IssuingDisputeStatus("no_such_value")
    with pytest.raises(ValueError):
        IssuingTransactionType("no_such_value")


def test_member_counts():
    assert len({IssuingAuthorizationReason(m.value) for m in IssuingAuthorizationReason}) == 11
    assert len({IssuingCardShippingStatus(m.value) for m in IssuingCardShippingStatus}) == 6
    assert len({IssuingCardPinStatus(m.value) for m in IssuingCardPinStatus}) == 2
    assert len({IssuingDisputeReason(m.value) for m in IssuingDisputeReason}) == 2