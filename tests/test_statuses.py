import pytest

from stripetypes.statuses import (
    BankAccountStatus,
    ReviewReason,
    TokenType,
    WebhookEndpointStatus,
)


def test_round_trip():
    for member in BankAccountStatus:
        assert BankAccountStatus(str(member)) is member
    for member in TokenType:
        assert TokenType(str(member)) is member
    for member in WebhookEndpointStatus:
        assert WebhookEndpointStatus(str(member)) is member
    for member in ReviewReason:
        assert ReviewReason(str(member)) is member


def test_values_are_snake_case_of_names():
    for member in BankAccountStatus:
        assert BankAccountStatus(member.name.lower()) is member
    for member in TokenType:
        assert TokenType(member.name.lower()) is member
    for member in WebhookEndpointStatus:
        assert WebhookEndpointStatus(member.name.lower()) is member
    for member in ReviewReason:
        assert ReviewReason(member.name.lower()) is member


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        BankAccountStatus("definitely_not_a_value")
    with pytest.raises(ValueError):
        TokenType("definitely_not_a_value")
    with pytest.raises(ValueError):
        WebhookEndpointStatus("definitely_not_a_value")
    with pytest.raises(ValueError):
        ReviewReason("definitely_not_a_value")


def test_wire_strings():
    assert str(BankAccountStatus.VERIFICATION_FAILED) == "verification_failed"
    assert str(TokenType.BANK_ACCOUNT) == "bank_account"
    assert str(ReviewReason.REFUNDED_AS_FRAUD) == "refunded_as_fraud"
    assert WebhookEndpointStatus("enabled") is WebhookEndpointStatus.ENABLED


def test_defaults():
    assert TokenType.default() is TokenType.ACCOUNT
    assert ReviewReason.default() is ReviewReason.APPROVED