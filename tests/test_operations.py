import pytest

from stripetypes.currency import Currency
from stripetypes.operations import (
    AttachPaymentMethod,
    CancelSetupIntent,
    ConfirmSetupIntent,
    CreateInvoiceLineItem,
    CreateLoginLink,
    CreateTransferReversal,
    CreateUsageRecord,
    UsageRecordAction,
)


def test_invoice_line_item_empty_by_default():
    assert CreateInvoiceLineItem().to_dict() == {}


def test_invoice_line_item_fields():
    item = CreateInvoiceLineItem(amount=-150, currency="eur", customer="cus_1", discountable=False)
    assert item.currency is Currency.EUR
    assert item.to_dict() == {
        "amount": -150,
        "currency": "eur",
        "customer": "cus_1",
        "discountable": False,
    }


def test_invoice_line_item_form_booleans():
    item = CreateInvoiceLineItem(discountable=True, subscription=False)
    assert item.to_form() == "discountable=true&subscription=false"


def test_invoice_line_item_rejects_bad_currency():
    with pytest.raises(ValueError):
        CreateInvoiceLineItem(currency="zzz")


def test_invoice_line_item_rejects_out_of_range_amount():
    with pytest.raises(ValueError):
        CreateInvoiceLineItem(amount=2**63)


def test_login_link_for_redirect():
    link = CreateLoginLink.for_redirect("https://example.com/back")
    assert link.redirect_url == "https://example.com/back"
    assert link.to_dict() == {"redirect_url": "https://example.com/back"}


def test_login_link_expand_sent_when_present():
    link = CreateLoginLink(expand=["account"])
    assert link.to_dict() == {"expand": ["account"]}


def test_confirm_setup_intent_omits_unset():
    params = ConfirmSetupIntent(payment_method="pm_1")
    assert params.to_dict() == {"payment_method": "pm_1"}


def test_cancel_setup_intent():
    assert CancelSetupIntent().to_dict() == {}
    assert CancelSetupIntent("abandoned").to_dict() == {"cancellation_reason": "abandoned"}


def test_transfer_reversal_metadata_form():
    params = CreateTransferReversal(amount=100, metadata={"order": "42"})
    assert params.to_dict() == {"amount": 100, "metadata": {"order": "42"}}
    assert params.to_form() == "amount=100&metadata[order]=42"


def test_transfer_reversal_rejects_negative_amount():
    with pytest.raises(ValueError):
        CreateTransferReversal(amount=-1)


def test_usage_record_action_values():
    assert UsageRecordAction("increment") is UsageRecordAction.INCREMENT
    assert str(UsageRecordAction.SET) == "set"


def test_usage_record_serializes_action():
    record = CreateUsageRecord(quantity=5, action="set")
    assert record.action is UsageRecordAction.SET
    assert record.to_dict() == {"quantity": 5, "action": "set"}


def test_usage_record_default_quantity_always_sent():
    assert CreateUsageRecord().to_dict() == {"quantity": 0}


def test_usage_record_rejects_bad_action():
    with pytest.raises(ValueError):
        CreateUsageRecord(quantity=1, action="add")


def test_usage_record_rejects_negative_quantity():
    with pytest.raises(ValueError):
        CreateUsageRecord(quantity=-3)


def test_attach_payment_method():
    assert AttachPaymentMethod("cus_1").to_form() == "customer=cus_1"


def test_attach_payment_method_requires_string():
    with pytest.raises(ValueError):
        AttachPaymentMethod(7)