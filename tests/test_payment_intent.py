import pytest

from stripetypes.currency import Currency, ParseCurrencyError
from stripetypes.payment_intent import (
    CancelPaymentIntent,
    CaptureMethod,
    CapturePaymentIntent,
    ConfirmationMethod,
    PaymentErrorType,
    PaymentIntentConfirmParams,
    PaymentIntentMethodType,
    PaymentIntentNextActionType,
    PaymentIntentUpdateParams,
)


@pytest.mark.parametrize(
    "wire, member",
    [
        ("api_error", PaymentErrorType.API),
        ("api_connection_error", PaymentErrorType.CONNECTION),
        ("card_error", PaymentErrorType.CARD),
        ("rate_limit_error", PaymentErrorType.RATE_LIMIT),
    ],
)
def test_payment_error_type_known(wire, member):
    assert PaymentErrorType(wire) is member
    assert str(member) == wire


def test_payment_error_type_unknown_is_other():
    assert PaymentErrorType("brand_new_error") is PaymentErrorType.OTHER


@pytest.mark.parametrize(
    "enum_cls, wire",
    [
        (CaptureMethod, "automatic"),
        (ConfirmationMethod, "publishable"),
        (PaymentIntentNextActionType, "use_stripe_sdk"),
    ],
)
def test_open_enums_round_trip(enum_cls, wire):
    assert enum_cls(wire).value == wire
    assert enum_cls("unheard_of") is enum_cls.OTHER


def test_method_type_is_closed():
    assert PaymentIntentMethodType("sepa_debit") is PaymentIntentMethodType.SEPA_DEBIT
    with pytest.raises(ValueError):
        PaymentIntentMethodType("paypal")


def test_update_params_only_set_fields():
    params = PaymentIntentUpdateParams(amount=2000, currency="eur")
    assert params.currency is Currency.EUR
    assert params.to_dict() == {"amount": 2000, "currency": "eur"}


def test_update_params_empty():
    assert PaymentIntentUpdateParams().to_form() == ""


def test_update_params_negative_amount_raises():
    with pytest.raises(ValueError):
        PaymentIntentUpdateParams(amount=-1)


def test_update_params_bad_currency_raises():
    with pytest.raises(ParseCurrencyError):
        PaymentIntentUpdateParams(currency="xyz")


def test_confirm_params_nested_shipping_form():
    params = PaymentIntentConfirmParams(
        save_source_to_customer=True,
        shipping={"name": "Jo", "address": {"city": "Berlin"}},
    )
    assert params.to_form() == (
        "save_source_to_customer=true"
        "&shipping[name]=Jo&shipping[address][city]=Berlin"
    )


def test_capture_params():
    params = CapturePaymentIntent(amount_to_capture=750)
    assert params.to_dict() == {"amount_to_capture": 750}
    with pytest.raises(ValueError):
        CapturePaymentIntent(application_fee_amount=True)


def test_cancel_params():
    assert CancelPaymentIntent().to_dict() == {}
    params = CancelPaymentIntent(cancellation_reason="duplicate")
    assert params.to_form() == "cancellation_reason=duplicate"