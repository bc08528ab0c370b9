# stripetypes

Typed value types and request parameter records for the Stripe HTTP API,
with no runtime dependencies.

## What it does not do

The package makes no HTTP requests. It has no client, no API key handling,
no pagination, and no webhook signature checks. It also has no models for
response objects such as charges or customers. It gives you values and
parameter records. It turns them into JSON-ready dictionaries and
form-encoded bodies, which you send with whatever HTTP library you use.

## Installation

```
pip install stripetypes
```

Python 3.11 or newer is required.

## Modules

| Module | Contents |
| --- | --- |
| `stripetypes.currency` | `Currency`, `ParseCurrencyError` |
| `stripetypes.card` | `CardBrand`, `CardType` |
| `stripetypes.statuses` | `BankAccountStatus`, `TokenType`, `WebhookEndpointStatus`, `ReviewReason` |
| `stripetypes.sources` | `SourceStatus`, `SourceUsage`, `SourceRedirectFlowFailureReason`, `SourceRedirectFlowStatus`, `OrderStatusFilter` |
| `stripetypes.issuing` | `IssuingAuthorization*`, `IssuingCard*`, `IssuingDispute*`, `IssuingTransactionType` enums |
| `stripetypes.merchant` | `MerchantCategory`, `MerchantData` |
| `stripetypes.balance` | `BalanceTransactionStatus`, `FeeType` |
| `stripetypes.types` | `ApiVersion`, `DelayDays`, `Scheduled`, `UpTo`, `PaymentIntentOffSession` and their keyword enums |
| `stripetypes.form` | `FormParams`, `encode_form` |
| `stripetypes.payment_source` | `PaymentSourceParams`, `BankAccountParams`, `CardParams` |
| `stripetypes.search` | `SearchParams` and `ChargeSearchParams`, `CustomerSearchParams`, `InvoiceSearchParams`, `PaymentIntentSearchParams`, `PriceSearchParams`, `ProductSearchParams`, `SubscriptionSearchParams` |
| `stripetypes.billing` | `CaptureCharge`, `RetrieveUpcomingInvoice`, `SubscriptionItemFilter`, `CancelSubscription` |
| `stripetypes.customer` | `CustomerPaymentMethodRetrieval(Type)`, `VerifyBankAccount`, `ListCustomerBalanceTransactions`, `CreateCustomerBalanceTransaction`, `UpdateCustomerBalanceTransaction` |
| `stripetypes.payment_intent` | `PaymentErrorType`, `PaymentIntentMethodType`, `CaptureMethod`, `ConfirmationMethod`, `PaymentIntentNextActionType`, and the update, confirm, capture and cancel parameter records |
| `stripetypes.operations` | `CreateInvoiceLineItem`, `CreateLoginLink`, `ConfirmSetupIntent`, `CancelSetupIntent`, `CreateTransferReversal`, `UsageRecordAction`, `CreateUsageRecord`, `AttachPaymentMethod` |

## Enums

Every enum is a `StrEnum`. Each member's value is the exact string the API
uses, and `str(member)` returns that string. Many enums have a `default()`
class method that returns the value assumed when none is given.

```python
from stripetypes.currency import Currency, ParseCurrencyError

Currency.parse("eur")        # Currency.EUR
str(Currency.USD)            # "usd"
Currency.default()           # Currency.USD

try:
    Currency.parse("EUR")    # only exact lowercase codes are accepted
except ParseCurrencyError as exc:
    print(exc)               # unknown currency code
```

`ParseCurrencyError` is a subclass of `ValueError`.

Some enums accept values they do not know and map them to a catch-all member
instead of raising:

| Enum | Catch-all member |
| --- | --- |
| `CardBrand` | `UNKNOWN` |
| `CardType` | `UNKNOWN` |
| `PaymentErrorType` | `OTHER` |
| `CaptureMethod` | `OTHER` |
| `ConfirmationMethod` | `OTHER` |
| `PaymentIntentNextActionType` | `OTHER` |

```python
from stripetypes.card import CardBrand
from stripetypes.payment_intent import PaymentErrorType

CardBrand("Visa")                    # CardBrand.VISA
CardBrand("Hypercard")               # CardBrand.UNKNOWN
PaymentErrorType("card_error")       # PaymentErrorType.CARD
PaymentErrorType("brand_new_error")  # PaymentErrorType.OTHER
```

## Number-or-keyword values

The following types each hold either a number (or a boolean) or a keyword.
Each has `to_json()` and `from_json()`.

| Type | Holds |
| --- | --- |
| `DelayDays` | a number of days, or `minimum` |
| `Scheduled` | a Unix timestamp, or `now` |
| `UpTo` | an upper bound, or `inf` |
| `PaymentIntentOffSession` | a boolean, or `one_off` / `recurring` |

Numbers are range-checked. Invalid input raises `ValueError`.

```python
from stripetypes.types import DelayDays, OffSessionOther, PaymentIntentOffSession, Scheduled, UpTo

DelayDays.days(7).to_json()          # 7
DelayDays.minimum().to_json()        # "minimum"
Scheduled.from_json("now") == Scheduled.now()   # True
UpTo.now().to_json()                 # "inf"
PaymentIntentOffSession.frequency(OffSessionOther.RECURRING).to_json()  # "recurring"
```

## Request parameters

The parameter records are dataclasses built on `FormParams`:

- `to_dict()` returns a JSON-ready mapping and leaves out fields that are `None`.
- `to_form()` returns a form-encoded body.

`encode_form` works on any mapping:

- Nested keys use brackets.
- List items are keyed by index.
- Booleans are written as `true` or `false`.
- `None` values and empty lists produce nothing.

```python
from stripetypes.form import encode_form

encode_form({"metadata": {"order": "42"}, "expand": ["customer"]})
# "metadata[order]=42&expand[0]=customer"
```

### Search parameters

Search parameters carry the endpoint path in their `path` class attribute.

```python
from stripetypes.search import ChargeSearchParams

params = ChargeSearchParams(query="amount>999", limit=10)
ChargeSearchParams.path      # "/charges/search"
params.to_dict()             # {"query": "amount>999", "limit": 10, "expand": []}
```

### Login links

```python
from stripetypes.operations import CreateLoginLink

CreateLoginLink.for_redirect("https://example.com/return").to_form()
# "redirect_url=https%3A%2F%2Fexample.com%2Freturn"
```

### Payment sources

`PaymentSourceParams` is either a token id or an existing source id. Its
`to_json()` returns the bare id.

```python
from stripetypes.payment_source import PaymentSourceParams

PaymentSourceParams.token("token").to_json()   # "token"
```

`BankAccountParams.to_dict()` and `CardParams.to_dict()` tag the details with
`"object": "bank_account"` or `"object": "card"`. Their optional fields appear
in the mapping as `None`. `to_form()` drops those `None` fields.

`BankAccountParams` does not send `account_holder_type`.

### Other behaviour

- `CustomerPaymentMethodRetrieval` sends its `type_` field as `type`.
- `ListCustomerBalanceTransactions.set_last(item_id)` sets `starting_after`, so
  the next request continues the listing after that item.
- Constructors check that integer fields are within their ranges. Currency
  fields are parsed with `Currency.parse`.

## Running the tests

```
pip install -e ".[test]"
pytest
```