"""Enums, number-or-keyword values and form-encodable request parameters for the Stripe HTTP API."""

__version__ = "0.26.0"