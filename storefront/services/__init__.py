"""Storefront value services: money and currency."""
from .money import Money, CurrencyMismatchError
from .currency import Currency, CurrencyResolution, KNOWN_CURRENCY_CODES, resolve_currency_code

__all__ = [
    "Money",
    "CurrencyMismatchError",
    "Currency",
    "CurrencyResolution",
    "KNOWN_CURRENCY_CODES",
    "resolve_currency_code",
]
