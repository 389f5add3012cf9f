"""
Currency Registry

Known ISO 4217 codes, display symbols and the resolver used when a cart
is created from a raw currency code string.

Usage:
    from storefront.services.currency import resolve_currency_code

    resolution = resolve_currency_code("eur")
    # CurrencyResolution(code="EUR", fallback_used=False, requested="eur")
"""
from dataclasses import dataclass
from typing import Dict, Optional

from storefront.config import FALLBACK_CURRENCY_CODE
from storefront.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)


# Active ISO 4217 alphabetic codes
KNOWN_CURRENCY_CODES = frozenset({
    "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN",
    "BAM", "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BRL",
    "BSD", "BTN", "BWP", "BYN", "BZD", "CAD", "CDF", "CHF", "CLP", "CNY",
    "COP", "CRC", "CUP", "CVE", "CZK", "DJF", "DKK", "DOP", "DZD", "EGP",
    "ERN", "ETB", "EUR", "FJD", "FKP", "GBP", "GEL", "GHS", "GIP", "GMD",
    "GNF", "GTQ", "GYD", "HKD", "HNL", "HTG", "HUF", "IDR", "ILS", "INR",
    "IQD", "IRR", "ISK", "JMD", "JOD", "JPY", "KES", "KGS", "KHR", "KMF",
    "KPW", "KRW", "KWD", "KYD", "KZT", "LAK", "LBP", "LKR", "LRD", "LSL",
    "LYD", "MAD", "MDL", "MGA", "MKD", "MMK", "MNT", "MOP", "MRU", "MUR",
    "MVR", "MWK", "MXN", "MYR", "MZN", "NAD", "NGN", "NIO", "NOK", "NPR",
    "NZD", "OMR", "PAB", "PEN", "PGK", "PHP", "PKR", "PLN", "PYG", "QAR",
    "RON", "RSD", "RUB", "RWF", "SAR", "SBD", "SCR", "SDG", "SEK", "SGD",
    "SHP", "SLE", "SOS", "SRD", "SSP", "STN", "SVC", "SYP", "SZL", "THB",
    "TJS", "TMT", "TND", "TOP", "TRY", "TTD", "TWD", "TZS", "UAH", "UGX",
    "USD", "UYU", "UZS", "VES", "VND", "VUV", "WST", "XAF", "XCD", "XOF",
    "XPF", "YER", "ZAR", "ZMW", "ZWL",
})

# Currency symbols mapping
CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "RUB": "₽",
    "UAH": "₴",
    "TRY": "₺",
    "INR": "₹",
    "AED": "د.إ",
    "CNY": "¥",
    "JPY": "¥",
    "KRW": "₩",
    "BRL": "R$",
}

# Currencies that should be displayed as integers (no decimals)
INTEGER_CURRENCIES = {"JPY", "KRW", "CLP", "ISK", "VND", "UGX", "XAF", "XOF"}


@dataclass(frozen=True)
class CurrencyResolution:
    """Outcome of resolving a raw currency code."""
    code: str
    fallback_used: bool
    requested: Optional[str] = None


def resolve_currency_code(currency_code: Optional[str]) -> CurrencyResolution:
    """
    Resolve a raw currency code against the ISO 4217 registry.

    Matching ignores case and surrounding whitespace. Unknown, empty or
    None codes resolve to USD with fallback_used=True; nothing is raised.

    Args:
        currency_code: Raw code, e.g. "EUR", "eur", "XYZ"

    Returns:
        CurrencyResolution with the code to use
    """
    normalized = (currency_code or "").strip().upper()

    if normalized in KNOWN_CURRENCY_CODES:
        return CurrencyResolution(code=normalized, fallback_used=False, requested=currency_code)

    logger.warning(
        f"Unknown currency code '{sanitize_string_for_logging(currency_code, max_length=16)}', "
        f"falling back to {FALLBACK_CURRENCY_CODE}"
    )
    return CurrencyResolution(code=FALLBACK_CURRENCY_CODE, fallback_used=True, requested=currency_code)


@dataclass(frozen=True)
class Currency:
    """Working currency of a cart."""
    code: str

    @classmethod
    def from_code(cls, currency_code: Optional[str]) -> "Currency":
        """Build a Currency, falling back to USD for unknown codes."""
        return cls(resolve_currency_code(currency_code).code)

    @property
    def symbol(self) -> str:
        return CURRENCY_SYMBOLS.get(self.code, self.code)

    @property
    def is_integer(self) -> bool:
        """Whether amounts are displayed without decimals."""
        return self.code in INTEGER_CURRENCIES

    def __str__(self) -> str:
        return self.code
