"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Money pairs
an amount with an ISO 4217 currency code.
"""
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

from storefront.errors import ERROR_CURRENCY_MISMATCH

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

# Precision for integer currencies (JPY, KRW, etc.)
INTEGER_PRECISION = Decimal("1")

Numeric = Union[str, int, float, Decimal]


def to_decimal(value: Union[Numeric, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Numeric, to_int: bool = False) -> Decimal:
    """
    Round monetary value to appropriate precision.

    Args:
        value: Value to round
        to_int: If True, round to integer (for JPY, KRW, etc.)

    Returns:
        Rounded Decimal value
    """
    decimal_value = to_decimal(value)
    precision = INTEGER_PRECISION if to_int else MONEY_PRECISION
    return decimal_value.quantize(precision, rounding=ROUND_HALF_UP)


def format_money(value: Numeric, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, JPY, etc.)

    Returns:
        Formatted string with currency symbol
    """
    decimal_value = to_decimal(value)

    from storefront.services.currency import CURRENCY_SYMBOLS, INTEGER_CURRENCIES

    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    if currency in INTEGER_CURRENCIES:
        formatted = f"{int(round_money(decimal_value, to_int=True)):,}"
    else:
        formatted = f"{round_money(decimal_value):,.2f}"

    # Symbol placement
    if currency in ("USD", "EUR", "GBP"):
        return f"{symbol}{formatted}"
    return f"{formatted} {symbol}"


def add(a: Numeric, b: Numeric) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def subtract(a: Numeric, b: Numeric) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def multiply(value: Numeric, factor: Numeric) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


class CurrencyMismatchError(ValueError):
    """Raised when combining Money values of different currencies."""

    def __init__(self, left: str, right: str):
        super().__init__(f"{ERROR_CURRENCY_MISMATCH}: {left} != {right}")
        self.left = left
        self.right = right


@dataclass(frozen=True)
class Money:
    """
    Amount of money in a single currency.

    The amount goes through to_decimal, so anything it cannot parse
    (None, "12,50", "abc") becomes 0 instead of raising. Parse
    locale-formatted input before building Money.
    """
    amount: Decimal
    currency_code: str = field(default="USD")

    def __post_init__(self):
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "currency_code", self.currency_code.upper())

    @classmethod
    def zero(cls, currency_code: str) -> "Money":
        """Zero amount in the given currency."""
        return cls(Decimal("0"), currency_code)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def formatted(self) -> str:
        """Amount with currency symbol, e.g. "$10.50" or "1,200 ¥"."""
        return format_money(self.amount, self.currency_code)

    def in_currency(self, currency_code: str) -> "Money":
        """
        Same amount denominated in another currency.

        No exchange rate is applied; use when the owning cart switches
        currency before totals are recalculated.
        """
        return Money(self.amount, currency_code)

    def _check_currency(self, other: "Money") -> None:
        if other.currency_code != self.currency_code:
            raise CurrencyMismatchError(self.currency_code, other.currency_code)

    def add(self, other: "Money") -> "Money":
        """
        Sum of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If currency codes differ
        """
        self._check_currency(other)
        return Money(add(self.amount, other.amount), self.currency_code)

    def subtract(self, other: "Money") -> "Money":
        """
        Difference of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If currency codes differ
        """
        self._check_currency(other)
        return Money(subtract(self.amount, other.amount), self.currency_code)

    def multiply(self, factor: Numeric) -> "Money":
        """Amount scaled by a factor (e.g. quantity), same currency."""
        return Money(multiply(self.amount, factor), self.currency_code)

    def __str__(self) -> str:
        return self.formatted
