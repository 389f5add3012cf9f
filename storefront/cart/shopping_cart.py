"""
Shopping Cart - checkout session aggregate

Holds line items, addresses, payments, shipments, discounts and tax detail
for one checkout session. Pricing, tax, persistence and validation live in
collaborators that read and write these fields; the cart only keeps its
totals denominated in its currency and answers a few derived queries.

Usage:
    cart = ShoppingCart("store-1", "cust-1", "Jane Doe", "default", "EUR")
    cart.items.append(LineItem(product_id="p-1", quantity=2))

    cart.items_count             # 2
    cart.default_shipping_address
"""
from decimal import Decimal
from typing import List, Optional

from storefront.common import Entity
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.services.currency import Currency, CurrencyResolution, resolve_currency_code
from storefront.services.money import Money

from .models import Address, AddressType, Coupon, Discount, LineItem, Payment, Shipment, TaxDetail

logger = get_logger(__name__)

# Monetary totals, all kept in the cart currency
TOTAL_FIELDS = (
    "total",
    "sub_total",
    "shipping_total",
    "handling_total",
    "discount_total",
    "tax_total",
)


class ShoppingCart(Entity):
    """
    Customer cart for one checkout session.

    Not thread-safe: the session that owns the cart serializes access.
    """

    total: Money
    sub_total: Money
    shipping_total: Money
    handling_total: Money
    discount_total: Money
    tax_total: Money

    def __init__(
        self,
        store_id: str,
        customer_id: str,
        customer_name: str,
        name: str,
        currency_code: Optional[str],
        id: Optional[str] = None,
    ):
        super().__init__(id=id)

        self.currency_resolution: CurrencyResolution = resolve_currency_code(currency_code)
        self.currency = Currency(self.currency_resolution.code)

        self.store_id = store_id
        self.customer_id = customer_id
        self.customer_name = customer_name
        self.name = name

        self.channel_id: Optional[str] = None
        self.organization_id: Optional[str] = None
        self.language_code: Optional[str] = None
        self.comment: Optional[str] = None
        self.coupon: Optional[Coupon] = None

        self.is_anonymous = False
        self.tax_included = False
        self.is_recurring = False

        # Physical attributes, filled in by shipping collaborators
        self.volumetric_weight = Decimal("0")
        self.weight = Decimal("0")
        self.weight_unit: Optional[str] = None
        self.measure_unit: Optional[str] = None
        self.height = Decimal("0")
        self.length = Decimal("0")
        self.width = Decimal("0")

        self.addresses: List[Address] = []
        self.items: List[LineItem] = []
        self.payments: List[Payment] = []
        self.shipments: List[Shipment] = []
        self.discounts: List[Discount] = []
        self.tax_details: List[TaxDetail] = []
        self.errors: List[str] = []

        self._reset_totals(self.currency.code)

        logger.debug(
            f"Cart created for customer {sanitize_id_for_logging(customer_id)} "
            f"in {self.currency.code}"
        )

    def _reset_totals(self, currency_code: str) -> None:
        for total_field in TOTAL_FIELDS:
            setattr(self, total_field, Money.zero(currency_code))

    # ------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------

    def change_currency(self, currency_code: Optional[str]) -> CurrencyResolution:
        """
        Switch the cart currency and re-denominate every total with it.

        Amounts are carried over unchanged; pricing collaborators are
        expected to recalculate afterwards.

        Args:
            currency_code: Raw ISO 4217 code (unknown codes fall back to USD)

        Returns:
            Resolution describing which code was applied
        """
        resolution = resolve_currency_code(currency_code)
        new_code = resolution.code

        updated = {
            total_field: getattr(self, total_field).in_currency(new_code)
            for total_field in TOTAL_FIELDS
        }
        for total_field, value in updated.items():
            setattr(self, total_field, value)

        self.currency = Currency(new_code)
        self.currency_resolution = resolution
        return resolution

    def currency_mismatches(self) -> List[str]:
        """
        Names of totals not denominated in the cart currency.

        Totals are written directly by pricing collaborators, so this only
        reports drift; it never corrects it.
        """
        return [
            total_field
            for total_field in TOTAL_FIELDS
            if getattr(self, total_field).currency_code != self.currency.code
        ]

    # ------------------------------------------------------------
    # Derived attributes
    # ------------------------------------------------------------

    @property
    def has_physical_products(self) -> bool:
        """Whether any line item requires shipping."""
        return any(item.is_physical for item in self.items)

    @property
    def items_count(self) -> int:
        """Total quantity over all line items."""
        return sum(item.quantity for item in self.items)

    def _find_address(self, address_type: AddressType) -> Optional[Address]:
        """First address of the given role, else the first address at all."""
        for address in self.addresses:
            if address.type == address_type:
                return address
        return self.addresses[0] if self.addresses else None

    def find_shipping_address(self) -> Optional[Address]:
        """Stored address to ship to, or None. Never builds a placeholder."""
        if not self.has_physical_products:
            return None
        return self._find_address(AddressType.SHIPPING)

    def find_billing_address(self) -> Optional[Address]:
        """Stored address to bill, or None. Never builds a placeholder."""
        return self._find_address(AddressType.BILLING)

    @property
    def default_shipping_address(self) -> Optional[Address]:
        """
        Address to ship to.

        None when nothing in the cart ships. Otherwise the first Shipping
        address, then any address, then a blank Shipping address that is
        not added to `addresses`.
        """
        if not self.has_physical_products:
            return None
        return self.find_shipping_address() or Address.blank(AddressType.SHIPPING)

    @property
    def default_billing_address(self) -> Address:
        """
        Address to bill.

        The first Billing address, then any address, then a blank Billing
        address that is not added to `addresses`.
        """
        return self.find_billing_address() or Address.blank(AddressType.BILLING)

    # ------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------

    def add_error(self, message: str) -> None:
        """Record a message for the storefront to show."""
        self.errors.append(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def __repr__(self) -> str:
        return (
            f"ShoppingCart(id={self.id!r}, name={self.name!r}, "
            f"currency={self.currency.code!r}, items={len(self.items)})"
        )
