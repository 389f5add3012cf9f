"""Cart child models: addresses, line items, payments, shipments, discounts."""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional

from storefront.services.money import Money, to_decimal


class AddressType(str, Enum):
    """Role of an address within a cart."""
    SHIPPING = "Shipping"
    BILLING = "Billing"
    BILLING_AND_SHIPPING = "BillingAndShipping"
    PICKUP = "Pickup"


@dataclass
class Address:
    """Postal address tagged with its role in the cart."""
    type: AddressType = AddressType.SHIPPING
    key: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    organization: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    region_name: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None  # ISO 3166-1 alpha-3
    country_name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def blank(cls, address_type: AddressType) -> "Address":
        """Empty address of the given role, for the caller to fill in."""
        return cls(type=address_type)


@dataclass
class LineItem:
    """Single product line in the cart."""
    product_id: str
    quantity: int
    product_type: Optional[str] = "Physical"
    name: Optional[str] = None
    sku: Optional[str] = None
    list_price: Optional[Money] = None
    sale_price: Optional[Money] = None

    @property
    def is_physical(self) -> bool:
        """Whether the product ships (product type "Physical", any case)."""
        if not self.product_type:
            return False
        return self.product_type.casefold() == "physical"


@dataclass
class Coupon:
    """Coupon code entered by the customer."""
    code: str
    description: Optional[str] = None
    applied_successfully: bool = False
    error_code: Optional[str] = None


@dataclass
class Discount:
    """Promotion reward applied to the cart."""
    amount: Money
    promotion_id: Optional[str] = None
    description: Optional[str] = None
    coupon: Optional[str] = None


@dataclass
class TaxDetail:
    """Tax line produced by the tax provider."""
    amount: Money
    name: Optional[str] = None
    rate: Decimal = field(default_factory=lambda: Decimal("0"))

    def __post_init__(self):
        self.rate = to_decimal(self.rate)


@dataclass
class Payment:
    """Payment selected for the cart."""
    amount: Money
    payment_gateway_code: Optional[str] = None
    billing_address: Optional[Address] = None


@dataclass
class Shipment:
    """Shipping method chosen for the cart."""
    shipping_price: Money
    shipment_method_code: Optional[str] = None
    shipment_method_option: Optional[str] = None
    delivery_address: Optional[Address] = None
