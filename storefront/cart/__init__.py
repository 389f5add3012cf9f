"""Cart package: aggregate, child models and display summary."""
from .models import (
    Address,
    AddressType,
    Coupon,
    Discount,
    LineItem,
    Payment,
    Shipment,
    TaxDetail,
)
from .shopping_cart import ShoppingCart, TOTAL_FIELDS
from .summary import CartItemSummary, CartSummary, build_cart_summary

__all__ = [
    "Address",
    "AddressType",
    "Coupon",
    "Discount",
    "LineItem",
    "Payment",
    "Shipment",
    "TaxDetail",
    "ShoppingCart",
    "TOTAL_FIELDS",
    "CartItemSummary",
    "CartSummary",
    "build_cart_summary",
]
