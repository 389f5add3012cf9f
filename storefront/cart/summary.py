"""
Cart summary - read-only snapshot of a cart for the storefront layer.

Built fresh from a ShoppingCart; nothing here writes back to the cart.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .shopping_cart import ShoppingCart, TOTAL_FIELDS


class CartItemSummary(BaseModel):
    """Line item as shown in the cart widget."""
    product_id: Optional[str] = None
    name: Optional[str] = None
    quantity: int
    product_type: Optional[str] = None
    sale_price: Optional[str] = Field(default=None, description="Formatted sale price")


class CartSummary(BaseModel):
    """Cart snapshot rendered by the storefront."""
    cart_id: Optional[str] = None
    name: Optional[str] = None
    currency: str = Field(description="ISO 4217 code")
    is_empty: bool
    items_count: int
    has_physical_products: bool
    requires_shipping_address: bool = Field(
        description="Nothing in the cart stores an address to ship to yet"
    )
    items: List[CartItemSummary] = []
    totals: Dict[str, str] = Field(default_factory=dict, description="Formatted totals by name")
    coupon_code: Optional[str] = None
    errors: List[str] = []


def build_cart_summary(cart: ShoppingCart) -> CartSummary:
    """
    Build a summary of the cart for display.

    Args:
        cart: Cart to summarize

    Returns:
        CartSummary with formatted totals
    """
    items = [
        CartItemSummary(
            product_id=item.product_id,
            name=item.name,
            quantity=item.quantity,
            product_type=item.product_type,
            sale_price=item.sale_price.formatted if item.sale_price else None,
        )
        for item in cart.items
    ]

    return CartSummary(
        cart_id=cart.id,
        name=cart.name,
        currency=cart.currency.code,
        is_empty=not cart.items,
        items_count=cart.items_count,
        has_physical_products=cart.has_physical_products,
        requires_shipping_address=cart.has_physical_products and cart.find_shipping_address() is None,
        items=items,
        totals={total_field: getattr(cart, total_field).formatted for total_field in TOTAL_FIELDS},
        coupon_code=cart.coupon.code if cart.coupon else None,
        errors=list(cart.errors),
    )
