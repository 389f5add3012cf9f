"""
Tests for the cart summary view
"""

from storefront.cart import Coupon, LineItem, ShoppingCart, build_cart_summary
from storefront.errors import ERROR_PRODUCT_OUT_OF_STOCK
from storefront.services.money import Money


class TestCartSummary:
    """Tests for build_cart_summary."""

    def test_empty_cart(self, cart):
        """Test summary of an empty cart."""
        summary = build_cart_summary(cart)

        assert summary.is_empty is True
        assert summary.items_count == 0
        assert summary.currency == "EUR"
        assert summary.has_physical_products is False
        assert summary.requires_shipping_address is False
        assert summary.totals["total"] == "€0.00"
        assert set(summary.totals) == {
            "total",
            "sub_total",
            "shipping_total",
            "handling_total",
            "discount_total",
            "tax_total",
        }

    def test_cart_with_items(self, cart, physical_item, digital_item):
        """Test item lines and derived flags."""
        cart.items.extend([physical_item, digital_item])
        cart.total = Money("1029.95", "EUR")
        cart.coupon = Coupon(code="WELCOME")

        summary = build_cart_summary(cart)

        assert summary.is_empty is False
        assert summary.items_count == 5
        assert summary.has_physical_products is True
        assert summary.requires_shipping_address is True
        assert len(summary.items) == 2
        assert summary.items[0].sale_price == "€499.99"
        assert summary.totals["total"] == "€1,029.95"
        assert summary.coupon_code == "WELCOME"

    def test_shipping_address_present(self, cart, physical_item, shipping_address):
        """Test stored address clears the shipping requirement."""
        cart.items.append(physical_item)
        cart.addresses.append(shipping_address)

        assert build_cart_summary(cart).requires_shipping_address is False

    def test_errors_copied(self, cart):
        """Test errors are snapshotted, not shared."""
        cart.add_error(ERROR_PRODUCT_OUT_OF_STOCK)
        summary = build_cart_summary(cart)
        cart.add_error("later")

        assert summary.errors == [ERROR_PRODUCT_OUT_OF_STOCK]

    def test_summary_does_not_touch_addresses(self, cart, physical_item):
        """Test building a summary stores no placeholder address."""
        cart.items.append(physical_item)
        build_cart_summary(cart)
        assert cart.addresses == []

    def test_cart_without_name(self):
        """Test a cart built with a None name still summarizes."""
        cart = ShoppingCart("store-1", "cust-1", "Jane Doe", None, "USD")

        summary = build_cart_summary(cart)

        assert summary.name is None
        assert summary.currency == "USD"

    def test_line_item_without_product_id(self, cart):
        """Test a line item with no product id is summarized as-is."""
        cart.items.append(LineItem(product_id=None, quantity=1))

        summary = build_cart_summary(cart)

        assert summary.items[0].product_id is None
        assert summary.items_count == 1

    def test_negative_quantity_passed_through(self, cart):
        """Test quantities are reported without validation."""
        cart.items.append(LineItem(product_id="prod-return", quantity=-1, product_type="Digital"))

        summary = build_cart_summary(cart)

        assert summary.items[0].quantity == -1
        assert summary.items_count == -1
