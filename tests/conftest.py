"""Pytest configuration and fixtures"""
import os
import pytest

# Set test environment variables before storefront modules are imported
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("STOREFRONT_ENV", "test")

from storefront.cart import Address, AddressType, LineItem, ShoppingCart
from storefront.services.money import Money


@pytest.fixture
def cart():
    """Empty EUR cart"""
    return ShoppingCart(
        store_id="electronics",
        customer_id="cust-123",
        customer_name="Test Customer",
        name="default",
        currency_code="EUR",
    )


@pytest.fixture
def physical_item():
    """Line item that ships"""
    return LineItem(
        product_id="prod-phone",
        name="Smartphone",
        quantity=2,
        product_type="Physical",
        sale_price=Money("499.99", "EUR"),
    )


@pytest.fixture
def digital_item():
    """Line item delivered online"""
    return LineItem(
        product_id="prod-ebook",
        name="E-book",
        quantity=3,
        product_type="Digital",
        sale_price=Money("9.99", "EUR"),
    )


@pytest.fixture
def shipping_address():
    """Shipping-tagged address"""
    return Address(
        type=AddressType.SHIPPING,
        first_name="Test",
        last_name="Customer",
        line1="1 Main St",
        city="Berlin",
        postal_code="10115",
        country_code="DEU",
    )


@pytest.fixture
def billing_address():
    """Billing-tagged address"""
    return Address(
        type=AddressType.BILLING,
        first_name="Test",
        last_name="Customer",
        line1="5 Office Rd",
        city="Munich",
        postal_code="80331",
        country_code="DEU",
    )
