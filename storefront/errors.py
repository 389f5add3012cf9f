"""
Common Error Constants

Messages that pricing, validation and checkout collaborators append to
ShoppingCart.errors, kept in one place to avoid string duplication.
"""

# Cart errors
ERROR_SHIPPING_ADDRESS_REQUIRED = "Shipping address is required"

# Product errors
ERROR_PRODUCT_OUT_OF_STOCK = "Product out of stock"

# Money errors
ERROR_CURRENCY_MISMATCH = "Currency mismatch"
