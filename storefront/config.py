"""
Storefront settings.

Values are read from the environment once, at import time.
"""

import os

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# "production" switches logs to the compact format
STOREFRONT_ENV = os.environ.get("STOREFRONT_ENV", "development").lower()
IS_PRODUCTION = STOREFRONT_ENV == "production"

# Currency used when a cart is created with an unknown code
FALLBACK_CURRENCY_CODE = "USD"
