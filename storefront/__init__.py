"""Storefront shopping cart model."""
