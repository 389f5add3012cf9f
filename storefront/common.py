"""Shared base types for storefront entities."""
from typing import Optional


class Entity:
    """Base for objects identified by an opaque id assigned by persistence."""

    def __init__(self, id: Optional[str] = None):
        self.id = id

    @property
    def is_transient(self) -> bool:
        """True until persistence assigns an id."""
        return self.id is None
