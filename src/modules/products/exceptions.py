"""Product domain exceptions.

Raised by the Service Layer when a lookup key has no matching record.
The DRF exception handler translates them into 404 responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class ProductNotFound(NotFound):
    """No product matches the requested id or name."""

    @classmethod
    def with_id(cls, id: object) -> ProductNotFound:
        return cls(f"Product not found with id: {id}")

    @classmethod
    def with_name(cls, name: str) -> ProductNotFound:
        return cls(f"Product not found with name: {name}")
