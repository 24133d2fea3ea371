"""Product model for the catalog.

- ``id`` is assigned by the database on creation and never changes.
- ``name`` is nullable: a record may exist without one.
- ``quantity`` and ``price`` default to zero.
"""

from __future__ import annotations

from django.db import models


class Product(models.Model):
    """Catalog entry identified solely by its integer ``id``."""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, null=True, blank=True, default=None)  # noqa: DJ01
    quantity = models.IntegerField(default=0)
    price = models.FloatField(default=0.0)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
        ]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name or '<unnamed>'}"
