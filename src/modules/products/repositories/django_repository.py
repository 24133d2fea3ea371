"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups return ``None`` instead of raising: the Service Layer decides
how to translate a missing entity into a domain error, and logs the
outcome of each command.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def find_by_id(self, id: Optional[int]) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` if absent."""
        if id is None:
            return None
        return Product.objects.filter(id=id).first()

    def find_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name=name).order_by("id").first()

    def find_all(self) -> List[Product]:
        return list(Product.objects.order_by("id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or upsert) a product.

        A product carrying an ``id`` that is not stored yet is inserted
        with that ``id``.
        """
        entity.save()
        return entity

    @transaction.atomic
    def save_all(self, entities: Sequence[Product]) -> List[Product]:
        """Persist every product in one transaction, keeping input order."""
        return [self.save(entity) for entity in entities]

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        Product.objects.filter(id=id).delete()
