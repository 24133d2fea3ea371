"""Product repository interface.

Extends ``IRepository[Product]`` with the name look-up used by
``ProductService.get_by_name``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by exact name.

        When several products share the name, the one with the lowest
        ``id`` is returned.
        """
