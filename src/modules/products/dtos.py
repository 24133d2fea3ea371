"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
They are the contract between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

``ProductDTO`` is used for creation, bulk creation and update.  Numeric
fields default to zero when the client omits them, so an update that leaves
out ``quantity`` or ``price`` writes zero.  ``id`` is optional: without it
the database assigns one, with it the record is upserted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter

if TYPE_CHECKING:
    from modules.products.models import Product


class ProductDTO(BaseModel):
    """Immutable DTO for product create/update requests."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[int] = None
    name: Optional[str] = None
    quantity: int = 0
    price: float = 0.0

    def to_entity(self) -> Product:
        """Build an unsaved ``Product`` carrying this DTO's fields."""
        from modules.products.models import Product

        return Product(
            id=self.id,
            name=self.name,
            quantity=self.quantity,
            price=self.price,
        )


_product_list_adapter = TypeAdapter(List[ProductDTO])


def parse_product_list(data: Any) -> List[ProductDTO]:
    """Validate a JSON array of products.

    Raises:
        pydantic.ValidationError: if ``data`` is not a list of products.
    """
    return _product_list_adapter.validate_python(data)
