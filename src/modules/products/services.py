"""Product service layer (Use Cases).

Orchestrates business logic for the Product entity, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Look-ups by id or name raise ``ProductNotFound`` when nothing matches.
- Deletion and update check existence first; neither is a silent no-op.
- Update merges the incoming fields into the stored record
  (see ``merge_product``).
"""

from __future__ import annotations

import csv
import io
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, List, Sequence

import structlog

from modules.products.exceptions import ProductNotFound

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

CSV_HEADER = ("id", "name", "quantity", "price")
CENT = Decimal("0.01")


def format_price(price: float) -> str:
    """Format ``price`` with two decimals, rounding ties away from zero.

    Rounds the shortest decimal form of the float, so ``2.675`` gives
    ``2.68`` rather than the ``2.67`` of its binary value.
    """
    return str(Decimal(repr(price)).quantize(CENT, rounding=ROUND_HALF_UP))


def merge_product(existing: Product, incoming: ProductDTO) -> Product:
    """Copy the fields of ``incoming`` onto ``existing`` and return it.

    ``name`` is only replaced when the incoming one is non-empty.
    ``quantity`` and ``price`` are always replaced: a client that omits
    them sends zero, and zero cannot be told apart from "unset".
    """
    if incoming.name:
        existing.name = incoming.name
    existing.quantity = incoming.quantity
    existing.price = incoming.price
    return existing


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save(self, dto: ProductDTO) -> Product:
        """Persist a new product, or upsert one when ``dto.id`` is set."""
        product = self._repo.save(dto.to_entity())
        logger.info("product.saved", product_id=product.id)
        return product

    def save_all(self, dtos: Sequence[ProductDTO]) -> List[Product]:
        """Persist several products, returned in the order given."""
        products = self._repo.save_all([dto.to_entity() for dto in dtos])
        logger.info("product.bulk_saved", count=len(products))
        return list(products)

    def update(self, dto: ProductDTO) -> Product:
        """Merge ``dto`` into the stored product with the same id.

        Raises:
            ProductNotFound: if no product has ``dto.id``.
        """
        existing = self._repo.find_by_id(dto.id)
        if existing is None:
            logger.warning("product.not_found", product_id=dto.id)
            raise ProductNotFound.with_id(dto.id)

        product = self._repo.save(merge_product(existing, dto))
        logger.info("product.updated", product_id=product.id)
        return product

    def delete_by_id(self, id: int) -> str:
        """Delete a product and return a confirmation message.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if self._repo.find_by_id(id) is None:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound.with_id(id)

        self._repo.delete_by_id(id)
        logger.info("product.deleted", product_id=id)
        return f"product removed !! {id}"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self) -> List[Product]:
        """Return every product in repository (id) order."""
        return list(self._repo.find_all())

    def get_by_id(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.find_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound.with_id(id)
        return product

    def get_by_name(self, name: str) -> Product:
        """Retrieve a product by exact name.

        Raises:
            ProductNotFound: if no product has that name.
        """
        product = self._repo.find_by_name(name)
        if product is None:
            logger.warning("product.not_found", name=name)
            raise ProductNotFound.with_name(name)
        return product

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def generate_csv(self) -> str:
        """Render every product as CSV text.

        Rows are ``id,name,quantity,price`` with the price fixed to two
        decimals.  Names containing a comma, quote, CR or LF are quoted
        with inner quotes doubled; a missing name becomes an empty field.
        """
        products = self._repo.find_all()

        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
        writer.writerow(CSV_HEADER)
        for product in products:
            writer.writerow(
                [
                    product.id,
                    product.name if product.name is not None else "",
                    product.quantity,
                    format_price(product.price),
                ]
            )

        logger.info("product.csv_generated", rows=len(products))
        return buffer.getvalue()
