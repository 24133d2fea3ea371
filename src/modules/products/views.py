"""Product API views.

Exposes ``ProductService`` over HTTP.  The view only parses request
bodies into DTOs and renders results; domain exceptions propagate to
``modules.core.exception_handler``, which turns them into the standard
error body.

The service is injected through ``as_view(..., service=...)``; when none
is given a service over ``ProductDjangoRepository`` is built.
"""

from __future__ import annotations

from typing import Optional

from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import ProductDTO, parse_product_list
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

CSV_FILENAME = "products.csv"


@extend_schema(tags=["products"])
class ProductViewSet(ViewSet):
    """Route handlers for the product catalog."""

    service: Optional[ProductService] = None

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        if self.service is None:
            self.service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def add_product(self, request: Request) -> Response:
        """POST /addProduct"""
        dto = ProductDTO.model_validate(request.data)
        product = self.service.save(dto)
        return Response(ProductSerializer(product).data)

    @extend_schema(
        request=ProductSerializer(many=True), responses=ProductSerializer(many=True)
    )
    def add_products(self, request: Request) -> Response:
        """POST /addProducts"""
        dtos = parse_product_list(request.data)
        products = self.service.save_all(dtos)
        return Response(ProductSerializer(products, many=True).data)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductSerializer(many=True))
    def find_all(self, request: Request) -> Response:
        """GET /products"""
        products = self.service.list_all()
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(responses={200: ProductSerializer, 404: OpenApiResponse()})
    def find_by_id(self, request: Request, id: int) -> Response:
        """GET /productById/{id}"""
        product = self.service.get_by_id(id)
        return Response(ProductSerializer(product).data)

    @extend_schema(responses={200: ProductSerializer, 404: OpenApiResponse()})
    def find_by_name(self, request: Request, name: str) -> Response:
        """GET /product/{name}"""
        product = self.service.get_by_name(name)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Update / Delete
    # ------------------------------------------------------------------

    @extend_schema(
        request=ProductSerializer,
        responses={200: ProductSerializer, 404: OpenApiResponse()},
    )
    def update_product(self, request: Request) -> Response:
        """PUT /update"""
        dto = ProductDTO.model_validate(request.data)
        product = self.service.update(dto)
        return Response(ProductSerializer(product).data)

    @extend_schema(
        responses={(200, "text/plain"): OpenApiTypes.STR, 404: OpenApiResponse()}
    )
    def delete_product(self, request: Request, id: int) -> HttpResponse:
        """DELETE /delete/{id}"""
        message = self.service.delete_by_id(id)
        return HttpResponse(message, content_type="text/plain; charset=utf-8")

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    @extend_schema(responses={(200, "text/csv"): OpenApiTypes.STR})
    def download_csv(self, request: Request) -> HttpResponse:
        """GET /products/csv"""
        content = self.service.generate_csv()
        response = HttpResponse(content.encode("utf-8"), content_type="text/csv")
        response["Content-Disposition"] = f"attachment; filename={CSV_FILENAME}"
        return response
