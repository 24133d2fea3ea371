"""Product URL configuration.

Each route maps one HTTP method to one ``ProductViewSet`` handler.
"""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

urlpatterns = [
    path(
        "addProduct",
        ProductViewSet.as_view({"post": "add_product"}),
        name="product-add",
    ),
    path(
        "addProducts",
        ProductViewSet.as_view({"post": "add_products"}),
        name="product-add-many",
    ),
    path(
        "products",
        ProductViewSet.as_view({"get": "find_all"}),
        name="product-list",
    ),
    path(
        "products/csv",
        ProductViewSet.as_view({"get": "download_csv"}),
        name="product-csv",
    ),
    path(
        "productById/<int:id>",
        ProductViewSet.as_view({"get": "find_by_id"}),
        name="product-by-id",
    ),
    path(
        "product/<str:name>",
        ProductViewSet.as_view({"get": "find_by_name"}),
        name="product-by-name",
    ),
    path(
        "update",
        ProductViewSet.as_view({"put": "update_product"}),
        name="product-update",
    ),
    path(
        "delete/<int:id>",
        ProductViewSet.as_view({"delete": "delete_product"}),
        name="product-delete",
    ),
]
