"""Product DRF serializer.

Request bodies are parsed into ``ProductDTO`` (see ``dtos.py``); this
serializer renders ``Product`` instances and describes the body shape
in the OpenAPI schema.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "quantity", "price"]
        read_only_fields = ["id"]
