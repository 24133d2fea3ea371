"""Integration tests for the product catalog endpoints.

Covers:
- Create (single and bulk), list, get by id, get by name.
- Update merge semantics and 404 on unknown id.
- Delete confirmation and 404 on unknown id.
- CSV export headers and content.
"""

from __future__ import annotations

import logging

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


@pytest.fixture()
def tv(make_product):
    return make_product(name="TV", quantity=10, price=1000.0)


# ===========================================================================
# CREATE
# ===========================================================================


class TestAddProduct:
    def test_create_success(self, api_client):
        payload = {"name": "TV", "quantity": 10, "price": 1000.0}
        response = api_client.post("/addProduct", payload, format="json")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "TV"
        assert data["quantity"] == 10
        assert data["price"] == 1000.0
        assert Product.objects.filter(id=data["id"]).exists()

    def test_create_without_fields_uses_defaults(self, api_client):
        response = api_client.post("/addProduct", {}, format="json")
        assert response.status_code == 200
        assert response.json()["name"] is None
        assert response.json()["quantity"] == 0

    def test_malformed_json_returns_400(self, api_client):
        response = api_client.post(
            "/addProduct", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        assert response.json()["status"] == 400


class TestAddProducts:
    def test_bulk_create_keeps_order(self, api_client):
        payload = [
            {"name": "TV", "quantity": 10, "price": 1000.0},
            {"name": "Laptop", "quantity": 5, "price": 2000.0},
        ]
        response = api_client.post("/addProducts", payload, format="json")
        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data] == ["TV", "Laptop"]
        assert Product.objects.count() == 2

    def test_object_instead_of_list_returns_400(self, api_client):
        response = api_client.post("/addProducts", {"name": "TV"}, format="json")
        assert response.status_code == 400
        assert Product.objects.count() == 0


# ===========================================================================
# READ
# ===========================================================================


class TestListProducts:
    def test_list_empty(self, api_client):
        response = api_client.get("/products")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_products_in_id_order(self, api_client, make_product):
        first = make_product(name="TV")
        second = make_product(name="Laptop")
        response = api_client.get("/products")
        assert [p["id"] for p in response.json()] == [first.id, second.id]


class TestGetById:
    def test_success(self, api_client, tv):
        response = api_client.get(f"/productById/{tv.id}")
        assert response.status_code == 200
        assert response.json() == {
            "id": tv.id,
            "name": "TV",
            "quantity": 10,
            "price": 1000.0,
        }

    def test_not_found(self, api_client):
        response = api_client.get("/productById/99")
        assert response.status_code == 404
        data = response.json()
        assert data["status"] == 404
        assert data["error"] == "Not Found"
        assert data["message"] == "Product not found with id: 99"
        assert data["path"] == "/productById/99"
        assert data["timestamp"]


class TestGetByName:
    def test_success(self, api_client, tv):
        response = api_client.get("/product/TV")
        assert response.status_code == 200
        assert response.json()["id"] == tv.id

    def test_name_with_space(self, api_client, make_product):
        product = make_product(name="Smart TV")
        response = api_client.get("/product/Smart%20TV")
        assert response.status_code == 200
        assert response.json()["id"] == product.id

    def test_not_found(self, api_client):
        response = api_client.get("/product/Unknown")
        assert response.status_code == 404
        assert response.json()["message"] == "Product not found with name: Unknown"
        assert response.json()["path"] == "/product/Unknown"


# ===========================================================================
# UPDATE
# ===========================================================================


class TestUpdate:
    def test_update_all_fields(self, api_client, tv):
        payload = {"id": tv.id, "name": "Updated TV", "quantity": 20, "price": 1500.0}
        response = api_client.put("/update", payload, format="json")
        assert response.status_code == 200
        tv.refresh_from_db()
        assert tv.name == "Updated TV"
        assert tv.quantity == 20
        assert tv.price == 1500.0

    def test_update_without_name_keeps_name(self, api_client, tv):
        payload = {"id": tv.id, "quantity": 1, "price": 1.5}
        response = api_client.put("/update", payload, format="json")
        assert response.status_code == 200
        assert response.json() == {"id": tv.id, "name": "TV", "quantity": 1, "price": 1.5}

    def test_update_not_found(self, api_client):
        payload = {"id": 99, "name": "Ghost", "quantity": 1, "price": 1.0}
        response = api_client.put("/update", payload, format="json")
        assert response.status_code == 404
        assert response.json()["message"] == "Product not found with id: 99"
        assert Product.objects.count() == 0

    def test_update_without_id_is_not_found(self, api_client):
        response = api_client.put("/update", {"name": "Ghost"}, format="json")
        assert response.status_code == 404


# ===========================================================================
# DELETE
# ===========================================================================


class TestDelete:
    def test_delete_success(self, api_client, tv):
        response = api_client.delete(f"/delete/{tv.id}")
        assert response.status_code == 200
        assert response.content.decode() == f"product removed !! {tv.id}"
        assert response["Content-Type"].startswith("text/plain")

    def test_deleted_product_is_gone(self, api_client, tv):
        api_client.delete(f"/delete/{tv.id}")
        response = api_client.get(f"/productById/{tv.id}")
        assert response.status_code == 404

    def test_delete_not_found(self, api_client):
        response = api_client.delete("/delete/99")
        assert response.status_code == 404
        data = response.json()
        assert data["message"] == "Product not found with id: 99"
        assert data["path"] == "/delete/99"


# ===========================================================================
# CSV
# ===========================================================================


class TestCsvExport:
    def test_download(self, api_client, make_product):
        first = make_product(name="TV", quantity=10, price=1000.0)
        second = make_product(name="Laptop", quantity=5, price=2000.0)

        response = api_client.get("/products/csv")

        assert response.status_code == 200
        assert response["Content-Type"] == "text/csv"
        assert response["Content-Disposition"] == "attachment; filename=products.csv"
        assert response.content.decode("utf-8").splitlines() == [
            "id,name,quantity,price",
            f"{first.id},TV,10,1000.00",
            f"{second.id},Laptop,5,2000.00",
        ]

    def test_unicode_and_quoting(self, api_client, make_product):
        product = make_product(name="Télé, 4K", quantity=1, price=10.0)

        response = api_client.get("/products/csv")

        lines = response.content.decode("utf-8").splitlines()
        assert lines[1] == f'{product.id},"Télé, 4K",1,10.00'


# ===========================================================================
# LOGGING
# ===========================================================================


def _product_events(records):
    return [
        r.msg["event"]
        for r in records
        if isinstance(r.msg, dict) and str(r.msg.get("event", "")).startswith("product")
    ]


class TestProductLogging:
    def test_create_logs_single_event(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post("/addProduct", {"name": "TV"}, format="json")
        assert _product_events(caplog.records) == ["product.saved"]

    def test_delete_logs_single_event(self, api_client, tv, caplog):
        with caplog.at_level(logging.INFO):
            api_client.delete(f"/delete/{tv.id}")
        assert _product_events(caplog.records) == ["product.deleted"]
