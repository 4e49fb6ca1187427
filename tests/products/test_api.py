"""Tests for the product HTTP API."""

import pytest
from django.apps import apps
from rest_framework.test import APIClient

from products.infrastructure.factory import ProductInfrastructureFactory
from tests.fakes import UnavailableProductRepository

PRODUCTS_URL = "/api/v1/products"


def _create(client, **overrides):
    payload = {"name": "Widget", "sku": 7, "categories": ["Tools"], "price": 1500}
    payload.update(overrides)
    return client.post(PRODUCTS_URL, payload, format="json")


class TestCreateProduct:

    def test_created(self, api_client):
        response = _create(api_client)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["code"] == 10001
        assert body["data"] == {"name": "Widget", "sku": 7, "categories": ["Tools"], "price": 1500}

    @pytest.mark.parametrize("overrides, field, error", [
        ({"name": ""}, "name", "name_required"),
        ({"sku": 0}, "sku", "sku_required"),
        ({"categories": []}, "categories", "categories_required"),
        ({"categories": ["Tools", ""]}, "categories", "categories_required"),
        ({"price": -1}, "price", "price_required"),
    ])
    def test_domain_validation(self, api_client, overrides, field, error):
        response = _create(api_client, **overrides)
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == 40001
        assert body["data"] == {"field": field, "error": error}

    def test_malformed_payload(self, api_client):
        response = api_client.post(PRODUCTS_URL, {"name": "Widget"}, format="json")
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == 40001
        assert "sku" in body["data"]

    def test_duplicate(self, api_client):
        _create(api_client)
        response = _create(api_client, price=99)
        assert response.status_code == 409
        assert response.json()["code"] == 40902

    def test_storage_unavailable(self, monkeypatch):
        factory = ProductInfrastructureFactory({"REPOSITORY_BACKEND": "memory"})
        monkeypatch.setattr(factory, "create_product_repository", lambda: UnavailableProductRepository())
        monkeypatch.setattr(apps.get_app_config("products"), "factory", factory)

        response = _create(APIClient())
        assert response.status_code == 503
        assert response.json()["code"] == 50002


class TestReadProducts:

    def test_list(self, api_client):
        _create(api_client, name="A")
        _create(api_client, name="B")
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 200
        assert sorted(p["name"] for p in response.json()["data"]) == ["A", "B"]

    def test_list_empty(self, api_client):
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_detail(self, api_client):
        _create(api_client, name="Garden Hose")
        response = api_client.get(f"{PRODUCTS_URL}/Garden%20Hose")
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Garden Hose"

    def test_detail_not_found(self, api_client):
        response = api_client.get(f"{PRODUCTS_URL}/ghost")
        assert response.status_code == 404
        assert response.json()["code"] == 40403


class TestMetricsAndHealth:

    def test_metrics(self, api_client):
        _create(api_client, name="A", categories=["X", "Y"], price=100)
        _create(api_client, name="B", categories=["X"], price=200)
        response = api_client.get("/metrics")
        assert response.status_code == 200
        data = response.json()["data"]

        assert data["repository"] == {
            "total": 2,
            "total_value": 300,
            "average_price": 150.0,
            "by_category": {"X": 2, "Y": 1},
        }
        service = data["service"]
        assert service["products_created_total"] == 2
        assert service["http_requests_total"]["POST|api/v1/products|201"] == 2

    def test_request_errors_are_counted(self, api_client, product_factory):
        api_client.get(f"{PRODUCTS_URL}/ghost")
        snapshot = product_factory.create_service_metrics().snapshot()
        assert snapshot["http_request_errors_total"] == {
            "GET|api/v1/products/<str:name>|404|client_error": 1
        }
        assert snapshot["http_in_flight_requests"] == 0

    def test_health(self, api_client):
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


@pytest.mark.django_db
class TestDatabaseBackedApi:

    @pytest.fixture
    def db_client(self, monkeypatch):
        factory = ProductInfrastructureFactory({"REPOSITORY_BACKEND": "database"})
        monkeypatch.setattr(apps.get_app_config("products"), "factory", factory)
        return APIClient()

    def test_create_and_fetch(self, db_client):
        assert _create(db_client, categories=["b", "a"]).status_code == 201
        response = db_client.get(f"{PRODUCTS_URL}/Widget")
        assert response.json()["data"]["categories"] == ["a", "b"]
        assert _create(db_client).status_code == 409
