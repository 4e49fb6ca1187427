import pytest
from django.apps import apps
from rest_framework.test import APIClient

from products.infrastructure.factory import ProductInfrastructureFactory


@pytest.fixture
def product_factory(monkeypatch):
    """Replace the app-wide factory with a fresh in-memory one for each test."""
    factory = ProductInfrastructureFactory({"REPOSITORY_BACKEND": "memory"})
    monkeypatch.setattr(apps.get_app_config("products"), "factory", factory)
    return factory


@pytest.fixture
def api_client(product_factory):
    return APIClient()
