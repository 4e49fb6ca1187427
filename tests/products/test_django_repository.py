"""Tests for DjangoProductRepository against the test database."""

from unittest import mock

import pytest
from django.db import DatabaseError
from django.db.models import QuerySet

from core.domain import EntityAlreadyExistsException, EntityNotFoundException, StorageException
from products.domain import Product, RepositoryMetrics
from products.infrastructure.models.product_models import (
    Category as CategoryModel,
    Product as ProductModel,
    ProductCategory as ProductCategoryModel,
)
from products.infrastructure.repositories import django_product_repository
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository
from products.infrastructure.repositories.memory_product_repository import InMemoryProductRepository


@pytest.mark.django_db
class TestDjangoProductRepository:

    def test_add_then_find_one(self):
        repo = DjangoProductRepository()
        repo.add(Product("Widget", 7, ["Tools"], 1500))
        assert repo.find_one("Widget") == Product("Widget", 7, ["Tools"], 1500)

    def test_categories_come_back_sorted_by_name(self):
        repo = DjangoProductRepository()
        repo.add(Product("Widget", 1, ["b", "a", "c"], 100))
        assert repo.find_one("Widget").categories == ("a", "b", "c")

    def test_categories_are_shared_between_products(self):
        repo = DjangoProductRepository()
        repo.add(Product("A", 1, ["X", "Y"], 100))
        repo.add(Product("B", 2, ["X"], 200))
        assert CategoryModel.objects.count() == 2
        assert ProductCategoryModel.objects.count() == 3

    def test_repeated_category_stored_once(self):
        repo = DjangoProductRepository()
        repo.add(Product("Widget", 1, ["X", "X"], 100))
        assert repo.find_one("Widget").categories == ("X",)
        assert ProductCategoryModel.objects.count() == 1

    def test_duplicate_name_rejected(self):
        repo = DjangoProductRepository()
        repo.add(Product("Widget", 1, ["X"], 100))
        with pytest.raises(EntityAlreadyExistsException):
            repo.add(Product("Widget", 2, ["Y"], 999))
        assert repo.find_one("Widget").price == 100
        assert not CategoryModel.objects.filter(name="Y").exists()

    def test_unique_violation_maps_to_already_exists(self, monkeypatch):
        repo = DjangoProductRepository()
        repo.add(Product("Widget", 1, ["X"], 100))

        # another writer inserted the same name between the existence check and the insert
        monkeypatch.setattr(QuerySet, "exists", lambda self: False)
        with pytest.raises(EntityAlreadyExistsException):
            repo.add(Product("Widget", 2, ["Y"], 999))
        monkeypatch.undo()

        assert repo.find_one("Widget") == Product("Widget", 1, ["X"], 100)
        assert ProductModel.objects.count() == 1
        assert not CategoryModel.objects.filter(name="Y").exists()

    def test_missing_name_raises_not_found(self):
        repo = DjangoProductRepository()
        with pytest.raises(EntityNotFoundException):
            repo.find_one("ghost")

    def test_find_all_newest_first(self):
        repo = DjangoProductRepository()
        for name in ("A", "B", "C"):
            repo.add(Product(name, 1, ["X"], 100))
        assert [p.name for p in repo.find_all()] == ["C", "B", "A"]

    def test_find_all_empty(self):
        assert DjangoProductRepository().find_all() == []

    def test_metrics(self):
        repo = DjangoProductRepository()
        repo.add(Product("A", 1, ["X", "Y"], 100))
        repo.add(Product("B", 2, ["X"], 200))
        metrics = repo.get_metrics()
        assert metrics.total == 2
        assert metrics.total_value == 300
        assert metrics.average_price == 150.0
        assert metrics.by_category == {"X": 2, "Y": 1}

    def test_metrics_empty(self):
        assert DjangoProductRepository().get_metrics() == RepositoryMetrics()

    def test_failed_add_rolls_back_everything(self, monkeypatch):
        real_attach = DjangoProductRepository._attach_category
        calls = []

        def flaky_attach(self, product_model, category_name):
            calls.append(category_name)
            if len(calls) == 2:
                raise DatabaseError("connection lost")
            return real_attach(self, product_model, category_name)

        monkeypatch.setattr(DjangoProductRepository, "_attach_category", flaky_attach)
        repo = DjangoProductRepository()

        with pytest.raises(StorageException):
            repo.add(Product("Widget", 1, ["X", "Y"], 100))

        assert repo.find_all() == []
        with pytest.raises(EntityNotFoundException):
            repo.find_one("Widget")
        assert ProductModel.objects.count() == 0
        assert CategoryModel.objects.count() == 0
        assert ProductCategoryModel.objects.count() == 0

    def test_product_can_be_added_after_rollback(self, monkeypatch):
        repo = DjangoProductRepository()
        with monkeypatch.context() as patched:
            patched.setattr(
                DjangoProductRepository,
                "_attach_category",
                mock.Mock(side_effect=DatabaseError("connection lost"))
            )
            with pytest.raises(StorageException):
                repo.add(Product("Widget", 1, ["X"], 100))

        repo.add(Product("Widget", 1, ["X"], 100))
        assert repo.find_one("Widget").categories == ("X",)


def _broken_product_model():
    broken = mock.Mock()
    broken.DoesNotExist = ProductModel.DoesNotExist
    broken.objects.order_by.side_effect = DatabaseError("connection refused")
    broken.objects.count.side_effect = DatabaseError("connection refused")
    broken.objects.get.side_effect = DatabaseError("connection refused")
    return broken


class TestDjangoProductRepositoryStorageFailures:

    @pytest.fixture(autouse=True)
    def broken_database(self, monkeypatch):
        monkeypatch.setattr(django_product_repository, "ProductModel", _broken_product_model())

    def test_find_all_degrades_to_empty(self):
        assert DjangoProductRepository().find_all() == []

    def test_metrics_degrade_to_zero(self):
        assert DjangoProductRepository().get_metrics() == RepositoryMetrics()

    def test_strict_find_all_raises(self):
        with pytest.raises(StorageException) as exc_info:
            DjangoProductRepository(strict_reads=True).find_all()
        assert exc_info.value.operation == "find_all"

    def test_strict_metrics_raise(self):
        with pytest.raises(StorageException) as exc_info:
            DjangoProductRepository(strict_reads=True).get_metrics()
        assert exc_info.value.operation == "get_metrics"

    def test_find_one_failure_is_never_not_found(self):
        with pytest.raises(StorageException):
            DjangoProductRepository().find_one("Widget")


@pytest.mark.django_db
class TestBackendsAgree:

    @pytest.mark.parametrize("categories", [["X", "X"], ["b", "a"], ["Tools"]])
    def test_same_product_reads_back_identically(self, categories):
        memory_repo = InMemoryProductRepository()
        database_repo = DjangoProductRepository()
        product = Product("Widget", 1, categories, 100)

        memory_repo.add(product)
        database_repo.add(product)

        assert memory_repo.find_one("Widget") == database_repo.find_one("Widget")
        assert memory_repo.get_metrics() == database_repo.get_metrics()
