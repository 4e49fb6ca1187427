"""Tests for calculate_repository_metrics."""

from products.domain import Product, RepositoryMetrics, calculate_repository_metrics


class TestCalculateRepositoryMetrics:

    def test_empty_collection(self):
        metrics = calculate_repository_metrics([])
        assert metrics == RepositoryMetrics()
        assert metrics.total == 0
        assert metrics.total_value == 0
        assert metrics.average_price == 0.0
        assert metrics.by_category == {}

    def test_totals_average_and_categories(self):
        products = [
            Product("A", 1, ["X", "Y"], 100),
            Product("B", 2, ["X"], 200),
        ]
        metrics = calculate_repository_metrics(products)
        assert metrics.total == 2
        assert metrics.total_value == 300
        assert metrics.average_price == 150.0
        assert metrics.by_category == {"X": 2, "Y": 1}

    def test_average_is_not_truncated(self):
        products = [
            Product("A", 1, ["X"], 1),
            Product("B", 2, ["X"], 2),
        ]
        assert calculate_repository_metrics(products).average_price == 1.5

    def test_repeated_category_counts_once_per_product(self):
        metrics = calculate_repository_metrics([Product("A", 1, ["X", "X"], 100)])
        assert metrics.by_category == {"X": 1}

    def test_to_dict(self):
        metrics = calculate_repository_metrics([Product("A", 1, ["X"], 100)])
        assert metrics.to_dict() == {
            "total": 1,
            "total_value": 100,
            "average_price": 100.0,
            "by_category": {"X": 1},
        }
