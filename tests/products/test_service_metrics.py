"""Tests for ServiceMetrics."""

from products.domain import RepositoryMetrics
from products.infrastructure.services.service_metrics import ServiceMetrics


class TestServiceMetrics:

    def test_initial_snapshot(self):
        snapshot = ServiceMetrics().snapshot()
        assert snapshot["products_created_total"] == 0
        assert snapshot["products_by_category"] == {}
        assert snapshot["http_requests_total"] == {}
        assert snapshot["http_in_flight_requests"] == 0

    def test_update_from_repository_replaces_categories(self):
        metrics = ServiceMetrics()
        metrics.update_from_repository(RepositoryMetrics(1, 100, 100.0, {"old": 1}))
        metrics.update_from_repository(RepositoryMetrics(2, 300, 150.0, {"X": 2}))
        snapshot = metrics.snapshot()
        assert snapshot["products_total"] == 2
        assert snapshot["products_total_value"] == 300
        assert snapshot["products_average_price"] == 150.0
        assert snapshot["products_by_category"] == {"X": 2}

    def test_records_requests_and_errors(self):
        metrics = ServiceMetrics()
        metrics.record_http_request("GET", "api/v1/products", 200, 0.01)
        metrics.record_http_request("GET", "api/v1/products", 200, 0.02)
        metrics.record_http_request("GET", "api/v1/products/<str:name>", 404, 0.01)
        metrics.record_http_request("POST", "api/v1/products", 503, 0.5)
        snapshot = metrics.snapshot()

        assert snapshot["http_requests_total"] == {
            "GET|api/v1/products|200": 2,
            "GET|api/v1/products/<str:name>|404": 1,
            "POST|api/v1/products|503": 1,
        }
        duration = snapshot["http_request_duration_seconds"]["GET|api/v1/products|200"]
        assert duration["count"] == 2
        assert duration["sum"] == 0.03
        assert snapshot["http_request_errors_total"] == {
            "GET|api/v1/products/<str:name>|404|client_error": 1,
            "POST|api/v1/products|503|server_error": 1,
        }

    def test_in_flight_requests(self):
        metrics = ServiceMetrics()
        metrics.request_started()
        metrics.request_started()
        metrics.request_finished()
        assert metrics.snapshot()["http_in_flight_requests"] == 1

    def test_snapshot_is_a_copy(self):
        metrics = ServiceMetrics()
        metrics.update_from_repository(RepositoryMetrics(1, 100, 100.0, {"X": 1}))
        snapshot = metrics.snapshot()
        snapshot["products_by_category"]["X"] = 99
        assert metrics.snapshot()["products_by_category"] == {"X": 1}

    def test_duration_histogram_buckets(self):
        metrics = ServiceMetrics()
        for duration in (0.0005, 0.02, 0.3, 12.0):
            metrics.record_http_request("GET", "health", 200, duration)
        histogram = metrics.snapshot()["http_request_duration_seconds"]["GET|health|200"]

        assert histogram["count"] == 4
        assert histogram["sum"] == 12.3205
        buckets = histogram["buckets"]
        assert buckets["0.001"] == 1
        assert buckets["0.01"] == 1
        assert buckets["0.025"] == 2
        assert buckets["0.5"] == 3
        assert buckets["10.0"] == 3
        assert buckets["+Inf"] == 4

    def test_instances_do_not_share_state(self):
        first, second = ServiceMetrics(), ServiceMetrics()
        first.increment_products_created()
        assert first.snapshot()["products_created_total"] == 1
        assert second.snapshot()["products_created_total"] == 0
