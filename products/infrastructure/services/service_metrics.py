"""
服务运行指标。
基于prometheus_client记录商品业务指标和HTTP请求指标（流量、错误、延迟分布、并发数），
供/metrics接口以JSON形式读取。
"""
import threading
from typing import Any, Dict, Iterator, Optional

from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram
from prometheus_client.samples import Sample

from products.domain.repositories import RepositoryMetrics

# HTTP请求耗时直方图的桶边界（秒），1ms到10s
HTTP_DURATION_BUCKETS = (0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)


class ServiceMetrics:
    """
    服务运行指标。
    每个实例使用独立的CollectorRegistry，互不干扰。
    计数器只增不减；业务仪表盘在每次创建商品后根据仓储统计整体刷新。
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """
        初始化服务运行指标。

        Args:
            registry: 指标注册表，默认新建
        """
        self.registry = registry or CollectorRegistry()
        # 分类仪表盘先清空再写入，期间不允许读取快照
        self._lock = threading.Lock()

        # 业务指标
        self.products_created = Counter(
            'products_created_total', '服务启动以来创建的商品数量', registry=self.registry
        )
        self.products_total = Gauge('products_total', '当前商品数量', registry=self.registry)
        self.products_total_value = Gauge('products_total_value', '所有商品价格之和', registry=self.registry)
        self.products_average_price = Gauge('products_average_price', '商品平均价格', registry=self.registry)
        self.products_by_category = Gauge(
            'products_by_category', '各分类的商品数量', ['category'], registry=self.registry
        )

        # HTTP指标
        self.http_requests = Counter(
            'http_requests_total', 'HTTP请求总数',
            ['method', 'endpoint', 'status'], registry=self.registry
        )
        self.http_request_errors = Counter(
            'http_request_errors_total', 'HTTP错误请求总数',
            ['method', 'endpoint', 'status', 'error_type'], registry=self.registry
        )
        self.http_request_duration = Histogram(
            'http_request_duration_seconds', 'HTTP请求耗时（秒）',
            ['method', 'endpoint', 'status'],
            buckets=HTTP_DURATION_BUCKETS, registry=self.registry
        )
        self.http_in_flight_requests = Gauge(
            'http_in_flight_requests', '正在处理的HTTP请求数', registry=self.registry
        )

    def increment_products_created(self) -> None:
        """商品创建计数加一"""
        self.products_created.inc()

    def update_from_repository(self, metrics: RepositoryMetrics) -> None:
        """
        用仓储统计刷新业务仪表盘。
        分类统计先清空再整体写入。

        Args:
            metrics: 仓储统计指标
        """
        with self._lock:
            self.products_total.set(metrics.total)
            self.products_total_value.set(metrics.total_value)
            self.products_average_price.set(metrics.average_price)
            self.products_by_category.clear()
            for category, count in metrics.by_category.items():
                self.products_by_category.labels(category=category).set(count)

    def request_started(self) -> None:
        self.http_in_flight_requests.inc()

    def request_finished(self) -> None:
        self.http_in_flight_requests.dec()

    def record_http_request(self, method: str, endpoint: str, status: int, duration: float) -> None:
        """
        记录一次完整的HTTP请求。

        Args:
            method: 请求方法
            endpoint: 归一化后的路由
            status: HTTP状态码
            duration: 耗时（秒）
        """
        labels = {'method': method, 'endpoint': endpoint, 'status': str(status)}
        self.http_requests.labels(**labels).inc()
        self.http_request_duration.labels(**labels).observe(duration)
        if status >= 400:
            error_type = "server_error" if status >= 500 else "client_error"
            self.http_request_errors.labels(error_type=error_type, **labels).inc()

    def snapshot(self) -> Dict[str, Any]:
        """
        获取当前指标的副本。

        Returns:
            指标字典，带标签的指标以"|"拼接标签值作为键；
            耗时直方图每个键包含count、sum和累计桶计数buckets
        """
        with self._lock:
            samples = list(self._samples())

        def values(name, *label_names):
            return {
                "|".join(s.labels[label] for label in label_names): s.value
                for s in samples if s.name == name
            }

        def scalar(name):
            return next((s.value for s in samples if s.name == name), 0.0)

        durations: Dict[str, Dict[str, Any]] = {}
        for key, count in values('http_request_duration_seconds_count', 'method', 'endpoint', 'status').items():
            durations[key] = {"count": int(count), "sum": 0.0, "buckets": {}}
        for key, total in values('http_request_duration_seconds_sum', 'method', 'endpoint', 'status').items():
            durations[key]["sum"] = round(total, 6)
        for s in samples:
            if s.name == 'http_request_duration_seconds_bucket':
                key = "|".join(s.labels[label] for label in ('method', 'endpoint', 'status'))
                durations[key]["buckets"][s.labels['le']] = int(s.value)

        return {
            "products_created_total": int(scalar('products_created_total')),
            "products_total": int(scalar('products_total')),
            "products_total_value": int(scalar('products_total_value')),
            "products_average_price": float(scalar('products_average_price')),
            "products_by_category": {
                category: int(count)
                for category, count in values('products_by_category', 'category').items()
            },
            "http_requests_total": {
                key: int(count)
                for key, count in values('http_requests_total', 'method', 'endpoint', 'status').items()
            },
            "http_request_duration_seconds": durations,
            "http_request_errors_total": {
                key: int(count)
                for key, count in values(
                    'http_request_errors_total', 'method', 'endpoint', 'status', 'error_type'
                ).items()
            },
            "http_in_flight_requests": int(scalar('http_in_flight_requests')),
        }

    def _samples(self) -> Iterator[Sample]:
        for metric in self.registry.collect():
            yield from metric.samples
