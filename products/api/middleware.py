"""
HTTP请求指标中间件。
统计请求数量、耗时、错误数和处理中的请求数。
"""
import time

from django.apps import apps


def normalize_endpoint(request) -> str:
    """
    获取归一化的路由，避免按实际路径统计导致基数过高。

    Args:
        request: Django请求对象

    Returns:
        路由模式，例如"api/v1/products/<str:name>"；无法解析时返回"unknown"
    """
    match = getattr(request, 'resolver_match', None)
    if match is None or not match.route:
        return "unknown"
    return match.route


class RequestMetricsMiddleware:
    """记录每个HTTP请求的服务指标"""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        metrics = apps.get_app_config('products').service_metrics
        metrics.request_started()
        start_time = time.perf_counter()
        status = 500
        try:
            response = self.get_response(request)
            status = response.status_code
            return response
        finally:
            metrics.request_finished()
            metrics.record_http_request(
                method=request.method,
                endpoint=normalize_endpoint(request),
                status=status,
                duration=time.perf_counter() - start_time
            )
