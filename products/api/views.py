"""
商品API视图。
提供RESTful API接口，处理HTTP请求并调用应用服务。
领域异常交给统一异常处理器转换为响应。
"""
from django.apps import apps
from rest_framework.views import APIView
from rest_framework.response import Response
import logging

from core.infrastructure.api_view import ApiBaseView
from core.infrastructure.response import StatusCode
from products.application import ProductApplicationService, CreateProductCommand
from products.api.serializers import (
    ProductCreateSerializer,
    ProductSerializer,
    RepositoryMetricsSerializer,
)

logger = logging.getLogger(__name__)


def get_product_service() -> ProductApplicationService:
    """获取服务启动时创建的商品应用服务实例"""
    return apps.get_app_config('products').product_service


class ProductListCreateView(ApiBaseView):
    """商品列表和创建接口"""

    def get(self, request):
        """获取全部商品"""
        products = get_product_service().list_products()
        return self.success_response(
            data=[ProductSerializer(product).data for product in products],
            message="获取商品列表成功"
        )

    def post(self, request):
        """创建商品"""
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        command = CreateProductCommand(
            name=data['name'],
            sku=data['sku'],
            categories=data['categories'],
            price=data['price']
        )

        product = get_product_service().create_product(command)
        logger.info(f"商品创建成功: {product.name}")

        return self.created_response(
            data=ProductSerializer(product).data,
            message="商品创建成功",
            code=StatusCode.CREATED
        )


class ProductDetailView(ApiBaseView):
    """商品详情接口"""

    def get(self, request, name):
        """按名称获取商品"""
        product = get_product_service().get_product(name)
        return self.success_response(
            data=ProductSerializer(product).data,
            message="获取商品详情成功"
        )


class MetricsView(ApiBaseView):
    """服务指标接口"""

    def get(self, request):
        """获取仓储统计指标和服务运行指标"""
        products_config = apps.get_app_config('products')
        repository_metrics = products_config.product_service.get_metrics()
        return self.success_response(
            data={
                "repository": RepositoryMetricsSerializer(repository_metrics).data,
                "service": products_config.service_metrics.snapshot(),
            },
            message="获取指标成功"
        )


class HealthView(APIView):
    """健康检查接口"""

    def get(self, request):
        return Response({"status": "ok"})
