"""
商品应用配置。
服务启动时创建基础设施工厂，工厂产出的应用服务在整个服务运行期间共享。
"""
from django.apps import AppConfig


class ProductsConfig(AppConfig):
    """商品应用配置"""
    name = 'products'
    verbose_name = "商品"
    default_auto_field = 'django.db.models.BigAutoField'

    factory = None

    def ready(self):
        from products.config import get_product_settings
        from products.infrastructure.factory import ProductInfrastructureFactory

        self.factory = ProductInfrastructureFactory(get_product_settings())
        # 启动时即创建共享实例，请求线程只读取
        self.factory.create_application_service()

    @property
    def product_service(self):
        """商品应用服务"""
        return self.factory.create_application_service()

    @property
    def service_metrics(self):
        """服务运行指标"""
        return self.factory.create_service_metrics()
