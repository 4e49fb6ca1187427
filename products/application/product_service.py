"""
商品应用服务。
定义商品相关的应用层服务，处理命令和查询，协调领域层和基础设施层。
"""
from typing import List

from loguru import logger
from core.domain import DomainException, EventDispatcher

from products.domain.entities import Product
from products.domain.repositories import ProductRepository, RepositoryMetrics
from products.application.commands import CreateProductCommand
from products.application.dtos import ProductDTO
from products.infrastructure.services.service_metrics import ServiceMetrics


class ProductApplicationService:
    """
    商品应用服务。
    处理商品相关的应用层逻辑，协调仓储、事件分发器和服务指标。
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        event_dispatcher: EventDispatcher,
        service_metrics: ServiceMetrics
    ):
        """
        初始化商品应用服务。

        Args:
            product_repository: 商品仓储
            event_dispatcher: 事件分发器
            service_metrics: 服务运行指标
        """
        self.product_repository = product_repository
        self.event_dispatcher = event_dispatcher
        self.service_metrics = service_metrics

    # ==================== 命令处理方法 ====================

    def create_product(self, command: CreateProductCommand) -> ProductDTO:
        """
        创建商品。
        校验并保存成功后才分发商品创建事件，然后刷新服务指标。

        Args:
            command: 创建商品命令

        Returns:
            创建的商品DTO

        Raises:
            ValidationException: 字段校验失败
            EntityAlreadyExistsException: 同名商品已存在
            StorageException: 存储失败
        """
        try:
            product, event = Product.create(
                name=command.name,
                sku=command.sku,
                categories=command.categories,
                price=command.price
            )
            self.product_repository.add(product)
        except DomainException as e:
            logger.warning(f"创建商品失败: {e}")
            raise

        self.event_dispatcher.dispatch(event.event_kind(), event)

        self.service_metrics.increment_products_created()
        self.service_metrics.update_from_repository(self.product_repository.get_metrics())

        return ProductDTO.from_entity(product)

    # ==================== 查询处理方法 ====================

    def list_products(self) -> List[ProductDTO]:
        """
        获取全部商品。

        Returns:
            商品DTO列表
        """
        return [ProductDTO.from_entity(product) for product in self.product_repository.find_all()]

    def get_product(self, name: str) -> ProductDTO:
        """
        根据名称获取商品。

        Args:
            name: 商品名称

        Returns:
            商品DTO

        Raises:
            EntityNotFoundException: 商品不存在
        """
        return ProductDTO.from_entity(self.product_repository.find_one(name))

    def get_metrics(self) -> RepositoryMetrics:
        """
        获取仓储统计指标。

        Returns:
            仓储统计指标
        """
        return self.product_repository.get_metrics()
