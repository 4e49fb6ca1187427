"""
商品基础设施层工厂。
负责按配置创建和管理仓储、事件分发器、服务指标和应用服务实例。
"""
import threading
from typing import Any, Dict, Optional

from loguru import logger

from core.domain.events import EventDispatcher
from core.infrastructure.transaction import DjangoTransactionManager, TransactionManager

from products.config import REPOSITORY_BACKEND_DATABASE, REPOSITORY_BACKEND_MEMORY
from products.domain import ProductRepository
from products.application import ProductApplicationService, register_default_handlers
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository
from products.infrastructure.repositories.memory_product_repository import InMemoryProductRepository
from products.infrastructure.services.service_metrics import ServiceMetrics


class ProductInfrastructureFactory:
    """
    商品基础设施层工厂类。
    每种对象只创建一次，同一工厂产出的对象在服务运行期间共享。
    """

    def __init__(
        self,
        product_settings: Dict[str, Any],
        transaction_manager: Optional[TransactionManager] = None
    ):
        """
        初始化商品基础设施层工厂。

        Args:
            product_settings: 商品模块配置
            transaction_manager: 事务管理器，默认使用Django事务
        """
        self.product_settings = product_settings
        self.transaction_manager = transaction_manager or DjangoTransactionManager()

        # 可重入：create_application_service内部会调用其他create方法
        self._lock = threading.RLock()

        # 存储已创建的实例
        self._product_repository = None
        self._event_dispatcher = None
        self._service_metrics = None
        self._application_service = None

    def create_product_repository(self) -> ProductRepository:
        """
        创建商品仓储。

        Returns:
            商品仓储实例

        Raises:
            ValueError: 配置了未知的仓储实现
        """
        with self._lock:
            if self._product_repository is None:
                backend = self.product_settings.get('REPOSITORY_BACKEND', REPOSITORY_BACKEND_DATABASE)
                if backend == REPOSITORY_BACKEND_DATABASE:
                    self._product_repository = DjangoProductRepository(
                        transaction_manager=self.transaction_manager,
                        strict_reads=bool(self.product_settings.get('STRICT_READS', False))
                    )
                elif backend == REPOSITORY_BACKEND_MEMORY:
                    self._product_repository = InMemoryProductRepository()
                else:
                    raise ValueError(f"未知的商品仓储实现: {backend}")
                logger.info(f"使用商品仓储: {backend}")

            return self._product_repository

    def create_event_dispatcher(self) -> EventDispatcher:
        """
        创建事件分发器，并注册默认事件处理器。

        Returns:
            事件分发器实例
        """
        with self._lock:
            if self._event_dispatcher is None:
                dispatcher = EventDispatcher()
                register_default_handlers(dispatcher)
                self._event_dispatcher = dispatcher

            return self._event_dispatcher

    def create_service_metrics(self) -> ServiceMetrics:
        """
        创建服务运行指标。

        Returns:
            服务运行指标实例
        """
        with self._lock:
            if self._service_metrics is None:
                self._service_metrics = ServiceMetrics()

            return self._service_metrics

    def create_application_service(self) -> ProductApplicationService:
        """
        创建商品应用服务。

        Returns:
            商品应用服务实例
        """
        with self._lock:
            if self._application_service is None:
                self._application_service = ProductApplicationService(
                    product_repository=self.create_product_repository(),
                    event_dispatcher=self.create_event_dispatcher(),
                    service_metrics=self.create_service_metrics()
                )

            return self._application_service
