"""
商品仓储的Django实现。
"""
from typing import List, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Avg, Count, Sum
from loguru import logger

from core.domain.exceptions import (
    EntityAlreadyExistsException,
    EntityNotFoundException,
    StorageException,
)
from core.infrastructure.transaction import DjangoTransactionManager, TransactionManager
from products.domain.entities import Product
from products.domain.repositories import ProductRepository, RepositoryMetrics
from products.domain.services import normalize_categories

from products.infrastructure.models.product_models import (
    Category as CategoryModel,
    Product as ProductModel,
    ProductCategory as ProductCategoryModel,
)


class DjangoProductRepository(ProductRepository):
    """
    基于Django ORM的商品仓储实现。

    新增商品在一个事务内完成商品行、分类行和关联行的写入，失败时整体回滚。
    find_all和get_metrics默认在存储失败时降级为空结果，strict_reads为True时改为抛出StorageException。
    """

    def __init__(
        self,
        transaction_manager: Optional[TransactionManager] = None,
        strict_reads: bool = False
    ):
        """
        初始化商品仓储。

        Args:
            transaction_manager: 事务管理器，默认使用Django事务
            strict_reads: 读取列表和统计指标失败时是否抛出异常
        """
        self.transaction_manager = transaction_manager or DjangoTransactionManager()
        self.strict_reads = strict_reads

    def add(self, product: Product) -> None:
        """
        新增商品。

        Args:
            product: 要保存的商品

        Raises:
            EntityAlreadyExistsException: 同名商品已存在
            StorageException: 事务失败，没有任何数据被写入
        """
        try:
            with self.transaction_manager.start():
                product_model = self._insert_product(product)
                for category_name in normalize_categories(product.categories):
                    self._attach_category(product_model, category_name)
        except DatabaseError as e:
            raise StorageException("add", str(e)) from e

        logger.info(f"商品已保存: {product.name} (id={product_model.id})")

    def find_all(self) -> List[Product]:
        """
        获取全部商品，按创建时间倒序。

        Returns:
            商品列表；存储失败且未开启strict_reads时返回空列表
        """
        try:
            product_models = ProductModel.objects.order_by('-created_at', '-id')
            return [self._to_domain_entity(model) for model in product_models]
        except DatabaseError as e:
            if self.strict_reads:
                raise StorageException("find_all", str(e)) from e
            logger.error(f"获取商品列表失败，返回空结果: {e}")
            return []

    def find_one(self, name: str) -> Product:
        """
        根据名称获取商品。

        Args:
            name: 商品名称

        Returns:
            找到的商品

        Raises:
            EntityNotFoundException: 商品不存在
            StorageException: 查询失败
        """
        try:
            product_model = ProductModel.objects.get(name=name)
            return self._to_domain_entity(product_model)
        except ProductModel.DoesNotExist:
            raise EntityNotFoundException("商品", name)
        except DatabaseError as e:
            raise StorageException("find_one", str(e)) from e

    def get_metrics(self) -> RepositoryMetrics:
        """
        计算统计指标。
        三个聚合查询相互独立，不在同一事务中执行，结果是尽力而为的快照。

        Returns:
            仓储统计指标；存储失败且未开启strict_reads时返回全零指标
        """
        try:
            total = ProductModel.objects.count()

            aggregates = ProductModel.objects.aggregate(
                total_value=Sum('price'),
                average_price=Avg('price')
            )

            by_category = dict(
                CategoryModel.objects.annotate(
                    product_count=Count('product_links__product', distinct=True)
                ).filter(
                    product_count__gt=0
                ).values_list('name', 'product_count')
            )
        except DatabaseError as e:
            if self.strict_reads:
                raise StorageException("get_metrics", str(e)) from e
            logger.error(f"计算商品统计指标失败，返回空结果: {e}")
            return RepositoryMetrics()

        return RepositoryMetrics(
            total=total,
            total_value=int(aggregates['total_value'] or 0),
            average_price=float(aggregates['average_price'] or 0),
            by_category=by_category
        )

    def _insert_product(self, product: Product) -> ProductModel:
        """
        写入商品行。
        唯一约束冲突在嵌套保存点中处理，转换为实体已存在异常。

        Args:
            product: 要保存的商品

        Returns:
            新建的商品数据库模型
        """
        if ProductModel.objects.filter(name=product.name).exists():
            raise EntityAlreadyExistsException("商品", product.name)
        try:
            with transaction.atomic():
                return ProductModel.objects.create(
                    name=product.name,
                    sku=product.sku,
                    price=product.price
                )
        except IntegrityError:
            raise EntityAlreadyExistsException("商品", product.name)

    def _attach_category(self, product_model: ProductModel, category_name: str) -> None:
        """
        关联分类，分类不存在时创建。
        同一商品重复的分类名只保留一条关联。

        Args:
            product_model: 商品数据库模型
            category_name: 分类名称
        """
        category_model, created = CategoryModel.objects.get_or_create(name=category_name)
        if created:
            logger.debug(f"新建分类: {category_name}")
        ProductCategoryModel.objects.get_or_create(
            product=product_model,
            category=category_model
        )

    def _get_product_categories(self, product_id: int) -> List[str]:
        """
        获取商品的分类名称，按名称排序。

        Args:
            product_id: 商品内部ID

        Returns:
            分类名称列表
        """
        return list(
            CategoryModel.objects.filter(
                product_links__product_id=product_id
            ).order_by('name').values_list('name', flat=True)
        )

    def _to_domain_entity(self, product_model: ProductModel) -> Product:
        """
        将数据库模型转换为领域实体。

        Args:
            product_model: 商品数据库模型

        Returns:
            商品领域实体
        """
        return Product(
            name=product_model.name,
            sku=product_model.sku,
            categories=self._get_product_categories(product_model.id),
            price=product_model.price
        )
