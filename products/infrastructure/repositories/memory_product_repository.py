"""
商品仓储的内存实现。
以商品名称为键的字典保存商品，所有读写都经过同一把读写锁。
"""
from typing import Dict, List

from loguru import logger

from core.domain.exceptions import EntityAlreadyExistsException, EntityNotFoundException
from core.infrastructure.locks import ReadWriteLock
from products.domain.entities import Product
from products.domain.repositories import ProductRepository, RepositoryMetrics
from products.domain.services import calculate_repository_metrics, normalize_categories


class InMemoryProductRepository(ProductRepository):
    """
    基于内存字典的商品仓储实现。
    写操作持有独占锁，读操作持有共享锁，读者不会看到执行到一半的新增。
    """

    def __init__(self):
        self._products: Dict[str, Product] = {}
        self._lock = ReadWriteLock()

    def add(self, product: Product) -> None:
        """
        新增商品。
        分类按仓储统一形式保存（去重、按名称排序），与数据库实现读出的结果一致。

        Args:
            product: 要保存的商品

        Raises:
            EntityAlreadyExistsException: 同名商品已存在
        """
        stored = Product(
            name=product.name,
            sku=product.sku,
            categories=normalize_categories(product.categories),
            price=product.price
        )
        with self._lock.write_locked():
            if product.name in self._products:
                raise EntityAlreadyExistsException("商品", product.name)
            self._products[product.name] = stored
        logger.info(f"商品已保存: {product.name}")

    def find_all(self) -> List[Product]:
        """
        获取全部商品，不保证顺序。

        Returns:
            商品列表
        """
        with self._lock.read_locked():
            return list(self._products.values())

    def find_one(self, name: str) -> Product:
        """
        根据名称获取商品。

        Args:
            name: 商品名称

        Returns:
            找到的商品

        Raises:
            EntityNotFoundException: 商品不存在
        """
        with self._lock.read_locked():
            product = self._products.get(name)
        if product is None:
            raise EntityNotFoundException("商品", name)
        return product

    def get_metrics(self) -> RepositoryMetrics:
        """
        根据当前内容计算统计指标。

        Returns:
            仓储统计指标
        """
        with self._lock.read_locked():
            products = list(self._products.values())
        return calculate_repository_metrics(products)
