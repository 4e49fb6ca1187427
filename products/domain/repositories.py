"""
商品领域仓储接口。
定义商品仓储接口以及仓储统计指标结构。
"""
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from core.domain.repositories import Repository
from products.domain.entities import Product


@dataclass
class RepositoryMetrics:
    """
    仓储统计指标。
    每次查询时重新计算，不持久化。
    """
    total: int = 0  # 商品总数
    total_value: int = 0  # 所有商品价格之和
    average_price: float = 0.0  # 平均价格，空仓储为0
    by_category: Dict[str, int] = field(default_factory=dict)  # 分类名称到商品数量的映射

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "total": self.total,
            "total_value": self.total_value,
            "average_price": self.average_price,
            "by_category": dict(self.by_category),
        }


class ProductRepository(Repository[Product]):
    """
    商品仓储接口。
    以商品名称为自然键，内存实现与数据库实现对调用方完全一致。
    """

    @abstractmethod
    def add(self, product: Product) -> None:
        """
        新增商品。

        Args:
            product: 要保存的商品

        Raises:
            EntityAlreadyExistsException: 同名商品已存在
            StorageException: 底层存储失败（仅数据库实现）
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Product]:
        """
        获取全部商品。

        Returns:
            商品列表
        """
        pass

    @abstractmethod
    def find_one(self, name: str) -> Product:
        """
        根据名称获取商品。

        Args:
            name: 商品名称

        Returns:
            找到的商品

        Raises:
            EntityNotFoundException: 商品不存在
            StorageException: 底层存储失败（仅数据库实现）
        """
        pass

    @abstractmethod
    def get_metrics(self) -> RepositoryMetrics:
        """
        计算当前仓储的统计指标。

        Returns:
            仓储统计指标
        """
        pass
