"""
商品应用服务层的数据传输对象(DTOs)。
定义应用服务与外部通信使用的数据结构。
"""
from typing import Any, Dict, List

from products.domain.entities import Product


class ProductDTO:
    """商品DTO"""

    def __init__(self, name: str, sku: int, categories: List[str], price: int):
        """
        初始化商品DTO。

        Args:
            name: 商品名称
            sku: 商品SKU
            categories: 商品分类
            price: 商品价格
        """
        self.name = name
        self.sku = sku
        self.categories = categories
        self.price = price

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """
        从商品实体创建DTO。

        Args:
            product: 商品实体

        Returns:
            商品DTO
        """
        return cls(
            name=product.name,
            sku=product.sku,
            categories=list(product.categories),
            price=product.price
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        将DTO转换为字典。

        Returns:
            字典表示
        """
        return {
            "name": self.name,
            "sku": self.sku,
            "categories": list(self.categories),
            "price": self.price,
        }
