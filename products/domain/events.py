"""
商品领域模型中的事件。
定义商品相关的领域事件。
"""
from typing import Iterable, Tuple

from core.domain.events import DomainEvent


class ProductCreatedEvent(DomainEvent):
    """商品创建事件，保存创建时商品字段的只读快照"""

    EVENT_KIND = "product.created"

    def __init__(self, name: str, sku: int, categories: Iterable[str], price: int):
        """
        初始化商品创建事件。

        Args:
            name: 商品名称
            sku: 商品SKU
            categories: 商品分类
            price: 商品价格
        """
        super().__init__()
        self._name = name
        self._sku = sku
        self._categories = tuple(categories)
        self._price = price

    @property
    def name(self) -> str:
        return self._name

    @property
    def sku(self) -> int:
        return self._sku

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    @property
    def price(self) -> int:
        return self._price

    def __repr__(self) -> str:
        return f"ProductCreatedEvent(name={self._name!r}, sku={self._sku}, price={self._price})"
