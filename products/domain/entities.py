"""
商品领域模型中的实体。
包含商品实体定义以及创建商品时的校验规则。
"""
from typing import Any, Iterable, Optional, Sequence, Tuple

from core.domain import EventDispatcher, ValidationException, ValueObject
from products.domain.events import ProductCreatedEvent


class ProductErrorCode:
    """商品校验错误标识"""
    NAME_REQUIRED = "name_required"                # 商品名称为空
    SKU_REQUIRED = "sku_required"                  # SKU必须为正整数
    CATEGORIES_REQUIRED = "categories_required"    # 至少需要一个非空分类
    PRICE_REQUIRED = "price_required"              # 价格必须为正整数


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate(
    name: str,
    sku: int,
    categories: Optional[Sequence[str]],
    price: int
) -> Tuple[bool, Optional[ValidationException]]:
    """
    校验商品字段。
    按名称、SKU、分类、价格的固定顺序检查，遇到第一个失败立即返回。

    Args:
        name: 商品名称
        sku: 商品SKU
        categories: 商品分类列表
        price: 商品价格（最小货币单位）

    Returns:
        (是否通过, 校验异常)的元组，通过时异常为None
    """
    if not isinstance(name, str) or not name:
        return False, ValidationException("name", ProductErrorCode.NAME_REQUIRED, "商品名称不能为空")

    if not _is_positive_int(sku):
        return False, ValidationException("sku", ProductErrorCode.SKU_REQUIRED, "SKU必须为正整数")

    if (
        not categories
        or isinstance(categories, str)
        or not all(isinstance(c, str) and c for c in categories)
    ):
        return False, ValidationException(
            "categories", ProductErrorCode.CATEGORIES_REQUIRED, "至少需要一个非空分类"
        )

    if not _is_positive_int(price):
        return False, ValidationException("price", ProductErrorCode.PRICE_REQUIRED, "价格必须为正整数")

    return True, None


class Product(ValueObject):
    """
    商品实体。
    以名称作为自然键，创建后不可修改；只能通过create构造出完全合法的商品。
    """

    def __init__(self, name: str, sku: int, categories: Iterable[str], price: int):
        """
        初始化商品实体。
        不做校验，仓储从存储中还原商品时使用；新建商品请使用create。

        Args:
            name: 商品名称
            sku: 商品SKU
            categories: 商品分类，允许重复
            price: 商品价格（最小货币单位）
        """
        self.name = name
        self.sku = sku
        self.categories = tuple(categories)
        self.price = price
        self._freeze()

    @classmethod
    def create(
        cls,
        name: str,
        sku: int,
        categories: Optional[Sequence[str]],
        price: int,
        dispatcher: Optional[EventDispatcher] = None
    ) -> Tuple['Product', ProductCreatedEvent]:
        """
        校验并创建商品，同时生成商品创建事件。
        未传入分发器时不会分发事件，由调用方决定何时分发。

        Args:
            name: 商品名称
            sku: 商品SKU
            categories: 商品分类列表
            price: 商品价格
            dispatcher: 可选的事件分发器

        Returns:
            (商品, 商品创建事件)的元组

        Raises:
            ValidationException: 任一字段校验失败
        """
        # 先复制一份，生成器只能遍历一次
        if isinstance(categories, Iterable) and not isinstance(categories, str):
            categories = list(categories)

        ok, error = validate(name, sku, categories, price)
        if not ok:
            raise error

        product = cls(name=name, sku=sku, categories=categories, price=price)
        event = ProductCreatedEvent(
            name=product.name,
            sku=product.sku,
            categories=product.categories,
            price=product.price
        )

        if dispatcher is not None:
            dispatcher.dispatch(event.event_kind(), event)

        return product, event

    def to_dict(self) -> dict:
        """
        转换为字典表示。

        Returns:
            包含商品四个字段的字典
        """
        return {
            "name": self.name,
            "sku": self.sku,
            "categories": list(self.categories),
            "price": self.price,
        }

    def __repr__(self) -> str:
        return f"Product(name={self.name!r}, sku={self.sku}, categories={list(self.categories)}, price={self.price})"
