"""
商品领域服务。
提供不属于单个实体的商品领域逻辑。
"""
from typing import Dict, Iterable, Tuple

from products.domain.entities import Product
from products.domain.repositories import RepositoryMetrics


def calculate_repository_metrics(products: Iterable[Product]) -> RepositoryMetrics:
    """
    根据一组商品计算仓储统计指标。
    纯函数，不修改传入的商品；同一商品重复列出的分类只计一次。

    Args:
        products: 商品集合

    Returns:
        仓储统计指标，空集合返回全零指标
    """
    total = 0
    total_value = 0
    by_category: Dict[str, int] = {}

    for product in products:
        total += 1
        total_value += product.price
        for category in set(product.categories):
            by_category[category] = by_category.get(category, 0) + 1

    average_price = total_value / total if total > 0 else 0.0

    return RepositoryMetrics(
        total=total,
        total_value=total_value,
        average_price=average_price,
        by_category=by_category
    )


def normalize_categories(categories: Iterable[str]) -> Tuple[str, ...]:
    """
    仓储保存的分类形式：去重后按名称排序。
    两种仓储实现读出的商品因此完全一致。

    Args:
        categories: 商品分类

    Returns:
        去重排序后的分类元组
    """
    return tuple(sorted(set(categories)))
