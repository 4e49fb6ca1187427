"""
商品领域模型包。
提供商品实体、领域事件、仓储接口和统计指标计算。
"""

# 实体
from products.domain.entities import Product, ProductErrorCode, validate

# 领域事件
from products.domain.events import ProductCreatedEvent

# 仓储接口
from products.domain.repositories import ProductRepository, RepositoryMetrics

# 领域服务
from products.domain.services import calculate_repository_metrics, normalize_categories

__all__ = [
    # 实体
    'Product',
    'ProductErrorCode',
    'validate',

    # 领域事件
    'ProductCreatedEvent',

    # 仓储接口
    'ProductRepository',
    'RepositoryMetrics',

    # 领域服务
    'calculate_repository_metrics',
    'normalize_categories',
]
