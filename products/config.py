"""
商品模块配置文件。
从Django设置中获取商品模块的配置。
"""
from typing import Any, Dict

from django.conf import settings

# 仓储实现
REPOSITORY_BACKEND_MEMORY = "memory"
REPOSITORY_BACKEND_DATABASE = "database"

DEFAULT_PRODUCT_SETTINGS: Dict[str, Any] = {
    'REPOSITORY_BACKEND': REPOSITORY_BACKEND_DATABASE,
    # 为True时数据库仓储的列表和统计查询失败会抛出异常，而不是返回空结果
    'STRICT_READS': False,
}


def get_product_settings() -> Dict[str, Any]:
    """
    获取商品模块配置，缺省项使用默认值。

    Returns:
        商品模块配置字典
    """
    product_settings = dict(DEFAULT_PRODUCT_SETTINGS)
    product_settings.update(getattr(settings, 'PRODUCT_SETTINGS', {}))
    return product_settings
