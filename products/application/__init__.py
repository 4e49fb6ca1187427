"""
商品应用服务层包。
提供商品相关的应用服务、数据传输对象、命令和事件处理器。
"""

# DTO
from products.application.dtos import ProductDTO

# 命令
from products.application.commands import CreateProductCommand

# 事件处理器
from products.application.event_handlers import log_product_created, register_default_handlers

# 应用服务
from products.application.product_service import ProductApplicationService

__all__ = [
    # DTO
    'ProductDTO',

    # 命令
    'CreateProductCommand',

    # 事件处理器
    'log_product_created',
    'register_default_handlers',

    # 应用服务
    'ProductApplicationService',
]
