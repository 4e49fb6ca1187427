"""
商品领域事件处理器。
在事件分发器的独立线程中执行。
"""
from loguru import logger

from core.domain.events import EventDispatcher
from products.domain.events import ProductCreatedEvent


def log_product_created(event: ProductCreatedEvent) -> None:
    """记录商品创建日志"""
    logger.info(
        f"商品已创建: name={event.name}, sku={event.sku}, "
        f"categories={list(event.categories)}, price={event.price}"
    )


def register_default_handlers(dispatcher: EventDispatcher) -> None:
    """
    注册商品模块的默认事件处理器。

    Args:
        dispatcher: 事件分发器
    """
    dispatcher.register(ProductCreatedEvent.EVENT_KIND, log_product_created)
