"""
领域事件模块。
包含DomainEvent基类和EventDispatcher事件分发器，用于领域事件的发布和订阅。
"""
from datetime import datetime, timezone
from typing import Callable, Dict, List
import threading
import uuid

from loguru import logger

from core.infrastructure.locks import ReadWriteLock


class DomainEvent:
    """
    领域事件基类。
    领域事件表示领域模型中发生的重要事件，通过事件类型字符串路由到处理器。
    子类需要定义EVENT_KIND。
    """

    EVENT_KIND = ""

    def __init__(self):
        """
        初始化领域事件。
        自动设置事件ID和发生时间。
        """
        self.id = uuid.uuid4()
        self.occurred_on = datetime.now(timezone.utc)

    def event_kind(self) -> str:
        """
        获取事件类型。

        Returns:
            稳定的事件类型字符串
        """
        return self.EVENT_KIND


# 事件处理器类型
EventHandler = Callable[[DomainEvent], None]


class EventDispatcher:
    """
    领域事件分发器。
    按事件类型保存处理器列表；分发时为每个处理器启动一个独立线程，不等待其完成。
    单个处理器的异常只记录日志，不影响其他处理器，也不会返回给分发方。
    """

    def __init__(self):
        # 事件处理器字典，键为事件类型，值为按注册顺序排列的处理器列表
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._lock = ReadWriteLock()

    def register(self, event_kind: str, handler: EventHandler) -> None:
        """
        注册事件处理器。
        同一处理器重复注册会被保留多次。

        Args:
            event_kind: 事件类型
            handler: 事件处理器函数
        """
        with self._lock.write_locked():
            self._handlers.setdefault(event_kind, []).append(handler)

    def dispatch(self, event_kind: str, event: DomainEvent) -> List[threading.Thread]:
        """
        分发事件。
        为每个已注册的处理器启动一个线程后立即返回。

        Args:
            event_kind: 事件类型
            event: 要分发的事件

        Returns:
            已启动的处理器线程列表，调用方无需等待
        """
        with self._lock.read_locked():
            handlers = list(self._handlers.get(event_kind, ()))

        if not handlers:
            logger.debug(f"事件已分发: {event_kind}（没有注册的处理器）")
            return []

        threads = []
        for index, handler in enumerate(handlers):
            thread = threading.Thread(
                target=self._run_handler,
                args=(event_kind, handler, event),
                name=f"event-{event_kind}-{index}",
                daemon=True
            )
            thread.start()
            threads.append(thread)
        return threads

    def handler_count(self, event_kind: str) -> int:
        """
        获取某个事件类型已注册的处理器数量。

        Args:
            event_kind: 事件类型

        Returns:
            处理器数量
        """
        with self._lock.read_locked():
            return len(self._handlers.get(event_kind, ()))

    @staticmethod
    def _run_handler(event_kind: str, handler: EventHandler, event: DomainEvent) -> None:
        """在独立线程中执行处理器并隔离其异常"""
        try:
            handler(event)
        except Exception:
            logger.exception(f"事件处理器执行失败: {event_kind} ({getattr(handler, '__name__', handler)})")
