"""
领域模型包。
提供值对象、领域事件、领域异常和仓储接口等领域驱动设计(DDD)的核心概念。
"""

# 基础类
from core.domain.value_objects import ValueObject

# 领域事件
from core.domain.events import (
    DomainEvent,
    EventDispatcher,
    EventHandler,
)

# 领域异常
from core.domain.exceptions import (
    DomainException,
    ValidationException,
    EntityAlreadyExistsException,
    EntityNotFoundException,
    StorageException,
)

# 仓储接口
from core.domain.repositories import Repository

__all__ = [
    # 基础类
    'ValueObject',

    # 领域事件
    'DomainEvent',
    'EventDispatcher',
    'EventHandler',

    # 领域异常
    'DomainException',
    'ValidationException',
    'EntityAlreadyExistsException',
    'EntityNotFoundException',
    'StorageException',

    # 仓储接口
    'Repository',
]
