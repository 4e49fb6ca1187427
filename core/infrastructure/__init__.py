"""
基础设施层包。
提供事务管理、并发锁等基础设施组件。
API响应封装与异常处理请直接从对应模块导入。
"""

# 并发锁
from core.infrastructure.locks import ReadWriteLock

# 事务管理
from core.infrastructure.transaction import (
    TransactionManager,
    DjangoTransactionManager,
)

__all__ = [
    # 并发锁
    'ReadWriteLock',

    # 事务管理
    'TransactionManager',
    'DjangoTransactionManager',
]
