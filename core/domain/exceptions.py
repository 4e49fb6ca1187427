"""
领域异常模块。
包含领域模型中使用的各种异常类。
"""
from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class ValidationException(DomainException):
    """
    数据验证异常。
    当数据验证失败时抛出，调用方通过code区分具体的失败原因。
    """

    def __init__(
        self,
        field_name: Optional[str] = None,
        code: Optional[str] = None,
        message: str = "数据验证失败"
    ):
        """
        初始化数据验证异常。

        Args:
            field_name: 字段名称
            code: 稳定的错误标识，例如"name_required"
            message: 异常消息
        """
        if field_name:
            full_message = f"字段'{field_name}'验证失败: {message}"
        else:
            full_message = message
        super().__init__(full_message)
        self.field_name = field_name
        self.code = code


class EntityAlreadyExistsException(DomainException):
    """
    实体已存在异常。
    当以相同的自然键重复保存实体时抛出。
    """

    def __init__(self, entity_name: str, key: Any):
        """
        初始化实体已存在异常。

        Args:
            entity_name: 实体名称
            key: 冲突的自然键
        """
        message = f"{entity_name}已存在: {key}"
        super().__init__(message)
        self.entity_name = entity_name
        self.key = key


class EntityNotFoundException(DomainException):
    """
    实体未找到异常。
    当请求的实体不存在时抛出。
    """

    def __init__(self, entity_name: str, key: Any):
        """
        初始化实体未找到异常。

        Args:
            entity_name: 实体名称
            key: 查找使用的键
        """
        message = f"无法找到{entity_name}: {key}"
        super().__init__(message)
        self.entity_name = entity_name
        self.key = key


class StorageException(DomainException):
    """
    存储异常。
    包装底层事务或连接失败，调用方不能假设有任何部分数据已持久化。
    """

    def __init__(self, operation: str, reason: str):
        """
        初始化存储异常。

        Args:
            operation: 失败的仓储操作
            reason: 底层错误描述
        """
        message = f"存储操作'{operation}'失败: {reason}"
        super().__init__(message)
        self.operation = operation
        self.reason = reason
