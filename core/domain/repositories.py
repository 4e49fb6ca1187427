"""
仓储接口模块。
定义仓储接口，用于持久化和检索领域对象。
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar

T = TypeVar('T')


class Repository(Generic[T], ABC):
    """
    仓储接口。
    以自然键标识实体，定义了所有仓储必须实现的基本操作。
    """

    @abstractmethod
    def add(self, entity: T) -> None:
        """
        新增实体。
        存在性检查与写入是一个原子操作。

        Args:
            entity: 要保存的实体

        Raises:
            EntityAlreadyExistsException: 相同自然键的实体已存在
        """
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """
        获取全部实体。

        Returns:
            实体列表
        """
        pass

    @abstractmethod
    def find_one(self, key: Any) -> T:
        """
        根据自然键获取实体。

        Args:
            key: 实体的自然键

        Returns:
            找到的实体

        Raises:
            EntityNotFoundException: 实体不存在
        """
        pass
