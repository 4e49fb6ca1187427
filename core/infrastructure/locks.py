"""
锁模块。
提供进程内共享状态使用的读写锁。
"""
import threading
from contextlib import contextmanager
from typing import Generator


class ReadWriteLock:
    """
    读写锁。
    允许多个读者同时持有，写者独占；有写者等待时新的读者会让步，避免写者饥饿。
    不可重入。
    """

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Generator[None, None, None]:
        """
        获取共享（读）锁。

        Yields:
            None
        """
        with self._condition:
            while self._writer or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write_locked(self) -> Generator[None, None, None]:
        """
        获取独占（写）锁。

        Yields:
            None
        """
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._condition:
                self._writer = False
                self._condition.notify_all()
