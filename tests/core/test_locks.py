"""Tests for ReadWriteLock."""

import threading

from core.infrastructure import ReadWriteLock


class TestReadWriteLock:

    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        barrier = threading.Barrier(2, timeout=2.0)
        results = []

        def reader():
            with lock.read_locked():
                try:
                    barrier.wait()
                    results.append(True)
                except threading.BrokenBarrierError:
                    results.append(False)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(3.0)
        assert results == [True, True]

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        with lock.write_locked():
            thread = threading.Thread(target=reader)
            thread.start()
            assert not acquired.wait(0.2)

        assert acquired.wait(2.0)
        thread.join(2.0)

    def test_readers_exclude_writer(self):
        lock = ReadWriteLock()
        acquired = threading.Event()

        def writer():
            with lock.write_locked():
                acquired.set()

        with lock.read_locked():
            thread = threading.Thread(target=writer)
            thread.start()
            assert not acquired.wait(0.2)

        assert acquired.wait(2.0)
        thread.join(2.0)

    def test_lock_is_released_on_exception(self):
        lock = ReadWriteLock()
        try:
            with lock.write_locked():
                raise ValueError("boom")
        except ValueError:
            pass

        with lock.write_locked():
            pass
        with lock.read_locked():
            pass
