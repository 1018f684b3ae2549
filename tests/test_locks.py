"""Tests for the reader/writer lock."""

import threading
import time

from mcp_tools.db.locks import ReadWriteLock


class TestReadWriteLock:
    def test_readers_share_the_lock(self):
        lock = ReadWriteLock()
        lock.acquire_read()
        acquired = threading.Event()

        def reader():
            with lock.read_locked():
                acquired.set()

        thread = threading.Thread(target=reader)
        thread.start()
        assert acquired.wait(timeout=2)
        thread.join(timeout=2)
        lock.release_read()

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        lock.acquire_read()
        written = threading.Event()

        def writer():
            with lock.write_locked():
                written.set()

        thread = threading.Thread(target=writer)
        thread.start()
        assert not written.wait(timeout=0.1)

        lock.release_read()
        assert written.wait(timeout=2)
        thread.join(timeout=2)

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        lock.acquire_read()
        order: list[str] = []

        def writer():
            with lock.write_locked():
                order.append("writer")

        def reader():
            with lock.read_locked():
                order.append("reader")

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        # Let the writer register as waiting
        time.sleep(0.1)
        reader_thread = threading.Thread(target=reader)
        reader_thread.start()
        time.sleep(0.1)
        assert order == []

        lock.release_read()
        writer_thread.join(timeout=2)
        reader_thread.join(timeout=2)
        assert order == ["writer", "reader"]

    def test_context_managers_release_on_error(self):
        lock = ReadWriteLock()
        try:
            with lock.write_locked():
                raise ValueError("boom")
        except ValueError:
            pass

        # Would deadlock if the write lock were still held
        with lock.read_locked():
            pass
