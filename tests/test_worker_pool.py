"""Tests for the worker pool."""

import threading
import time

import pytest

from colour_ops.errors import WorkerPoolError
from colour_ops.worker_pool import (
    THREAD_NAME_PREFIX,
    PoolHandle,
    WorkerPool,
    feed_all,
    run_pool,
)


def pool_threads_alive():
    return [t for t in threading.enumerate() if t.name.startswith(THREAD_NAME_PREFIX)]


class TestWorkerPool:
    """Task delivery, shutdown and results."""

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            WorkerPool(0, lambda task: None)

    @pytest.mark.parametrize("workers", [1, 2, 4, 8])
    def test_every_task_processed_once(self, workers):
        seen = []
        lock = threading.Lock()

        def worker(task):
            with lock:
                seen.append(task)

        run_pool(workers, worker, feed_all(list(range(200))))
        assert sorted(seen) == list(range(200))

    def test_results_collected(self):
        results = run_pool(3, lambda x: x * x, feed_all(list(range(10))))
        assert sorted(results) == [x * x for x in range(10)]

    def test_none_results_not_collected(self):
        results = run_pool(2, lambda x: None if x % 2 else x, feed_all(list(range(6))))
        assert sorted(results) == [0, 2, 4]

    def test_none_task_is_a_real_task(self):
        seen = []
        lock = threading.Lock()

        def worker(task):
            with lock:
                seen.append(task)

        run_pool(2, worker, feed_all([None, None, 1]))
        assert len(seen) == 3

    def test_manager_return_value(self):
        def manager(handle: PoolHandle):
            handle.submit(1)
            handle.join()
            return "done"

        assert WorkerPool(2, lambda t: None).run(manager) == "done"

    def test_all_threads_joined_on_return(self):
        run_pool(4, lambda t: time.sleep(0.001), feed_all(list(range(20))))
        assert pool_threads_alive() == []

    def test_workers_use_several_threads(self):
        names = set()
        lock = threading.Lock()
        barrier = threading.Barrier(3, timeout=5)

        def worker(task):
            with lock:
                names.add(threading.current_thread().name)
            barrier.wait()

        run_pool(3, worker, feed_all([0, 1, 2]))
        assert len(names) == 3

    def test_manager_without_close_still_joins(self):
        seen = []

        def manager(handle):
            handle.submit("a")
            handle.submit("b")

        WorkerPool(2, seen.append).run(manager)
        assert sorted(seen) == ["a", "b"]
        assert pool_threads_alive() == []

    def test_close_is_idempotent_and_counts(self):
        def manager(handle):
            assert handle.workers == 3
            handle.submit(1)
            handle.close()
            handle.close()
            assert handle.closed
            assert handle.submitted == 1
            handle.join()

        WorkerPool(3, lambda t: None).run(manager)

    def test_submit_after_close(self):
        def manager(handle):
            handle.close()
            with pytest.raises(RuntimeError):
                handle.submit(1)

        WorkerPool(1, lambda t: None).run(manager)


class TestWorkerFailure:
    """Worker exceptions surface as one WorkerPoolError."""

    def test_failure_raises_pool_error(self):
        def worker(task):
            if task == 5:
                raise ZeroDivisionError("boom")

        with pytest.raises(WorkerPoolError) as excinfo:
            run_pool(3, worker, feed_all(list(range(10))))
        assert len(excinfo.value.failures) == 1
        assert isinstance(excinfo.value.failures[0], ZeroDivisionError)
        assert isinstance(excinfo.value, RuntimeError)
        assert pool_threads_alive() == []

    def test_every_worker_failing(self):
        def worker(task):
            raise ValueError(task)

        with pytest.raises(WorkerPoolError) as excinfo:
            run_pool(2, worker, feed_all(list(range(10))))
        assert len(excinfo.value.failures) == 2
        assert "2 worker(s) failed" in str(excinfo.value)

    def test_manager_exception_wins(self):
        def manager(handle):
            handle.submit(1)
            raise KeyError("manager")

        with pytest.raises(KeyError):
            WorkerPool(2, lambda t: None).run(manager)
        assert pool_threads_alive() == []
