# colour_ops/worker_pool.py
from __future__ import annotations

"""
Fixed-size worker pool with a manager routine.

N long-lived workers share one task queue and one result queue. The manager
routine receives a PoolHandle, feeds tasks, closes the pool (one stop sentinel
per worker, queued after every real task) and joins the workers.

Guarantees:
  - each task is taken off the queue by exactly one worker
  - a worker only stops on a stop sentinel, never on an empty queue
  - every worker thread is joined before run() returns or raises
  - any worker exception is surfaced as one WorkerPoolError
"""

import queue
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Generic, List, Optional, TypeVar

from .errors import WorkerPoolError

T = TypeVar("T")
R = TypeVar("R")
M = TypeVar("M")

THREAD_NAME_PREFIX = "colour_ops-worker"


class _Stop:
    """Stop sentinel type; distinct from any task value, None included."""

    def __repr__(self) -> str:
        return "<STOP>"


_STOP = _Stop()


class PoolHandle(Generic[T, R]):
    """Manager-side view of a running pool."""

    def __init__(
        self,
        tasks: "queue.Queue[object]",
        results: "queue.Queue[R]",
        futures: List[Future],
    ):
        self._tasks = tasks
        self._results = results
        self._futures = futures
        self._closed = False
        self.submitted = 0

    @property
    def workers(self) -> int:
        return len(self._futures)

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, task: T) -> None:
        """Queue one task. Not allowed after close()."""
        if self._closed:
            raise RuntimeError("submit() after close()")
        self._tasks.put(task)
        self.submitted += 1

    def close(self) -> None:
        """Queue one stop sentinel per worker. Idempotent."""
        if self._closed:
            return
        self._closed = True
        for _ in self._futures:
            self._tasks.put(_STOP)

    def join(self) -> None:
        """
        Close if needed, wait for every worker, then raise WorkerPoolError
        if any of them failed.
        """
        self.close()
        wait(self._futures)
        failures = [f.exception() for f in self._futures]
        failures = [e for e in failures if e is not None]
        if failures:
            raise WorkerPoolError(failures)

    def results(self) -> List[R]:
        """Drain whatever the workers have put on the result queue so far."""
        out: List[R] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except queue.Empty:
                return out


class WorkerPool(Generic[T, R]):
    """
    Pool of `workers` threads applying worker_fn to each task.

    Non-None return values of worker_fn go to the result queue. An exception
    in worker_fn ends that worker; the failure is reported when joining.
    """

    def __init__(self, workers: int, worker_fn: Callable[[T], Optional[R]]):
        if int(workers) < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.workers = int(workers)
        self.worker_fn = worker_fn

    def _worker_loop(
        self, tasks: "queue.Queue[object]", results: "queue.Queue[R]"
    ) -> int:
        done = 0
        while True:
            task = tasks.get()
            if task is _STOP:
                return done
            result = self.worker_fn(task)  # type: ignore[arg-type]
            if result is not None:
                results.put(result)
            done += 1

    def run(self, manager_fn: Callable[[PoolHandle[T, R]], M]) -> M:
        """
        Start the workers, run manager_fn(handle) and return its value.

        The pool is closed and joined on the way out whatever the manager did;
        if the manager raised, its exception wins.
        """
        tasks: "queue.Queue[object]" = queue.Queue()
        results: "queue.Queue[R]" = queue.Queue()
        with ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix=THREAD_NAME_PREFIX
        ) as ex:
            futures = [
                ex.submit(self._worker_loop, tasks, results)
                for _ in range(self.workers)
            ]
            handle: PoolHandle[T, R] = PoolHandle(tasks, results, futures)
            try:
                outcome = manager_fn(handle)
            finally:
                handle.close()
            handle.join()
        return outcome


def run_pool(
    workers: int,
    worker_fn: Callable[[T], Optional[R]],
    manager_fn: Callable[[PoolHandle[T, R]], M],
) -> M:
    """Convenience wrapper: WorkerPool(workers, worker_fn).run(manager_fn)."""
    return WorkerPool(workers, worker_fn).run(manager_fn)


def feed_all(tasks: List[T]) -> Callable[[PoolHandle[T, R]], List[R]]:
    """Manager that submits every task, closes, joins and returns the results."""

    def manager(handle: PoolHandle[T, R]) -> List[R]:
        for task in tasks:
            handle.submit(task)
        handle.close()
        handle.join()
        return handle.results()

    return manager


__all__ = [
    "PoolHandle",
    "WorkerPool",
    "run_pool",
    "feed_all",
    "THREAD_NAME_PREFIX",
]
