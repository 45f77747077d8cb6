"""A shared job runner with a bounded queue and per-label timing reports."""

from __future__ import annotations

import os
import queue
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

_GLOBAL_QUEUE_CAPACITY = 4096


@dataclass(frozen=True)
class JobReport:
    label: str
    runs: int
    avg_ms: float
    max_ms: float
    total_ms: float


@dataclass
class _RawStats:
    runs: int = 0
    total_ns: int = 0
    max_ns: int = 0

    def report(self, label: str) -> JobReport:
        total_ms = self.total_ns / 1e6
        avg_ms = total_ms / self.runs if self.runs else 0.0
        return JobReport(label, self.runs, avg_ms, self.max_ns / 1e6, total_ms)


_stats: dict[str, _RawStats] = {}
_stats_lock = threading.Lock()


def _record_duration(label: str, ns: int) -> None:
    with _stats_lock:
        entry = _stats.setdefault(label, _RawStats())
        entry.runs += 1
        entry.total_ns += ns
        entry.max_ns = max(entry.max_ns, ns)


def get_job_report(label: str) -> Optional[JobReport]:
    with _stats_lock:
        entry = _stats.get(label)
        return entry.report(label) if entry is not None else None


def get_all_job_reports() -> list[JobReport]:
    with _stats_lock:
        return [entry.report(label) for label, entry in _stats.items()]


def reset_job_report(label: str) -> None:
    with _stats_lock:
        _stats.pop(label, None)


def reset_all_job_reports() -> None:
    with _stats_lock:
        _stats.clear()


def _auto_threads() -> int:
    return max(os.cpu_count() or 1, 1)


_STOP = object()


class Threader:
    """Runs submitted callables on a worker pool, fed from a bounded FIFO queue."""

    def __init__(self, queue_cap: int = _GLOBAL_QUEUE_CAPACITY, workers: Optional[int] = None):
        self._queue: queue.Queue[Any] = queue.Queue(maxsize=queue_cap)
        self._pool = ThreadPoolExecutor(max_workers=workers or _auto_threads())
        self._stopped = False
        self._state_lock = threading.Lock()
        self._dispatcher = threading.Thread(
            target=self._dispatch, name="threader-dispatcher", daemon=True
        )
        self._dispatcher.start()

    def _dispatch(self) -> None:
        while True:
            job = self._queue.get()
            if job is _STOP:
                break
            try:
                self._pool.submit(job)
            except RuntimeError:
                break

    def submit(self, fn: Callable[[], Any]) -> None:
        """Queue a job; blocks while the queue is full."""
        with self._state_lock:
            if self._stopped:
                raise RuntimeError("dispatcher stopped")
        self._queue.put(fn)

    def submit_result(self, fn: Callable[[], T]) -> Future[T]:
        """Queue a job and return a future for its result."""
        future: Future[T] = Future()

        def run() -> None:
            try:
                future.set_result(fn())
            except BaseException as exc:
                future.set_exception(exc)

        self.submit(run)
        return future

    def submit_profiled_do(self, label: str, fn: Callable[[], Any]) -> None:
        """Queue a job and record its run time under ``label``."""

        def run() -> None:
            start = time.perf_counter_ns()
            fn()
            _record_duration(label, time.perf_counter_ns() - start)

        self.submit(run)

    def submit_profiled_result(self, label: str, fn: Callable[[], T]) -> Future[T]:
        """Queue a timed job and return a future for its result."""
        future: Future[T] = Future()

        def run() -> None:
            start = time.perf_counter_ns()
            try:
                result = fn()
            except BaseException as exc:
                future.set_exception(exc)
                return
            _record_duration(label, time.perf_counter_ns() - start)
            future.set_result(result)

        self.submit(run)
        return future

    def shutdown(self) -> None:
        """Finish queued jobs and stop accepting new ones."""
        with self._state_lock:
            if self._stopped:
                return
            self._stopped = True
        self._queue.put(_STOP)
        self._dispatcher.join()
        self._pool.shutdown(wait=True)

    def __enter__(self) -> Threader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


_global: Optional[Threader] = None
_global_lock = threading.Lock()


def global_threader() -> Threader:
    """The process-wide threader, created on first use."""
    global _global
    with _global_lock:
        if _global is None:
            _global = Threader(_GLOBAL_QUEUE_CAPACITY)
        return _global


def job(label: str, fn: Callable[[], T]) -> Future[T]:
    return global_threader().submit_profiled_result(label, fn)


def job_do(label: str, fn: Callable[[], Any]) -> None:
    global_threader().submit_profiled_do(label, fn)