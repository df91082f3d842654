"""
Background execution of blocking lookups.

Tasks are plain zero-argument callables. The dispatcher does not retry,
cancel or time out anything; a running lookup finishes or fails on its
own request timeout.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional, TypeVar

from ..settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskDispatcher:
    """
    Runs callables on a pool of worker threads and hands back futures.
    """

    def __init__(self, max_workers: Optional[int] = None):
        self.max_workers = max_workers or settings.max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="geozone"
        )
        self.logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )

    def submit(self, task: Callable[[], T]) -> "Future[T]":
        """
        Schedule ``task`` on a worker thread.

        Args:
            task: Callable taking no arguments; it must own everything it uses

        Returns:
            Future resolving to the task's return value
        """
        self.logger.debug(f"Dispatching {getattr(task, '__name__', task)!r}")
        return self._executor.submit(task)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "TaskDispatcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(max_workers={self.max_workers})"


_default_dispatcher: Optional[TaskDispatcher] = None
_default_lock = threading.Lock()


def get_dispatcher() -> TaskDispatcher:
    """
    Return the process-wide dispatcher, creating it on first use.
    """
    global _default_dispatcher
    with _default_lock:
        if _default_dispatcher is None:
            _default_dispatcher = TaskDispatcher(settings.max_workers)
        return _default_dispatcher


def shutdown_dispatcher(wait: bool = True) -> None:
    """
    Shut down the process-wide dispatcher; a later lookup creates a new one.
    """
    global _default_dispatcher
    with _default_lock:
        dispatcher, _default_dispatcher = _default_dispatcher, None
    if dispatcher is not None:
        dispatcher.shutdown(wait=wait)
