"""Execution contexts for blocking persistence work.

Repositories never choose threads themselves; they hand blocking calls to an
injected ``DispatchersProvider`` and wait for the result.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DispatchersProvider(Protocol):
    """Runs blocking I/O work and returns its result to the caller."""

    def io(self, fn: Callable[..., T], /, *args: Any) -> T: ...


class ImmediateDispatchersProvider:
    """Runs work inline on the calling thread."""

    def io(self, fn: Callable[..., T], /, *args: Any) -> T:
        return fn(*args)

    def shutdown(self) -> None:
        pass


class ThreadPoolDispatchersProvider:
    """Runs work on a dedicated I/O thread pool.

    The caller blocks until the submitted call finishes; exceptions raised by
    the call are re-raised unchanged in the caller's thread.
    """

    def __init__(self, max_workers: int = 4) -> None:
        """Initialize the provider.

        Args:
            max_workers: Size of the I/O thread pool.
        """
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="finance-data-io"
        )

    def io(self, fn: Callable[..., T], /, *args: Any) -> T:
        return self._executor.submit(fn, *args).result()

    def shutdown(self) -> None:
        """Stop accepting work and wait for in-flight calls."""
        logger.debug("Shutting down I/O thread pool")
        self._executor.shutdown(wait=True)
