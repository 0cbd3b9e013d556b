"""Deadline guard for slow asynchronous lookups."""
from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar

from loguru import logger

from core.exceptions import OperationTimeoutError

T = TypeVar('T')


def _discard_outcome(task: asyncio.Future) -> None:
    """Consume the late result of an operation that lost the race."""
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug(f"[timeout] discarded late failure: {error}")


async def with_timeout(operation: Awaitable[T], milliseconds: float, label: str) -> T:
    """Await ``operation`` but give up after ``milliseconds``.

    If the operation settles first its value is returned, or its own
    exception re-raised unchanged. If the deadline passes first,
    OperationTimeoutError("<label> timed out") is raised. The operation is
    not cancelled; it keeps running and its outcome is dropped.
    """
    task = asyncio.ensure_future(operation)
    # asyncio.wait clears its timer on every exit path
    done, _ = await asyncio.wait({task}, timeout=max(milliseconds, 0) / 1000)
    if task in done:
        return task.result()

    task.add_done_callback(_discard_outcome)
    logger.warning(f"[timeout] {label} did not finish within {milliseconds} ms")
    raise OperationTimeoutError(label, milliseconds)
