"""Running blocking callables in a background thread from coroutines."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, TypeVar

__all__ = ["async_call"]

T = TypeVar("T")


async def async_call(fn: Callable[..., T], *args: Any) -> T:
    """Run ``fn(*args)`` on a worker thread and return its result.

    Nothing runs until the coroutine is awaited; an exception raised by
    ``fn`` is re-raised in the awaiting coroutine.
    """
    return await asyncio.to_thread(fn, *args)