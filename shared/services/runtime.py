"""Async helpers for running coroutines from synchronous code."""

import asyncio
import inspect
from typing import Any


def run_async(coro):
    """Run an async coroutine from synchronous code (the Streamlit script thread).

    Refuses to nest inside an already running loop.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop; safe to use asyncio.run directly
        return asyncio.run(coro)

    coro.close()
    raise RuntimeError("run_async() cannot be called from a running event loop")


async def maybe_await(callback, *args: Any) -> None:
    """Call a sync or async callback, awaiting it when needed."""
    if callback is None:
        return
    result = callback(*args)
    if inspect.isawaitable(result):
        await result
