"""
Bounded fan-out over asyncio.

`gather_bounded` starts one task per item, lets at most `max_concurrency`
of them run at the same time, and waits for all of them before returning.
Every outcome is collected (collect-all-then-decide): a failing task does
not cancel its siblings, and the caller receives results and exceptions
side by side, in input order.
"""

import asyncio
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar, Union

T = TypeVar("T")
R = TypeVar("R")


async def gather_bounded(
    items: Sequence[T],
    worker: Callable[[T], Awaitable[R]],
    max_concurrency: Optional[int] = None,
) -> List[Union[R, BaseException]]:
    """
    Run `worker` over `items` concurrently and collect every outcome.

    Args:
        items: Inputs, one task each
        worker: Coroutine function applied to each item
        max_concurrency: Upper bound on tasks in flight. None means
            len(items), i.e. all at once.

    Returns:
        One entry per item, in input order: the worker's return value,
        or the exception it raised.

    Raises:
        ValueError: If max_concurrency is smaller than 1
    """
    if not items:
        return []

    limit = len(items) if max_concurrency is None else max_concurrency
    if limit < 1:
        raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")

    semaphore = asyncio.Semaphore(limit)

    async def _run(item: T) -> R:
        async with semaphore:
            return await worker(item)

    return await asyncio.gather(
        *(_run(item) for item in items),
        return_exceptions=True,
    )


def first_failure(outcomes: Sequence[Union[R, BaseException]]) -> Optional[BaseException]:
    """Return the first exception among gathered outcomes, or None."""
    for outcome in outcomes:
        if isinstance(outcome, BaseException):
            return outcome
    return None
