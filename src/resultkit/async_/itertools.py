"""Async iteration utilities for Result types."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable

from resultkit.result import Result, collect

__all__ = ['async_collect']


async def async_collect[T, E](
    awaitables: Iterable[Awaitable[Result[T, E]]],
) -> Result[list[T], E]:
    """Collect awaitables of Results into a Result of list.

    Runs all awaitables concurrently using asyncio.gather, then reduces the
    results fail-fast. The Error returned is the first one in the order of
    the original iterable, not the first to complete.

    Args:
        awaitables: An iterable of awaitables that produce Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Error.

    Examples:
        >>> async def get_value(n: int) -> Result[int, str]:
        ...     return Ok(n * 2)
        >>>
        >>> async def example():
        ...     results = await async_collect([get_value(1), get_value(2)])
        ...     assert results == Ok([2, 4])
    """
    results = await asyncio.gather(*awaitables)
    return collect(results)
