"""Async utilities: AsyncResult, from_awaitable and async_collect.

Examples:
    >>> from resultkit.async_ import AsyncResult, async_collect, from_awaitable
    >>>
    >>> async def main():
    ...     # Capture a raising coroutine
    ...     result = await from_awaitable(fetch(1)).amap(lambda d: d['id'])
    ...
    ...     # Collect multiple async results
    ...     results = await async_collect([lookup(1), lookup(2)])
"""

from resultkit.async_.itertools import async_collect
from resultkit.async_.result import AsyncResult, from_awaitable

__all__ = [
    'AsyncResult',
    'async_collect',
    'from_awaitable',
]
