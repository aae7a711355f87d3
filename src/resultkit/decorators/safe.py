"""Decorators that route every call through from_execution / from_awaitable."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from resultkit.async_.result import from_awaitable
from resultkit.result import Error, Ok, from_execution

__all__ = ['safe', 'safe_async']

type Captured = tuple[type[BaseException], ...]


@overload
def safe[**P, T](func: Callable[P, T], /) -> Callable[P, Ok[T] | Error[Exception]]: ...


@overload
def safe[**P, T](
    *, exceptions: Captured
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Error[BaseException]]]: ...


def safe(func: Callable[..., Any] | None = None, /, *, exceptions: Captured = (Exception,)) -> Any:
    """Make a function return a Result instead of raising.

    ``@safe`` and ``@safe(exceptions=...)`` are both accepted. Each call of
    the decorated function is one from_execution call: the return value
    becomes Ok, a raised exception listed in ``exceptions`` becomes Error
    holding that same exception object, anything else propagates.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse_port(text: str) -> int:
            return int(text)

        parse_port('8080')  # Ok(value=8080)
        parse_port('http')  # Error(error=ValueError(...))
        ```
    """

    @wrapt.decorator
    def capture(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return from_execution(lambda: wrapped(*args, **kwargs), exceptions=exceptions)

    return capture if func is None else capture(func)


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]], /
) -> Callable[P, Awaitable[Ok[T] | Error[Exception]]]: ...


@overload
def safe_async[**P, T](
    *, exceptions: Captured
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Error[BaseException]]]]: ...


def safe_async(func: Callable[..., Any] | None = None, /, *, exceptions: Captured = (Exception,)) -> Any:
    """Coroutine-function counterpart of safe, built on from_awaitable.

    The call itself happens inside the captured coroutine, so an exception
    raised before the first ``await`` is captured too. CancelledError is
    never captured with the default ``exceptions``.
    """

    @wrapt.decorator
    async def capture(
        wrapped: Callable[..., Awaitable[Any]], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> Any:
        async def call() -> Any:
            return await wrapped(*args, **kwargs)

        return await from_awaitable(call(), exceptions=exceptions)

    return capture if func is None else capture(func)
