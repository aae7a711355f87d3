"""AsyncResult type and the awaitable adapter.

AsyncResult wraps an Awaitable[Result[T, E]] and provides async-aware
transformation methods that compose cleanly in async contexts.
from_awaitable turns any awaitable that may raise into an AsyncResult
that never does.

Example:
    ```python
    async def fetch_user(id: int) -> User:
        ...

    result = await (
        from_awaitable(fetch_user(1))
        .amap(format_response)
        .amap_error(str)
    )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import TYPE_CHECKING, Any

import anyio

from resultkit.option import Nothing, Some
from resultkit.result import Error, Ok, Result, trace_fault

if TYPE_CHECKING:
    from resultkit.option import Option

__all__ = ['AsyncResult', 'from_awaitable']


class AsyncResult[T, E]:
    """Async-aware Result wrapper for composing async Result operations.

    Methods return new AsyncResult instances, building up a chain of
    operations that only runs when awaited.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Wrap a Task or Future for multi-await
        scenarios.

    Example:
        ```python
        async def main():
            result = await AsyncResult.from_ok(21).amap(lambda x: x * 2)
            assert result == Ok(42)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T, E]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, E].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._awaitable.__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Ok(value)."""

        async def _ok() -> Result[T, E]:
            return Ok(value)

        return cls(_ok())

    @classmethod
    def from_error(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult containing Error(error)."""

        async def _error() -> Result[T, E]:
            return Error(error)

        return cls(_error())

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult from a synchronous Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def amap[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value.

        Args:
            f: Sync function to apply to the Ok value.

        Returns:
            New AsyncResult with the transformed value.
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            return result.map(f)

        return AsyncResult(_mapped())

    def amap_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value.

        Args:
            f: Async function to apply to the Ok value.

        Returns:
            New AsyncResult with the transformed value.
        """

        async def _mapped() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Ok(await f(result.value))
            return result

        return AsyncResult(_mapped())

    def amap_error[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a sync function to the Error value."""

        async def _mapped() -> Result[T, F]:
            result = await self._awaitable
            return result.map_error(f)

        return AsyncResult(_mapped())

    def aflat_map[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain with a sync function that returns a Result.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Error('not positive')

            async def example():
                result = await AsyncResult.from_ok(5).aflat_map(validate)
                assert result == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            return result.flat_map(f)

        return AsyncResult(_chained())

    def aflat_map_async[U](self, f: Callable[[T], Awaitable[Result[U, E]]]) -> AsyncResult[U, E]:
        """Chain with an async function that returns a Result."""

        async def _chained() -> Result[U, E]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return await f(result.value)
            return result

        return AsyncResult(_chained())

    def aflat_map_error[F](self, f: Callable[[E], Result[T, F]]) -> AsyncResult[T, F]:
        """Recover from an Error with a sync function returning a Result."""

        async def _recovered() -> Result[T, F]:
            result = await self._awaitable
            return result.flat_map_error(f)

        return AsyncResult(_recovered())

    def atap(self, f: Callable[[Result[T, E]], object]) -> AsyncResult[T, E]:
        """Call f with the resolved Result for its side effects."""

        async def _tapped() -> Result[T, E]:
            result = await self._awaitable
            return result.tap(f)

        return AsyncResult(_tapped())

    def aget_with_default(self, default: T) -> Coroutine[Any, Any, T]:
        """Resolve to the Ok value, or to default for Error."""

        async def _get() -> T:
            result = await self._awaitable
            return result.get_with_default(default)

        return _get()

    def ato_option(self) -> Coroutine[Any, Any, Option[T]]:
        """Resolve to Some(value) for Ok, Nothing for Error."""

        async def _option() -> Option[T]:
            result = await self._awaitable
            if isinstance(result, Ok):
                return Some(result.value)
            return Nothing

        return _option()

    def amatch[R](self, *, ok: Callable[[T], R], error: Callable[[E], R]) -> Coroutine[Any, Any, R]:
        """Resolve the Result and dispatch to exactly one handler."""

        async def _match() -> R:
            result = await self._awaitable
            return result.match(ok=ok, error=error)

        return _match()

    def azip[U](self, other: AsyncResult[U, E]) -> AsyncResult[tuple[T, U], E]:
        """Combine two AsyncResults into a tuple.

        Runs both awaitables concurrently. If both are Ok, returns
        Ok((self.value, other.value)). If either is Error, returns the
        first Error by position: self first, then other.

        Args:
            other: Another AsyncResult to combine with.

        Returns:
            AsyncResult containing the tuple or first error.
        """

        async def _zipped() -> Result[tuple[T, U], E]:
            result1: Result[T, E] | None = None
            result2: Result[U, E] | None = None

            async with anyio.create_task_group() as tg:

                async def run_self() -> None:
                    nonlocal result1
                    result1 = await self._awaitable

                async def run_other() -> None:
                    nonlocal result2
                    result2 = await other._awaitable

                tg.start_soon(run_self)
                tg.start_soon(run_other)

            assert result1 is not None
            assert result2 is not None

            if isinstance(result1, Error):
                return result1
            if isinstance(result2, Error):
                return result2
            return Ok((result1.value, result2.value))

        return AsyncResult(_zipped())

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'


def from_awaitable[T](
    awaitable: Awaitable[T],
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> AsyncResult[T, Any]:
    """Adapt an awaitable that may raise into an AsyncResult.

    The source is awaited exactly once, when the AsyncResult is awaited.
    It resolves to Ok(value) on completion or Error(exc) if the source
    raised one of ``exceptions``; the exception object is stored unchanged.
    CancelledError is a BaseException and propagates with the default
    ``exceptions``.

    Args:
        awaitable: Coroutine, Task, Future or any other awaitable.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Returns:
        AsyncResult resolving to Result[T, Exception].

    Raises:
        TypeError: If awaitable is not awaitable.

    Example:
        ```python
        async def example():
            result = await from_awaitable(asyncio.sleep(0, result=42))
            assert result == Ok(42)
        ```
    """
    if not inspect.isawaitable(awaitable):
        msg = f'from_awaitable() needs an awaitable, got {type(awaitable).__name__}'
        raise TypeError(msg)

    async def _captured() -> Result[T, Any]:
        try:
            value = await awaitable
        except exceptions as exc:
            trace_fault('awaitable', exc)
            return Error(exc)
        return Ok(value)

    return AsyncResult(_captured())
