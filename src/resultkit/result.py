"""Result type: Ok[T] | Error[E] for explicit success/failure values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from resultkit._config import get_config
from resultkit._logging import get_logger
from resultkit.option import Nothing, Some

if TYPE_CHECKING:
    from resultkit.option import Option

__all__ = [
    'Error',
    'Ok',
    'Result',
    'collect',
    'from_execution',
    'from_option',
]


class Ok[T](msgspec.Struct, frozen=True, gc=False, tag='ok', tag_field='kind'):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(2).map(lambda x: x * 2)
        Ok(value=4)
        >>> Ok(2).get_with_default(0)
        2
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        Narrows the result to Ok[T] for type checkers.
        """
        return True

    def is_error(self) -> TypeIs[Error[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_error(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Ok[U] | Error[E]]) -> Ok[U] | Error[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as bind or and_then. The Result returned by f is passed
        through as-is, never wrapped a second time.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def flat_map_error(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def get_with_default(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def to_option(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        return Some(self.value)

    def match[R](self, *, ok: Callable[[T], R], error: Callable[[Any], R]) -> R:  # noqa: ARG002
        """Dispatch to the ``ok`` handler with the contained value.

        Both handlers are required so every call site covers both variants.
        """
        return ok(self.value)

    def tap(self, f: Callable[[Ok[T]], object]) -> Ok[T]:
        """Call f with this result for its side effects, then return self."""
        f(self)
        return self

    def tap_ok(self, f: Callable[[T], object]) -> Ok[T]:
        """Call f with the contained value, then return self."""
        f(self.value)
        return self

    def tap_error(self, _f: Callable[[Any], object]) -> Ok[T]:
        """Return self without calling the function since this is Ok."""
        return self


class Error[E](msgspec.Struct, frozen=True, gc=False, tag='error', tag_field='kind'):
    """Failure variant of Result containing an error of type E.

    The error is opaque: any value can be carried, including exception
    objects captured by from_execution.

    Examples:
        >>> Error('boom').is_error()
        True
        >>> Error(2).map_error(lambda x: x * 2)
        Error(error=4)
        >>> Error(2).get_with_default(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Error."""
        return False

    def is_error(self) -> TypeIs[Error[E]]:
        """Return True since this is Error.

        Narrows the result to Error[E] for type checkers.
        """
        return True

    def map(self, _f: Callable[[Any], Any]) -> Error[E]:
        """Return self unchanged since this is Error."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Error[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Error containing the transformed error.
        """
        return Error(f(self.error))

    def flat_map(self, _f: Callable[[Any], Any]) -> Error[E]:
        """Return self unchanged since this is Error."""
        return self

    def flat_map_error[T, F](self, f: Callable[[E], Ok[T] | Error[F]]) -> Ok[T] | Error[F]:
        """Apply a recovery function that returns a Result to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def get_with_default[T](self, default: T) -> T:
        """Return the default value since this is Error."""
        return default

    def to_option(self) -> Option[Any]:
        """Convert to Option, returning Nothing. The error is discarded."""
        return Nothing

    def match[R](self, *, ok: Callable[[Any], R], error: Callable[[E], R]) -> R:  # noqa: ARG002
        """Dispatch to the ``error`` handler with the contained error."""
        return error(self.error)

    def tap(self, f: Callable[[Error[E]], object]) -> Error[E]:
        """Call f with this result for its side effects, then return self."""
        f(self)
        return self

    def tap_ok(self, _f: Callable[[Any], object]) -> Error[E]:
        """Return self without calling the function since this is Error."""
        return self

    def tap_error(self, f: Callable[[E], object]) -> Error[E]:
        """Call f with the contained error, then return self."""
        f(self.error)
        return self


type Result[T, E = Exception] = Ok[T] | Error[E]


def collect[T, E](results: Iterable[Ok[T] | Error[E]]) -> Ok[list[T]] | Error[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Error: it is returned as-is and the rest of
    the iterable is never consumed.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Error.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Error('fail'), Ok(3)])
        Error(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Error):
            return result
        values.append(result.value)
    return Ok(values)


def from_option[T, E](opt: Option[T], error_if_none: E) -> Ok[T] | Error[E]:
    """Convert an Option to a Result.

    Args:
        opt: The Option to convert.
        error_if_none: Error to carry when opt is Nothing.

    Returns:
        Ok(value) for Some(value), Error(error_if_none) for Nothing.
    """
    if isinstance(opt, Some):
        return Ok(opt.value)
    return Error(error_if_none)


def from_execution[T](
    fn: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
) -> Ok[T] | Error[Any]:
    """Call fn once and capture its outcome as a Result.

    The raised exception object is stored unchanged in the Error variant,
    traceback included. Exceptions not listed in ``exceptions`` propagate.

    Args:
        fn: Zero-argument callable to run.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Returns:
        Ok(fn()) on normal return, Error(exc) if fn raised.

    Examples:
        >>> from_execution(lambda: 42)
        Ok(value=42)
        >>> from_execution(lambda: 1 / 0)
        Error(error=ZeroDivisionError('division by zero'))
    """
    try:
        value = fn()
    except exceptions as exc:
        trace_fault('execution', exc)
        return Error(exc)
    return Ok(value)


def trace_fault(source: str, fault: BaseException) -> None:
    """Emit a fault_captured debug event when fault tracing is enabled."""
    if not get_config().trace_faults:
        return
    get_logger(__name__).debug(
        'fault_captured',
        source=source,
        fault_type=type(fault).__qualname__,
        fault=repr(fault),
    )
