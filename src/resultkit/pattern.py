"""Match targets for structural pattern matching on Result.

Ok and Error are class patterns: each takes one positional sub-pattern
that is matched against the payload and can bind it.

Example:
    ```python
    from typing import assert_never

    from resultkit import pattern

    def describe(result: Result[int, str]) -> str:
        match result:
            case pattern.Ok(0):
                return 'zero'
            case pattern.Ok(int() as n):
                return f'got {n}'
            case pattern.Error(message):
                return f'failed: {message}'
            case _:
                assert_never(result)
    ```

External matchers that cannot use the match statement can read the
variant tag with tag_of() and the payload with payload_of().
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from resultkit.result import Error, Ok, Result

__all__ = ['VARIANTS', 'Error', 'Ok', 'payload_of', 'tag_of']

VARIANTS: MappingProxyType[str, type[Ok[Any]] | type[Error[Any]]] = MappingProxyType({
    Ok.__struct_config__.tag: Ok,
    Error.__struct_config__.tag: Error,
})
"""Variant tag -> variant class, for every variant of Result."""


def tag_of(result: Result[Any, Any]) -> str:
    """Return the variant tag of a Result: 'ok' or 'error'."""
    return result.__struct_config__.tag


def payload_of(result: Result[Any, Any]) -> Any:
    """Return the payload of a Result: the value for Ok, the error for Error."""
    return result.match(ok=lambda value: value, error=lambda error: error)
