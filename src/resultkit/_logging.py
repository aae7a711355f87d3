"""Logging for resultkit: structlog events delivered through stdlib logging.

Every logger handed out here wraps a stdlib ``logging.Logger``, so where
resultkit output ends up is decided by the host application's logging
setup. Nothing reaches stdout unless a handler sends it there.
configure_logging() installs a ProcessorFormatter on the root logger for
applications that want resultkit to render JSON or console logs itself.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'log_result',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Register a hook that receives a copy of every resultkit event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook. Unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _log_hooks.clear()


def _dispatch_to_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    # Snapshot: a hook may unregister itself or others while being called.
    for hook in tuple(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception:
            pass  # Don't let hook failures break logging
    return event_dict


def _pre_chain() -> list[Any]:
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _dispatch_to_hooks,
    ]


def _event_chain() -> list[Any]:
    import structlog

    return [
        *_pre_chain(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def get_logger(name: str = 'resultkit') -> Any:
    """Get a structlog BoundLogger backed by ``logging.getLogger(name)``.

    Events pass through the log hooks, then go to stdlib logging, which
    applies its own levels and handlers.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Render logs on stderr through structlog's ProcessorFormatter.

    Replaces the root logger's handlers. Plain stdlib records from other
    libraries get the same timestamp, level and logger fields as resultkit
    events.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: Emit JSON if True, colored console output otherwise.
    """
    import structlog

    structlog.configure(
        processors=_event_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def log_result(event: str, *, logger: Any = None) -> Callable[[Any], None]:
    """Build a ``tap`` observer that logs a Result.

    Ok is logged at info level with ``value``, Error at warning level with
    ``error``; both carry ``variant``.

    Example:
        ```python
        fetch_user(1).tap(log_result('user_fetched'))
        ```
    """

    def observe(result: Any) -> None:
        from resultkit.result import Ok

        log = logger if logger is not None else get_logger()
        if isinstance(result, Ok):
            log.info(event, variant='ok', value=repr(result.value))
        else:
            log.warning(event, variant='error', error=repr(result.error))

    return observe
