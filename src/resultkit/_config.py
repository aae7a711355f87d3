"""Library configuration: ResultConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from resultkit._logging import configure_logging

__all__ = [
    'ResultConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class ResultConfig:
    """Configuration for resultkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or colored console output (False).
        trace_faults: Log a fault_captured event whenever from_execution or
            from_awaitable captures an exception.
    """

    log_level: str | None = None
    json_output: bool = True
    trace_faults: bool = False


_config: ResultConfig = ResultConfig()


def _detect_log_level() -> str | None:
    """Read the log level from RESULTKIT_LOG_LEVEL, if set."""
    level = os.environ.get('RESULTKIT_LOG_LEVEL', '').strip()
    return level or None


def _detect_trace_faults() -> bool:
    """Read fault tracing from RESULTKIT_TRACE_FAULTS."""
    env_value = os.environ.get('RESULTKIT_TRACE_FAULTS', '').strip().lower()
    if env_value and env_value not in (*_TRUTHY, '0', 'false', 'no', 'off'):
        logging.warning("Unknown RESULTKIT_TRACE_FAULTS value '%s', tracing disabled", env_value)
    return env_value in _TRUTHY


def init(
    log_level: str | None = None,
    *,
    json_output: bool = True,
    trace_faults: bool | None = None,
) -> ResultConfig:
    """Initialize resultkit with the specified configuration.

    Unset values are read from the environment (RESULTKIT_LOG_LEVEL,
    RESULTKIT_TRACE_FAULTS).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_output: Render logs as JSON when a level is configured.
        trace_faults: Log captured faults. Read from the environment if None.

    Returns:
        The ResultConfig that was set.

    Raises:
        ValueError: If log_level is not a known logging level.

    Example:
        ```python
        from resultkit import init

        init(log_level='DEBUG', trace_faults=True)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    if resolved_level is not None:
        resolved_level = resolved_level.upper()
        if resolved_level not in _LEVELS:
            msg = f'Unknown log level: {resolved_level!r}'
            raise ValueError(msg)

    resolved_trace = trace_faults if trace_faults is not None else _detect_trace_faults()

    _config = ResultConfig(
        log_level=resolved_level,
        json_output=json_output,
        trace_faults=resolved_trace,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_output)

    return _config


def get_config() -> ResultConfig:
    """Get the current configuration.

    Returns the defaults until init() is called.
    """
    return _config
