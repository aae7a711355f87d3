"""resultkit: Result and Option types for Python 3.13+.

Flat imports (preferred):
    from resultkit import Result, Ok, Error, Option, Some, Nothing
    from resultkit import collect, from_execution, from_option, from_awaitable

Submodule imports (for organization):
    from resultkit.result import Ok, Error, Result
    from resultkit.option import Some, Nothing, Option
    from resultkit.decorators import safe, safe_async
    from resultkit import pattern
"""

from resultkit import pattern

# Configuration and logging
from resultkit._config import ResultConfig, get_config, init
from resultkit._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    log_result,
    remove_log_hook,
)

# Async
from resultkit.async_ import AsyncResult, async_collect, from_awaitable

# Codec
from resultkit.codec import ResultCodec

# Decorators
from resultkit.decorators import safe, safe_async
from resultkit.option import Nothing, NothingType, Option, Some
from resultkit.result import (
    Error,
    Ok,
    Result,
    collect,
    from_execution,
    from_option,
)

__all__ = [
    'AsyncResult',
    'Error',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'ResultCodec',
    'ResultConfig',
    'Some',
    'add_log_hook',
    'async_collect',
    'clear_log_hooks',
    'collect',
    'configure_logging',
    'from_awaitable',
    'from_execution',
    'from_option',
    'get_config',
    'get_logger',
    'init',
    'log_result',
    'pattern',
    'remove_log_hook',
    'safe',
    'safe_async',
]
