"""
Logging package for ``gedcomx_converter``.

Use ``get_logger(__name__)`` in modules to inherit shared handlers and write to a
module-specific log file.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    set_debug,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_debug",
]
