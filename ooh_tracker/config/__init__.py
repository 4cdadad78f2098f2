"""
Configuration package.
"""

from .logging import bind_log_context, clear_log_context, configure_logging, get_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    # Logging
    "bind_log_context",
    "clear_log_context",
    "configure_logging",
    "get_logger",
]
