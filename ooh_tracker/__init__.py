"""
Out of Hours Job Tracker.

Tracks out-of-hours service jobs through acceptance, arrival on site and
completion, raising alerts when SLA windows are breached.
"""

__version__ = "0.1.0"
__description__ = "Out of Hours Job Tracker"

from .api import create_app
from .config import settings

__all__ = [
    "create_app",
    "settings",
]
