"""
Engineer status value objects.
"""

from enum import Enum


class EngineerStatus(str, Enum):
    """Current on-call status reported by the engineer's device."""

    ACCEPT = "accept"
    ONSITE = "onsite"
    TRAVEL = "travel"
    COMPLETED = "completed"
    REQUIRE_REVISIT = "require_revisit"

    @property
    def display_name(self) -> str:
        """Label used in the customer alerts portal."""
        return "On Call" if self == EngineerStatus.ACCEPT else "OOH"


class EngineerSyncStatus(str, Enum):
    """Consistency of the engineer record with the external job system."""

    SYNCED = "synced"
    PENDING = "pending"
    ERROR = "error"

    def needs_attention(self) -> bool:
        return self == EngineerSyncStatus.ERROR
