"""
Job classification value objects.
"""

from enum import Enum


class JobType(str, Enum):
    """Kind of work logged."""

    MAINTENANCE = "Maintenance"
    REPAIR = "Repair"
    INSTALLATION = "Installation"
    EMERGENCY = "Emergency"
    INSPECTION = "Inspection"
    DRAFT = "Draft"
    OUT_OF_HOURS = "Out of Hours"
    CALL_OUT = "Call Out"


class JobCategory(str, Enum):
    """Trade the job falls under."""

    ELECTRICAL = "Electrical"
    MECHANICAL = "Mechanical"
    PLUMBING = "Plumbing"
    HVAC = "HVAC"
    GENERAL = "General"
    FIRE_SAFETY = "Fire Safety"
    SECURITY_SYSTEMS = "Security Systems"
    PAINTING = "Painting"
    FLOORING = "Flooring"
    ROOFING = "Roofing"


class Priority(str, Enum):
    """Job priority enumeration."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def is_critical(self) -> bool:
        return self == Priority.CRITICAL
