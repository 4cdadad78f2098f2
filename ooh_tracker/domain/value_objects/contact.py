"""
Contact value object.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """Site contact or job reporter."""

    name: str = ""
    number: str = ""
    email: str = ""
    relationship: str = ""

    @property
    def is_blank(self) -> bool:
        return not any((self.name, self.number, self.email, self.relationship))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "number": self.number,
            "email": self.email,
            "relationship": self.relationship,
        }
