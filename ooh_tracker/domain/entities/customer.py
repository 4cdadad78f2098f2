"""Customer domain entity."""

from dataclasses import dataclass, field
from typing import FrozenSet

from ooh_tracker.domain.exceptions.validation_error import RequiredFieldError


@dataclass
class Customer:
    """Customer and the sites it has under contract."""

    id: int
    name: str
    sites: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Validate customer data."""
        if not self.name or not self.name.strip():
            raise RequiredFieldError("name")
        # Site names are a set: duplicates collapse and order is irrelevant
        self.sites = frozenset(self.sites)

    def has_site(self, site: str) -> bool:
        """Check if the site belongs to this customer (exact match)."""
        return site in self.sites

    def add_site(self, site: str) -> None:
        """Register another site for the customer."""
        if not site or not site.strip():
            raise RequiredFieldError("site")
        self.sites = self.sites | {site}

    def to_dict(self) -> dict:
        """Convert customer to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "sites": sorted(self.sites),
        }
