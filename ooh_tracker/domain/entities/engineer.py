"""
Engineer domain entity.
"""

from typing import Optional
from uuid import UUID, uuid4

from ooh_tracker.domain.exceptions.validation_error import RequiredFieldError
from ooh_tracker.domain.value_objects.engineer_status import (
    EngineerStatus,
    EngineerSyncStatus,
)


class Engineer:
    """Engineer entity representing an out-of-hours field engineer.

    Jobs refer to engineers by ``name``, so the name is the join key.
    """

    def __init__(
        self,
        name: str,
        email: str = "",
        phone: str = "",
        status: EngineerStatus = EngineerStatus.ACCEPT,
        sync_status: EngineerSyncStatus = EngineerSyncStatus.SYNCED,
        avatar: Optional[str] = None,
        id: Optional[UUID] = None,
    ):
        if not name or not name.strip():
            raise RequiredFieldError("name")
        self.id = id or uuid4()
        self.name = name
        self.email = email
        self.phone = phone
        self.status = EngineerStatus(status)
        self.sync_status = EngineerSyncStatus(sync_status)
        self.avatar = avatar

    @property
    def is_on_call(self) -> bool:
        return self.status == EngineerStatus.ACCEPT

    def update_status(self, status: EngineerStatus) -> None:
        """Record the engineer's latest on-call status."""
        self.status = EngineerStatus(status)

    def to_dict(self) -> dict:
        """Convert engineer to dictionary."""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "status": self.status.value,
            "sync_status": self.sync_status.value,
            "avatar": self.avatar,
        }
