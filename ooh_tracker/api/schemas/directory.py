"""
Customer and engineer directory schemas.
"""

from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from ooh_tracker.domain.entities.customer import Customer
from ooh_tracker.domain.entities.engineer import Engineer
from ooh_tracker.domain.value_objects.engineer_status import (
    EngineerStatus,
    EngineerSyncStatus,
)

from .job import JobResponse


class CustomerResponse(BaseModel):
    id: int
    name: str
    sites: List[str]

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(**customer.to_dict())


class EngineerResponse(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str
    status: EngineerStatus
    status_label: str
    sync_status: EngineerSyncStatus
    avatar: Optional[str] = None

    @classmethod
    def from_entity(cls, engineer: Engineer) -> "EngineerResponse":
        return cls(
            id=engineer.id,
            name=engineer.name,
            email=engineer.email,
            phone=engineer.phone,
            status=engineer.status,
            status_label=engineer.status.display_name,
            sync_status=engineer.sync_status,
            avatar=engineer.avatar,
        )


class CustomerJobsResponse(BaseModel):
    """A customer's jobs grouped by the engineer assigned to them."""

    customer: str
    total: int
    active_alerts: int
    by_engineer: Dict[str, List[JobResponse]]
    unassigned: List[JobResponse]
