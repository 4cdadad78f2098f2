"""
Demo customers, engineers and jobs for development.
"""

from dataclasses import replace
from datetime import datetime, timedelta

from ooh_tracker.application.interfaces.repositories import (
    CustomerRepositoryInterface,
    EngineerRepositoryInterface,
    JobRepositoryInterface,
)
from ooh_tracker.config.logging import get_logger
from ooh_tracker.domain.entities.customer import Customer
from ooh_tracker.domain.entities.engineer import Engineer
from ooh_tracker.domain.entities.job import Job, JobAlert
from ooh_tracker.domain.value_objects.contact import Contact
from ooh_tracker.domain.value_objects.engineer_status import (
    EngineerStatus,
    EngineerSyncStatus,
)
from ooh_tracker.domain.value_objects.job_classification import (
    JobCategory,
    JobType,
    Priority,
)
from ooh_tracker.domain.value_objects.job_status import JobStatus
from ooh_tracker.domain.value_objects.milestone import AlertType
from ooh_tracker.domain.value_objects.sla import SLAThresholds

logger = get_logger(__name__)

CUSTOMERS = [
    Customer(id=1, name="Harbour Retail Group", sites=["Quayside Store", "Distribution Centre"]),
    Customer(id=2, name="Northgate Housing", sites=["Elm Court", "Birch House", "Maple Rise"]),
    Customer(id=3, name="St. Anne's Medical Centre", sites=["Main Surgery"]),
]

ENGINEERS = [
    dict(name="Sam Patel", email="sam.patel@example.com", phone="07700 900101"),
    dict(
        name="Chris Morgan",
        email="chris.morgan@example.com",
        phone="07700 900102",
        status=EngineerStatus.ONSITE,
    ),
    dict(
        name="Alex Reid",
        email="alex.reid@example.com",
        phone="07700 900103",
        status=EngineerStatus.TRAVEL,
        sync_status=EngineerSyncStatus.PENDING,
    ),
]

DEFAULT_SLA = SLAThresholds(accept_sla=30, onsite_sla=90, completed_sla=180)


def build_demo_jobs(now: datetime) -> list:
    """Demo jobs logged relative to ``now``, without job numbers."""
    return [
        Job(
            customer="Harbour Retail Group",
            site="Quayside Store",
            engineer="Sam Patel",
            description="Shutter stuck open, store cannot be secured",
            job_type=JobType.CALL_OUT,
            category=JobCategory.SECURITY_SYSTEMS,
            priority=Priority.CRITICAL,
            status=JobStatus.GREEN,
            date_logged=now - timedelta(hours=5),
            date_accepted=now - timedelta(hours=4, minutes=50),
            date_on_site=now - timedelta(hours=4, minutes=5),
            date_completed=now - timedelta(hours=3),
            sla=DEFAULT_SLA,
            contact=Contact(name="Dana Hughes", number="07700 900201", relationship="Store Manager"),
            tags=["Emergency"],
        ),
        Job(
            customer="Northgate Housing",
            site="Elm Court",
            engineer="Chris Morgan",
            description="Communal boiler lockout, no heating or hot water",
            category=JobCategory.HVAC,
            priority=Priority.HIGH,
            status=JobStatus.AMBER,
            date_logged=now - timedelta(minutes=70),
            date_accepted=now - timedelta(minutes=60),
            date_on_site=now - timedelta(minutes=15),
            sla=DEFAULT_SLA,
            reporter=Contact(name="Tom Ellis", number="07700 900202", relationship="Resident"),
        ),
        Job(
            customer="Northgate Housing",
            site="Birch House",
            engineer="Alex Reid",
            description="Water ingress through flat roof above stairwell",
            category=JobCategory.ROOFING,
            priority=Priority.MEDIUM,
            status=JobStatus.RED,
            date_logged=now - timedelta(minutes=45),
            sla=DEFAULT_SLA,
            alerts=[
                JobAlert(
                    type=AlertType.ACCEPTED,
                    message=AlertType.ACCEPTED.default_message(),
                    timestamp=now - timedelta(minutes=15),
                )
            ],
        ),
        Job(
            customer="St. Anne's Medical Centre",
            site="Main Surgery",
            engineer="Sam Patel",
            description="Vaccine fridge alarm sounding, power circuit tripped",
            job_type=JobType.EMERGENCY,
            category=JobCategory.ELECTRICAL,
            priority=Priority.CRITICAL,
            status=JobStatus.AMBER,
            date_logged=now - timedelta(minutes=10),
            sla=SLAThresholds(accept_sla=15, onsite_sla=45, completed_sla=120),
            target_completion_time=120,
            tags=["Emergency", "Medical"],
        ),
    ]


async def seed_repositories(
    job_repo: JobRepositoryInterface,
    customer_repo: CustomerRepositoryInterface,
    engineer_repo: EngineerRepositoryInterface,
    now: datetime,
) -> int:
    """Load demo data into empty repositories. Returns the number of jobs added."""
    if await job_repo.list_all():
        logger.info("Job store already has data, skipping seed")
        return 0

    for customer in CUSTOMERS:
        await customer_repo.add(Customer(id=customer.id, name=customer.name, sites=customer.sites))
    for engineer in ENGINEERS:
        await engineer_repo.add(Engineer(**engineer))

    count = 0
    for job in build_demo_jobs(now):
        customer = await customer_repo.get_by_name(job.customer)
        engineer = await engineer_repo.get_by_name(job.engineer)
        await job_repo.add(
            replace(
                job,
                job_number=await job_repo.next_job_number(),
                customer_id=customer.id if customer else None,
                engineer_id=engineer.id if engineer else None,
            )
        )
        count += 1

    logger.info(
        "Demo data seeded",
        customers=len(CUSTOMERS),
        engineers=len(ENGINEERS),
        jobs=count,
    )
    return count
