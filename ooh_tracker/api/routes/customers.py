"""Customer directory endpoints."""

from typing import List

from fastapi import APIRouter

from ooh_tracker.api.dependencies import (
    AlertLedgerDep,
    CustomerRepositoryDep,
    JobReporterDep,
    JobRepositoryDep,
)
from ooh_tracker.api.schemas.directory import CustomerJobsResponse, CustomerResponse
from ooh_tracker.api.schemas.job import JobResponse
from ooh_tracker.domain.exceptions.not_found_error import NotFoundError

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=List[CustomerResponse])
async def list_customers(customer_repository: CustomerRepositoryDep):
    return [CustomerResponse.from_entity(c) for c in await customer_repository.list_all()]


@router.get("/{name}", response_model=CustomerResponse)
async def get_customer(name: str, customer_repository: CustomerRepositoryDep):
    """Look up a customer by exact name."""
    customer = await customer_repository.get_by_name(name)
    if customer is None:
        raise NotFoundError("Customer", name)
    return CustomerResponse.from_entity(customer)


@router.get("/{name}/jobs", response_model=CustomerJobsResponse)
async def get_customer_jobs(
    name: str,
    job_repository: JobRepositoryDep,
    reporter: JobReporterDep,
    alert_ledger: AlertLedgerDep,
):
    """A customer's jobs grouped by engineer, for the customer alerts portal.

    Works for names outside the directory too; jobs carry the customer as
    free text.
    """
    jobs = await job_repository.list_by_customer(name)
    grouped = reporter.group_by_engineer(jobs)

    return CustomerJobsResponse(
        customer=name,
        total=len(jobs),
        active_alerts=sum(len(alert_ledger.active_alerts(job)) for job in jobs),
        by_engineer={
            engineer: [JobResponse.from_entity(j) for j in engineer_jobs]
            for engineer, engineer_jobs in grouped.items()
        },
        unassigned=[JobResponse.from_entity(j) for j in jobs if not j.engineer],
    )
