#!/usr/bin/env python3
"""
Load the demo data into fresh in-memory repositories and print it.

Useful to preview what the API serves when SEED_DEMO_DATA is enabled.
"""

import asyncio
import json
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from ooh_tracker.application.services.reporting import JobReporter
from ooh_tracker.config.logging import configure_logging, get_logger
from ooh_tracker.config.settings import settings
from ooh_tracker.infrastructure.repositories import (
    InMemoryCustomerRepository,
    InMemoryEngineerRepository,
    InMemoryJobRepository,
)
from ooh_tracker.infrastructure.seed_data import seed_repositories

logger = get_logger(__name__)


async def preview_seed_data():
    """Seed repositories and dump the jobs plus today's shift report."""
    job_repo = InMemoryJobRepository()
    customer_repo = InMemoryCustomerRepository()
    engineer_repo = InMemoryEngineerRepository()
    now = datetime.now(timezone.utc)

    count = await seed_repositories(job_repo, customer_repo, engineer_repo, now=now)
    logger.info("Seeded demo data", jobs=count)

    jobs = await job_repo.list_all()
    print(json.dumps([job.to_dict() for job in jobs], indent=2))

    reporter = JobReporter(ZoneInfo(settings.TIMEZONE))
    report = reporter.shift_report(jobs, reporter.local_date(now))
    print(report.narrative)


if __name__ == "__main__":
    configure_logging()
    asyncio.run(preview_seed_data())
