"""Business logic service for job applications.

This module provides the JobService class which handles:
- Input validation (blank fields, malformed links, unknown statuses)
- Normalization (trimming, blank search text treated as absent)
- Translation of missing records into NotFoundError
"""

from __future__ import annotations

import logging

from job_tracker.jobs.errors import BadInputError, NotFoundError
from job_tracker.jobs.links import normalize_link
from job_tracker.jobs.models import JobRecord, JobStatus, StatusCount
from job_tracker.jobs.repository import JobRepository

logger = logging.getLogger(__name__)


def parse_status(status: JobStatus | str) -> JobStatus:
    """Coerce a status value, rejecting anything outside the enumeration.

    Raises:
        BadInputError: If the value is not a known status.
    """
    if isinstance(status, JobStatus):
        return status
    try:
        return JobStatus(status)
    except ValueError:
        raise BadInputError(f"invalid status: {status!r}") from None


def _require_id(job_id: str) -> str:
    trimmed = (job_id or "").strip()
    if not trimmed:
        raise BadInputError("id must not be empty")
    return trimmed


class JobService:
    """Gatekeeper between callers and the job repository.

    Every input is validated and normalized here, so invalid data never
    reaches the store. Errors raised by the repository other than
    NotFoundError are infrastructure failures and pass through untouched.
    """

    def __init__(self, repository: JobRepository):
        """Initialize the service.

        Args:
            repository: The JobRepository instance for database access.
        """
        self.repository = repository

    async def create(
        self,
        company: str,
        role: str,
        link: str | None = None,
    ) -> JobRecord:
        """Record a new job application with status APPLIED.

        Args:
            company: The company name.
            role: The job role/title.
            link: The job posting URL (optional).

        Returns:
            The created JobRecord.

        Raises:
            BadInputError: If company or role is blank, or link is invalid.
        """
        company = (company or "").strip()
        role = (role or "").strip()
        if not company or not role:
            logger.warning("Rejected job without company or role")
            raise BadInputError("company and role are required")

        normalized_link = normalize_link(link)

        record = await self.repository.create(company, role, normalized_link)
        logger.info("Created job %s (%s, %s)", record.id, record.company, record.role)
        return record

    async def get(self, job_id: str) -> JobRecord:
        """Get a job by id.

        Raises:
            BadInputError: If the id is blank.
            NotFoundError: If no job has this id.
        """
        job_id = _require_id(job_id)
        record = await self.repository.get(job_id)
        if record is None:
            raise NotFoundError(f"job {job_id!r} not found")
        return record

    async def list_jobs(
        self,
        status: JobStatus | str | None = None,
        search: str | None = None,
    ) -> list[JobRecord]:
        """List jobs, most recent first.

        Args:
            status: Only return jobs in this status.
            search: Case-insensitive substring matched against company or
                role. Blank text is the same as no search.

        Returns:
            Every matching job; an empty list when nothing matches.
        """
        status_filter = parse_status(status) if status is not None else None

        query = search.strip() if search is not None else None
        if not query:
            query = None

        return await self.repository.list_jobs(status_filter, query)

    async def update_status(self, job_id: str, status: JobStatus | str) -> JobRecord:
        """Move a job to a new status. No other field changes.

        Raises:
            BadInputError: If the id is blank or the status is unknown.
            NotFoundError: If no job has this id.
        """
        job_id = _require_id(job_id)
        new_status = parse_status(status)

        record = await self.repository.update_status(job_id, new_status)
        logger.info("Job %s moved to %s", job_id, new_status.value)
        return record

    async def update_link(self, job_id: str, link: str) -> JobRecord:
        """Replace the link of a job.

        Raises:
            BadInputError: If the id is blank or the link is missing or invalid.
            NotFoundError: If no job has this id.
        """
        job_id = _require_id(job_id)
        if link is None:
            raise BadInputError("link is required")
        normalized_link = normalize_link(link)

        record = await self.repository.update_link(job_id, normalized_link)
        logger.info("Updated link of job %s", job_id)
        return record

    async def delete(self, job_id: str) -> None:
        """Delete a job.

        Raises:
            BadInputError: If the id is blank.
            NotFoundError: If no job has this id.
        """
        job_id = _require_id(job_id)
        await self.repository.delete(job_id)
        logger.info("Deleted job %s", job_id)

    async def stats_by_status(self) -> list[StatusCount]:
        """Count jobs per status. Statuses without jobs are omitted."""
        return await self.repository.stats_by_status()

    async def seed_demo_jobs(self) -> int:
        """Insert the demo catalog and return the number of rows inserted.

        Not idempotent; repeated calls duplicate the catalog.
        """
        inserted = await self.repository.seed_demo_jobs()
        logger.info("Seeded %d demo jobs", inserted)
        return inserted
