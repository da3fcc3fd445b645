"""Database repository for job applications.

This module issues the parameterized SQL behind every job operation.
Each method borrows one pooled connection, performs a single round trip
and maps the outcome back to domain records or domain errors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from sqlalchemy import RowMapping, text
from sqlalchemy.exc import DBAPIError

from job_tracker.db.engine import Database
from job_tracker.jobs.errors import NotFoundError, SeedError
from job_tracker.jobs.models import JobRecord, JobStatus, StatusCount
from job_tracker.jobs.seed import DEMO_JOBS, DemoJob

logger = logging.getLogger(__name__)

JOB_COLUMNS = "id, company, role, link, status, created_at"

# Predicate fragments for list filters. {p} is replaced by the name of the
# bind parameter carrying the predicate's argument.
STATUS_PREDICATE = "status = :{p}"
SEARCH_PREDICATE = "(instr(casefold(company), :{p}) > 0 OR instr(casefold(role), :{p}) > 0)"


def build_list_query(
    status: JobStatus | None = None,
    search: str | None = None,
) -> tuple[str, dict[str, str]]:
    """Build the SELECT statement and arguments for a filtered listing.

    Predicates are collected as (fragment, argument) pairs in a fixed
    order, status first and text search second, and bind parameters are
    named ``p1``, ``p2``... by the position of their argument. An absent
    filter adds neither a fragment nor an argument.

    Args:
        status: Exact status to match, if any.
        search: Substring matched case-insensitively against company or
            role. Blank values are ignored.

    Returns:
        The SQL text and its bind parameters.
    """
    predicates: list[tuple[str, str]] = []

    if status is not None:
        predicates.append((STATUS_PREDICATE, status.value))

    if search is not None and search.strip():
        predicates.append((SEARCH_PREDICATE, search.strip().casefold()))

    sql = f"SELECT {JOB_COLUMNS} FROM jobs"
    params: dict[str, str] = {}
    clauses: list[str] = []
    for number, (fragment, argument) in enumerate(predicates, start=1):
        name = f"p{number}"
        clauses.append(fragment.format(p=name))
        params[name] = argument

    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    sql += " ORDER BY created_at DESC, rowid DESC"

    return sql, params


class JobRepository:
    """Async SQLite repository for job records.

    The repository trusts its input: trimming and validation happen in
    ``JobService`` before any call reaches this class.
    """

    def __init__(self, database: Database):
        """Initialize the repository.

        Args:
            database: Storage context for the jobs database.
        """
        self.database = database

    async def create(self, company: str, role: str, link: str | None) -> JobRecord:
        """Insert a new job with status APPLIED.

        Returns:
            The stored record, including its generated id and timestamp.
        """
        async with self.database.begin() as conn:
            result = await conn.execute(
                text(
                    f"""
                    INSERT INTO jobs (company, role, link, status)
                    VALUES (:company, :role, :link, :status)
                    RETURNING {JOB_COLUMNS}
                    """
                ),
                {
                    "company": company,
                    "role": role,
                    "link": link,
                    "status": JobStatus.APPLIED.value,
                },
            )
            row = result.mappings().one()

        return self._row_to_record(row)

    async def get(self, job_id: str) -> JobRecord | None:
        """Get a job by id.

        Returns:
            The job record if found, None otherwise.
        """
        async with self.database.connect() as conn:
            result = await conn.execute(
                text(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :id"),
                {"id": job_id},
            )
            row = result.mappings().first()

        if row is None:
            return None

        return self._row_to_record(row)

    async def list_jobs(
        self,
        status: JobStatus | None = None,
        search: str | None = None,
    ) -> list[JobRecord]:
        """List jobs matching every given filter, most recent first."""
        sql, params = build_list_query(status, search)
        logger.debug("Listing jobs: %s %s", sql, params)

        async with self.database.connect() as conn:
            result = await conn.execute(text(sql), params)
            rows = result.mappings().all()

        return [self._row_to_record(row) for row in rows]

    async def update_status(self, job_id: str, status: JobStatus) -> JobRecord:
        """Set the status of a job.

        Raises:
            NotFoundError: If no job has this id.
        """
        return await self._update_returning(
            "UPDATE jobs SET status = :value WHERE id = :id",
            job_id,
            status.value,
        )

    async def update_link(self, job_id: str, link: str | None) -> JobRecord:
        """Set the link of a job.

        Raises:
            NotFoundError: If no job has this id.
        """
        return await self._update_returning(
            "UPDATE jobs SET link = :value WHERE id = :id",
            job_id,
            link,
        )

    async def delete(self, job_id: str) -> None:
        """Delete a job.

        Raises:
            NotFoundError: If no row was removed.
        """
        async with self.database.begin() as conn:
            result = await conn.execute(
                text("DELETE FROM jobs WHERE id = :id"),
                {"id": job_id},
            )
            deleted = result.rowcount

        if deleted == 0:
            raise NotFoundError(f"job {job_id!r} not found")

    async def stats_by_status(self) -> list[StatusCount]:
        """Return job counts grouped by status, ordered by status."""
        async with self.database.connect() as conn:
            result = await conn.execute(
                text(
                    """
                    SELECT status, COUNT(*) AS count
                    FROM jobs
                    GROUP BY status
                    ORDER BY status
                    """
                )
            )
            rows = result.mappings().all()

        return [
            StatusCount(status=JobStatus(row["status"]), count=int(row["count"]))
            for row in rows
        ]

    async def seed_demo_jobs(self, catalog: Iterable[DemoJob] = DEMO_JOBS) -> int:
        """Insert every demo job, one statement per entry.

        Nothing prevents duplicates: calling this twice inserts the
        catalog twice.

        Returns:
            Number of rows inserted.

        Raises:
            SeedError: On the first failed insert, carrying the number of
                rows inserted before it.
        """
        inserted = 0
        for demo in catalog:
            try:
                async with self.database.begin() as conn:
                    result = await conn.execute(
                        text(
                            """
                            INSERT INTO jobs (company, role, link, status)
                            VALUES (:company, :role, :link, :status)
                            """
                        ),
                        {
                            "company": demo.company,
                            "role": demo.role,
                            "link": demo.link,
                            "status": demo.status.value,
                        },
                    )
                    affected = result.rowcount
            except DBAPIError as e:
                raise SeedError(inserted, e) from e
            inserted += affected

        return inserted

    async def _update_returning(self, statement: str, job_id: str, value: str | None) -> JobRecord:
        async with self.database.begin() as conn:
            result = await conn.execute(
                text(f"{statement} RETURNING {JOB_COLUMNS}"),
                {"id": job_id, "value": value},
            )
            row = result.mappings().first()

        if row is None:
            raise NotFoundError(f"job {job_id!r} not found")

        return self._row_to_record(row)

    def _row_to_record(self, row: RowMapping) -> JobRecord:
        """Convert a database row to a JobRecord.

        Args:
            row: The database row.

        Returns:
            A JobRecord instance.
        """
        return JobRecord(
            id=row["id"],
            company=row["company"],
            role=row["role"],
            link=row["link"],
            status=JobStatus(row["status"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )
