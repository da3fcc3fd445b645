"""Adapter between API clients and the jobs service.

Converts wire inputs into service calls, records into wire models, and
domain errors into ApiError values carrying a client-visible code.
Infrastructure errors are not translated.
"""

from __future__ import annotations

from job_tracker.api.schema import JobOut, StatusCountOut
from job_tracker.jobs.errors import BadInputError, NotFoundError
from job_tracker.jobs.models import JobStatus
from job_tracker.jobs.service import JobService


class ApiError(Exception):
    """Error surfaced to API clients.

    Attributes:
        message: Short human-readable description.
        code: Machine-readable code (BAD_INPUT or NOT_FOUND).
    """

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_dict(self) -> dict:
        return {"message": self.message, "extensions": {"code": self.code}}


def map_service_error(error: Exception) -> Exception:
    """Translate a domain error into an ApiError.

    Any other exception is returned unchanged.
    """
    if isinstance(error, BadInputError):
        return ApiError("bad input", BadInputError.code)
    if isinstance(error, NotFoundError):
        return ApiError("not found", NotFoundError.code)
    return error


def status_from_wire(value: str) -> JobStatus:
    try:
        return JobStatus(value)
    except ValueError:
        raise ApiError(f"unknown status {value!r}", BadInputError.code) from None


class JobsApi:
    """Query and mutation entry points over a JobService."""

    def __init__(self, service: JobService):
        self.service = service

    async def create_job(self, company: str, role: str, link: str | None = None) -> JobOut:
        try:
            record = await self.service.create(company, role, link)
        except (BadInputError, NotFoundError) as e:
            raise map_service_error(e) from e
        return JobOut.from_record(record)

    async def update_job_status(self, id: str, status: str) -> JobOut:
        new_status = status_from_wire(status)
        try:
            record = await self.service.update_status(id, new_status)
        except (BadInputError, NotFoundError) as e:
            raise map_service_error(e) from e
        return JobOut.from_record(record)

    async def update_job_link(self, id: str, link: str) -> JobOut:
        try:
            record = await self.service.update_link(id, link)
        except (BadInputError, NotFoundError) as e:
            raise map_service_error(e) from e
        return JobOut.from_record(record)

    async def delete_job(self, id: str) -> bool:
        try:
            await self.service.delete(id)
        except (BadInputError, NotFoundError) as e:
            raise map_service_error(e) from e
        return True

    async def seed_demo_jobs(self) -> int:
        return await self.service.seed_demo_jobs()

    async def jobs(self, status: str | None = None, q: str | None = None) -> list[JobOut]:
        status_filter = status_from_wire(status) if status is not None else None
        records = await self.service.list_jobs(status_filter, q)
        return [JobOut.from_record(record) for record in records]

    async def job(self, id: str) -> JobOut:
        """Look up one job. A missing job raises ApiError with code NOT_FOUND."""
        try:
            record = await self.service.get(id)
        except (BadInputError, NotFoundError) as e:
            raise map_service_error(e) from e
        return JobOut.from_record(record)

    async def stats_by_status(self) -> list[StatusCountOut]:
        stats = await self.service.stats_by_status()
        return [StatusCountOut.from_count(stat) for stat in stats]
