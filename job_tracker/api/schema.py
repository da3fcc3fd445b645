"""Wire representations of job records."""

from __future__ import annotations

from datetime import UTC

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from job_tracker.jobs.models import JobRecord, JobStatus, StatusCount


def format_timestamp(record: JobRecord) -> str:
    """Format a creation time as RFC 3339 in UTC, second precision."""
    return record.created_at.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


class WireModel(BaseModel):
    """Base for outbound models: camelCase on the wire, frozen."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class JobOut(WireModel):
    """A job as returned to API clients."""

    id: str = Field(..., description="Store-assigned identifier")
    company: str = Field(..., description="Company name")
    role: str = Field(..., description="Job title/position")
    link: str | None = Field(default=None, description="Job posting URL")
    status: JobStatus = Field(..., description="Application status")
    created_at: str = Field(..., description="Creation time, RFC 3339")

    @classmethod
    def from_record(cls, record: JobRecord) -> JobOut:
        return cls(
            id=record.id,
            company=record.company,
            role=record.role,
            link=record.link,
            status=record.status,
            created_at=format_timestamp(record),
        )


class StatusCountOut(WireModel):
    """Number of jobs in one status."""

    status: JobStatus
    count: int

    @classmethod
    def from_count(cls, stat: StatusCount) -> StatusCountOut:
        return cls(status=stat.status, count=stat.count)
