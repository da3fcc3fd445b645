"""Data models for job applications."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class JobStatus(str, Enum):
    """Status of a job application."""

    APPLIED = "APPLIED"
    INTERVIEW = "INTERVIEW"
    OFFER = "OFFER"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class JobRecord:
    """A single job application.

    Attributes:
        id: Identifier assigned by the store on creation.
        company: Name of the company (never blank).
        role: Title of the job role (never blank).
        status: Current status of the application.
        created_at: When the record was created (UTC).
        link: Absolute URL of the job posting, if any.
    """

    id: str
    company: str
    role: str
    status: JobStatus
    created_at: datetime
    link: str | None = None


@dataclass(frozen=True)
class StatusCount:
    """Number of job records currently in a given status."""

    status: JobStatus
    count: int
