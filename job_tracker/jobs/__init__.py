"""Job application tracking.

Public API:
- JobService: Validation and normalization in front of the store
- JobRepository: Parameterized SQL against the jobs table
- JobRecord: Data model for a job application
- JobStatus: Enum for application status values
- StatusCount: Aggregate of jobs per status
- BadInputError / NotFoundError: Client-facing domain errors
"""

from job_tracker.jobs.errors import BadInputError, JobsError, NotFoundError, SeedError
from job_tracker.jobs.models import JobRecord, JobStatus, StatusCount
from job_tracker.jobs.repository import JobRepository
from job_tracker.jobs.service import JobService

__all__ = [
    "JobService",
    "JobRepository",
    "JobRecord",
    "JobStatus",
    "StatusCount",
    "JobsError",
    "BadInputError",
    "NotFoundError",
    "SeedError",
]
