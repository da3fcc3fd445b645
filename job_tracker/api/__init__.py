"""API-facing adapter for the jobs service."""

from job_tracker.api.resolvers import ApiError, JobsApi, map_service_error
from job_tracker.api.schema import JobOut, StatusCountOut

__all__ = ["ApiError", "JobsApi", "JobOut", "StatusCountOut", "map_service_error"]
