"""Tests for the API adapter."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from job_tracker.api.resolvers import ApiError, JobsApi, map_service_error, status_from_wire
from job_tracker.api.schema import JobOut, StatusCountOut
from job_tracker.jobs.errors import BadInputError, NotFoundError
from job_tracker.jobs.models import JobRecord, JobStatus, StatusCount
from job_tracker.jobs.repository import JobRepository
from job_tracker.jobs.service import JobService


@pytest.fixture
def api(database):
    """An API adapter over a real service and database."""
    return JobsApi(JobService(JobRepository(database)))


class TestWireModels:
    """Test conversion of records into wire models."""

    def test_job_out_uses_camel_case_and_rfc3339(self):
        record = JobRecord(
            id="abc",
            company="Acme",
            role="Engineer",
            status=JobStatus.OFFER,
            created_at=datetime(2026, 3, 4, 5, 6, 7, 890000, tzinfo=UTC),
            link=None,
        )

        wire = JobOut.from_record(record).to_wire()

        assert wire == {
            "id": "abc",
            "company": "Acme",
            "role": "Engineer",
            "link": None,
            "status": "OFFER",
            "createdAt": "2026-03-04T05:06:07Z",
        }

    def test_status_count_out(self):
        wire = StatusCountOut.from_count(StatusCount(JobStatus.APPLIED, 3)).to_wire()
        assert wire == {"status": "APPLIED", "count": 3}


class TestErrorMapping:
    """Test translation of domain errors."""

    def test_bad_input(self):
        error = map_service_error(BadInputError("company is blank"))
        assert isinstance(error, ApiError)
        assert error.code == "BAD_INPUT"
        assert error.message == "bad input"

    def test_not_found(self):
        error = map_service_error(NotFoundError("job 'x' not found"))
        assert isinstance(error, ApiError)
        assert error.code == "NOT_FOUND"
        assert error.to_dict() == {"message": "not found", "extensions": {"code": "NOT_FOUND"}}

    def test_other_errors_pass_through(self):
        original = RuntimeError("database is locked")
        assert map_service_error(original) is original

    def test_status_from_wire(self):
        assert status_from_wire("REJECTED") is JobStatus.REJECTED
        with pytest.raises(ApiError) as exc_info:
            status_from_wire("rejected")
        assert exc_info.value.code == "BAD_INPUT"


class TestJobsApi:
    """Test the query and mutation entry points."""

    @pytest.mark.asyncio
    async def test_create_and_fetch(self, api):
        created = await api.create_job("Acme", "Engineer", "https://acme.dev")

        fetched = await api.job(created.id)

        assert fetched == created
        assert created.status == JobStatus.APPLIED

    @pytest.mark.asyncio
    async def test_create_bad_input(self, api):
        with pytest.raises(ApiError) as exc_info:
            await api.create_job("", "Engineer")
        assert exc_info.value.code == "BAD_INPUT"
        assert isinstance(exc_info.value.__cause__, BadInputError)

    @pytest.mark.asyncio
    async def test_missing_job_is_not_found(self, api):
        with pytest.raises(ApiError) as exc_info:
            await api.job("does-not-exist")
        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_status_and_link(self, api):
        created = await api.create_job("Acme", "Engineer")

        moved = await api.update_job_status(created.id, "INTERVIEW")
        linked = await api.update_job_link(created.id, "https://acme.dev/2")

        assert moved.status == JobStatus.INTERVIEW
        assert linked.link == "https://acme.dev/2"
        assert linked.status == JobStatus.INTERVIEW

    @pytest.mark.asyncio
    async def test_update_status_unknown_id(self, api):
        with pytest.raises(ApiError) as exc_info:
            await api.update_job_status("does-not-exist", "OFFER")
        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_job(self, api):
        created = await api.create_job("Acme", "Engineer")

        assert await api.delete_job(created.id) is True
        with pytest.raises(ApiError) as exc_info:
            await api.delete_job(created.id)
        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_jobs_and_stats(self, api):
        assert await api.seed_demo_jobs() == 10

        offers = await api.jobs(status="OFFER")
        sp_matches = await api.jobs(q="sp")
        stats = await api.stats_by_status()

        assert {job.company for job in offers} == {"Shopify", "Notion"}
        assert {job.company for job in sp_matches} == {"Spotify"}
        assert [s.to_wire() for s in stats] == [
            {"status": "APPLIED", "count": 4},
            {"status": "INTERVIEW", "count": 2},
            {"status": "OFFER", "count": 2},
            {"status": "REJECTED", "count": 2},
        ]

    @pytest.mark.asyncio
    async def test_infrastructure_errors_are_not_translated(self):
        service = AsyncMock(spec=JobService)
        service.list_jobs.side_effect = RuntimeError("disk I/O error")
        api = JobsApi(service)

        with pytest.raises(RuntimeError):
            await api.jobs()
