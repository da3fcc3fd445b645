"""Pytest configuration and shared fixtures."""

import pytest

from job_tracker.config.settings import reset_settings
from job_tracker.db import Database, apply_migrations
from job_tracker.utils.logging import reset_logging


@pytest.fixture(autouse=True)
def _reset_globals():
    """Give every test fresh settings and logging state."""
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def db_path(tmp_path):
    """Path of a throwaway jobs database."""
    return tmp_path / "data" / "jobs.db"


@pytest.fixture
async def database(db_path):
    """An open database with the schema applied."""
    database = Database(db_path, pool_size=2)
    await database.open()
    await apply_migrations(database)
    yield database
    await database.close()
