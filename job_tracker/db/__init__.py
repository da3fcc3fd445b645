"""Storage plumbing: async engine and schema migrations."""

from job_tracker.db.engine import Database, DatabaseClosedError, create_engine
from job_tracker.db.migrations import apply_migrations

__all__ = ["Database", "DatabaseClosedError", "apply_migrations", "create_engine"]
