"""Tests for schema migrations."""

import pytest
from sqlalchemy import text

from job_tracker.db.engine import Database
from job_tracker.db.migrations import MIGRATIONS_DIR, apply_migrations, list_migrations


class TestListMigrations:
    """Test migration discovery."""

    def test_bundled_scripts_are_found(self):
        """The package should ship its initial migration."""
        names = [path.name for path in list_migrations()]
        assert names[0] == "001_init.sql"
        assert all(path.parent == MIGRATIONS_DIR for path in list_migrations())

    def test_scripts_sorted_by_name(self, tmp_path):
        """Scripts should be applied in filename order."""
        for name in ["010_b.sql", "002_a.sql", "001_init.sql"]:
            (tmp_path / name).write_text("SELECT 1;", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

        names = [path.name for path in list_migrations(tmp_path)]
        assert names == ["001_init.sql", "002_a.sql", "010_b.sql"]

    def test_empty_directory_raises(self, tmp_path):
        """A directory without scripts is a configuration error."""
        with pytest.raises(FileNotFoundError):
            list_migrations(tmp_path)


class TestApplyMigrations:
    """Test applying migrations to a database."""

    @pytest.mark.asyncio
    async def test_creates_jobs_table_with_expected_columns(self, db_path):
        """The jobs table should have the documented columns."""
        async with Database(db_path) as database:
            applied = await apply_migrations(database)

            async with database.connect() as conn:
                result = await conn.execute(text("PRAGMA table_info(jobs)"))
                columns = [row.name for row in result]

        assert applied == ["001_init.sql"]
        assert columns == ["id", "company", "role", "link", "status", "created_at"]

    @pytest.mark.asyncio
    async def test_is_idempotent(self, db_path):
        """Applying migrations twice should not fail or lose data."""
        async with Database(db_path) as database:
            await apply_migrations(database)
            async with database.begin() as conn:
                await conn.execute(text("INSERT INTO jobs (company, role) VALUES ('A', 'B')"))

            await apply_migrations(database)

            async with database.connect() as conn:
                statuses = (await conn.execute(text("SELECT status FROM jobs"))).scalars().all()

        assert statuses == ["APPLIED"]

    @pytest.mark.asyncio
    async def test_custom_directory(self, db_path, tmp_path):
        """A custom directory should replace the bundled scripts."""
        migrations = tmp_path / "migrations"
        migrations.mkdir()
        (migrations / "001_other.sql").write_text(
            "CREATE TABLE IF NOT EXISTS other (x INTEGER);", encoding="utf-8"
        )

        async with Database(db_path) as database:
            applied = await apply_migrations(database, migrations)

            async with database.connect() as conn:
                result = await conn.execute(
                    text("SELECT name FROM sqlite_master WHERE type = 'table'")
                )
                tables = set(result.scalars())

        assert applied == ["001_other.sql"]
        assert "other" in tables
        assert "jobs" not in tables
