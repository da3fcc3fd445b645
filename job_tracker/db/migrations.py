"""Schema migrations for the jobs database.

Migrations are plain ``*.sql`` scripts applied in filename order. Every
script must be safe to run again (``CREATE ... IF NOT EXISTS``), since
they are applied on each start-up.
"""

import logging
from pathlib import Path

from job_tracker.db.engine import Database

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def list_migrations(directory: Path | str | None = None) -> list[Path]:
    """Return the migration scripts in a directory, in application order.

    Args:
        directory: Directory holding ``*.sql`` files. Defaults to the
            scripts bundled with the package.

    Raises:
        FileNotFoundError: If the directory has no migration scripts.
    """
    directory = Path(directory) if directory is not None else MIGRATIONS_DIR
    scripts = sorted(directory.glob("*.sql"))
    if not scripts:
        raise FileNotFoundError(f"No migration scripts found in {directory}")
    return scripts


async def apply_migrations(
    database: Database, directory: Path | str | None = None
) -> list[str]:
    """Apply every migration script using a single pooled connection.

    Args:
        database: The target database.
        directory: Optional directory overriding the bundled scripts.

    Returns:
        File names of the applied scripts, in order.
    """
    scripts = list_migrations(directory)
    applied: list[str] = []

    async with database.connect() as conn:
        # executescript lives on the aiosqlite connection itself
        raw = await conn.get_raw_connection()
        for script in scripts:
            await raw.driver_connection.executescript(script.read_text(encoding="utf-8"))
            applied.append(script.name)
            logger.debug("Applied migration %s", script.name)

    logger.info("Database schema ready at %s (%d migrations)", database.db_path, len(applied))
    return applied
