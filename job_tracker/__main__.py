"""Main entry point for Job-Tracker."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from job_tracker import __version__
from job_tracker.api import ApiError, JobsApi
from job_tracker.config.settings import Settings, get_settings
from job_tracker.db import Database, apply_migrations
from job_tracker.jobs import JobRepository, JobService, JobStatus, SeedError
from job_tracker.utils.logging import configure_logging

# __name__ is "__main__" under python -m
logger = logging.getLogger("job_tracker.cli")

STATUS_CHOICES = [status.value for status in JobStatus]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="job-tracker",
        description="Job-Tracker: keep track of your job applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m job_tracker create Acme "Backend Engineer" --link https://acme.dev/jobs/1
  python -m job_tracker list --status INTERVIEW --q acme
  python -m job_tracker status <id> OFFER
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Override database path (defaults to settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available operations",
    )

    subparsers.add_parser("init", help="Create the database and apply migrations")

    create_cmd = subparsers.add_parser("create", help="Record a new application")
    create_cmd.add_argument("company", help="Company name")
    create_cmd.add_argument("role", help="Job title")
    create_cmd.add_argument(
        "--link",
        type=str,
        default=None,
        help="Optional URL of the job posting",
    )

    get_cmd = subparsers.add_parser("get", help="Show one application")
    get_cmd.add_argument("id", help="Job id")

    list_cmd = subparsers.add_parser("list", help="List applications, newest first")
    list_cmd.add_argument(
        "--status",
        type=str,
        default=None,
        help=f"Optional status filter ({'/'.join(STATUS_CHOICES)})",
    )
    list_cmd.add_argument(
        "--q",
        type=str,
        default=None,
        help="Optional text matched against company and role",
    )

    status_cmd = subparsers.add_parser("status", help="Change the status of an application")
    status_cmd.add_argument("id", help="Job id")
    status_cmd.add_argument("status", help=f"New status ({'/'.join(STATUS_CHOICES)})")

    link_cmd = subparsers.add_parser("link", help="Change the link of an application")
    link_cmd.add_argument("id", help="Job id")
    link_cmd.add_argument("link", help="New URL of the job posting")

    delete_cmd = subparsers.add_parser("delete", help="Delete an application")
    delete_cmd.add_argument("id", help="Job id")

    subparsers.add_parser("stats", help="Count applications per status")
    subparsers.add_parser("seed", help="Insert demonstration applications")

    return parser


async def _run_command(parsed: argparse.Namespace, settings: Settings) -> object:
    """Open the store, run one command and return its JSON-ready result."""
    db_path = parsed.db or settings.database_path
    database = Database(
        db_path,
        pool_size=settings.pool_max_size,
        pool_recycle=settings.pool_max_lifetime_seconds,
        pool_timeout=settings.pool_timeout_seconds,
        timeout=settings.query_timeout_seconds,
    )

    async with database:
        await apply_migrations(database, settings.migrations_dir)
        api = JobsApi(JobService(JobRepository(database)))

        if parsed.command == "init":
            return {"database": str(db_path)}

        if parsed.command == "create":
            job = await api.create_job(parsed.company, parsed.role, parsed.link)
            return job.to_wire()

        if parsed.command == "get":
            return (await api.job(parsed.id)).to_wire()

        if parsed.command == "list":
            jobs = await api.jobs(status=parsed.status, q=parsed.q)
            return [job.to_wire() for job in jobs]

        if parsed.command == "status":
            return (await api.update_job_status(parsed.id, parsed.status)).to_wire()

        if parsed.command == "link":
            return (await api.update_job_link(parsed.id, parsed.link)).to_wire()

        if parsed.command == "delete":
            return {"deleted": await api.delete_job(parsed.id)}

        if parsed.command == "stats":
            return [stat.to_wire() for stat in await api.stats_by_status()]

        if parsed.command == "seed":
            return {"inserted": await api.seed_demo_jobs()}

    raise ValueError(f"Unknown command: {parsed.command}")


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    configure_logging(parsed.log_level or settings.log_level)

    if parsed.command is None:
        parser.print_help()
        return 0

    logger.debug("Job-Tracker v%s running %s", __version__, parsed.command)

    try:
        result = asyncio.run(_run_command(parsed, settings))
    except ApiError as e:
        print(json.dumps({"errors": [e.to_dict()]}), file=sys.stderr)
        return 1
    except SeedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
