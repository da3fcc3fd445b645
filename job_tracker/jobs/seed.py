"""Demonstration records inserted by ``seed_demo_jobs``."""

from typing import NamedTuple

from job_tracker.jobs.models import JobStatus


class DemoJob(NamedTuple):
    company: str
    role: str
    link: str | None
    status: JobStatus


DEMO_JOBS: tuple[DemoJob, ...] = (
    DemoJob("Monzo", "Backend Engineer", "https://example.com/monzo", JobStatus.APPLIED),
    DemoJob("Stripe", "Platform Engineer", "https://example.com/stripe", JobStatus.INTERVIEW),
    DemoJob("Shopify", "Software Engineer", "https://example.com/shopify", JobStatus.OFFER),
    DemoJob("Spotify", "Data Engineer", "https://example.com/spotify", JobStatus.REJECTED),
    DemoJob("GitHub", "Full Stack Engineer", "https://example.com/github", JobStatus.APPLIED),
    DemoJob("Airbnb", "Backend Engineer", "https://example.com/airbnb", JobStatus.INTERVIEW),
    DemoJob("Dropbox", "Infrastructure Engineer", "https://example.com/dropbox", JobStatus.APPLIED),
    DemoJob("Notion", "Product Engineer", "https://example.com/notion", JobStatus.OFFER),
    DemoJob("Linear", "Frontend Engineer", "https://example.com/linear", JobStatus.REJECTED),
    DemoJob("Figma", "Growth Engineer", "https://example.com/figma", JobStatus.APPLIED),
)
