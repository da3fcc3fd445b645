"""Validation and normalization of job posting links."""

from urllib.parse import urlsplit

from job_tracker.jobs.errors import BadInputError


def normalize_link(link: str | None) -> str | None:
    """Validate an optional job link.

    A link must be an absolute URL with both a scheme and a host. The
    normalized form is the input with surrounding whitespace removed;
    nothing else about the URL is rewritten.

    Args:
        link: The raw link, or None when the caller supplied none.

    Returns:
        The trimmed link, or None if no link was given.

    Raises:
        BadInputError: If the link is blank or not an absolute URL.
    """
    if link is None:
        return None

    trimmed = link.strip()
    if not trimmed:
        raise BadInputError("link must not be empty")

    if any(ch.isspace() or not ch.isprintable() for ch in trimmed):
        raise BadInputError(f"invalid link: {trimmed!r}")

    try:
        parts = urlsplit(trimmed)
        host = parts.hostname
        parts.port  # raises ValueError for a malformed port
    except ValueError:
        raise BadInputError(f"invalid link: {trimmed!r}") from None

    if not parts.scheme or not host:
        raise BadInputError(f"link must be an absolute URL: {trimmed!r}")

    return trimmed
