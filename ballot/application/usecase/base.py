"""Helpers shared by use cases."""

from uuid import UUID


def parse_uuid(value: str | None) -> UUID | None:
    """Parse a UUID string.

    Args:
        value: Candidate string from a path, query or body

    Returns:
        The UUID, or None when the value is missing or malformed
    """
    if not value:
        return None
    try:
        return UUID(value)
    except (ValueError, AttributeError, TypeError):
        return None
