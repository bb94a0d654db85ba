"""Small string helpers."""

from __future__ import annotations

SHORT_SHA_LENGTH = 7


def short_sha(sha: str, length: int = SHORT_SHA_LENGTH) -> str:
    """
    Abbreviate a commit SHA.

    Example
    -------
    '05b16c3beb3a07dceaf6cf964d0be9eccbc026e8' → '05b16c3'
    """
    return (sha or "")[:length]


def pluralize(count: int, unit: str) -> str:
    """Return ``'1 minute'`` / ``'2 minutes'`` style phrases."""
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def split_repository(slug: str) -> tuple[str, str] | None:
    """Split ``owner/name`` into its parts, or None if malformed."""
    owner, sep, name = (slug or "").strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        return None
    return owner, name
