"""Secondary "context" line shown under every deployment message."""

from __future__ import annotations

from typing import Optional

from deploy_notifier.models import ContextBlock, Subject
from deploy_notifier.services.mrkdwn import escape, link
from deploy_notifier.utils import SHORT_SHA_LENGTH, pluralize, short_sha

SEPARATOR = "  ∙  "
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600


def format_elapsed(
    seconds: int,
    *,
    minute: int = SECONDS_PER_MINUTE,
    hour: int = SECONDS_PER_HOUR,
) -> str:
    """
    Describe a duration in its coarsest whole unit.

    Example
    -------
    5 → '5 seconds', 65 → '1 minute', 3700 → '1 hour'
    """
    seconds = max(int(seconds), 0)
    if seconds < minute:
        return pluralize(seconds, "second")
    if seconds < hour:
        return pluralize(seconds // minute, "minute")
    return pluralize(seconds // hour, "hour")


def build_context_line(
    workflow_name: str,
    run_url: str,
    *,
    branch: Optional[str] = None,
    commit_sha: Optional[str] = None,
    elapsed_seconds: Optional[int] = None,
    sha_length: int = SHORT_SHA_LENGTH,
) -> ContextBlock:
    segments = [link(Subject(text=workflow_name, url=run_url))]
    if branch:
        segments.append(escape(branch))
    if commit_sha:
        segments.append(short_sha(commit_sha, sha_length))
    if elapsed_seconds is not None:
        segments.append(format_elapsed(elapsed_seconds))
    return ContextBlock(elements=(SEPARATOR.join(segments),))
