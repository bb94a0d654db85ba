"""Replies posted into a deployment thread as jobs progress."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Union

from deploy_notifier.clock import elapsed_seconds, parse_slack_ts, utcnow
from deploy_notifier.models import Message, Progress, RunStatus, SectionBlock, WorkflowContext
from deploy_notifier.services.context import build_context_line
from deploy_notifier.services.github import checks_url, classify
from deploy_notifier.services.mrkdwn import bold, emoji
from deploy_notifier.services.summary import (
    DISPLAY_NAME_SUFFIX,
    summary_context,
    summary_section,
)


@dataclass(frozen=True)
class StatusStyle:
    icon: str
    verb: str
    broadcast: bool
    edits_summary: bool


STATUS_STYLES: dict[RunStatus, StatusStyle] = {
    RunStatus.RUNNING: StatusStyle("arrows_counterclockwise", "Deploying", False, False),
    RunStatus.SUCCESS: StatusStyle("white_check_mark", "Finished", False, False),
    RunStatus.FAILURE: StatusStyle("x", "Failed", True, True),
    RunStatus.CANCELLED: StatusStyle("no_entry_sign", "Cancelled", True, True),
}


def compose_progress(
    context: WorkflowContext,
    status: Union[RunStatus, str],
    thread_reference_id: Optional[str] = None,
    *,
    now: Optional[dt.datetime] = None,
) -> Progress:
    """
    Build the reply for ``status`` and, for failed or cancelled runs, an edit
    that rewrites the thread's summary message with the outcome.

    ``now`` is the reference for the elapsed time shown in the context line;
    it defaults to the current UTC time.
    """
    style = STATUS_STYLES[RunStatus.parse(status)]
    event = classify(context)
    actor = event.actor

    elapsed = None
    if thread_reference_id:
        started = parse_slack_ts(thread_reference_id)
        elapsed = elapsed_seconds(started, now or utcnow())

    message = Message(
        plain_text=f"{style.verb} {context.job_name}",
        blocks=(
            SectionBlock(text=f"{emoji(style.icon)} {style.verb} {bold(context.job_name)}"),
            build_context_line(
                context.workflow_name,
                checks_url(context),
                commit_sha=context.commit_sha or None,
                elapsed_seconds=elapsed,
            ),
        ),
        display_name=f"{actor.display_name}{DISPLAY_NAME_SUFFIX}" if actor else None,
        avatar_url=actor.avatar_url if actor else None,
        broadcast_reply=style.broadcast,
        thread_id=thread_reference_id or None,
    )

    summary_edit = None
    if style.edits_summary and thread_reference_id:
        summary_edit = Message(
            plain_text=(
                f"{style.verb} deploying {context.repository_name}: {event.subject.text}"
            ),
            blocks=(
                summary_section(
                    context,
                    event,
                    icon=style.icon,
                    prefix=f"{style.verb} deploying",
                ),
                summary_context(context, event),
            ),
            edit_target_id=thread_reference_id,
        )

    return Progress(message=message, summary_edit=summary_edit)
