"""The thread-starting message posted when a deployment begins."""

from __future__ import annotations

from deploy_notifier.models import ContextBlock, Message, SectionBlock, WorkflowContext
from deploy_notifier.services.context import build_context_line
from deploy_notifier.services.github import Classification, checks_url, classify
from deploy_notifier.services.mrkdwn import bold, emoji, link

SUMMARY_ICON = "black_square_button"
DISPLAY_NAME_SUFFIX = " (via GitHub)"


def summary_context(context: WorkflowContext, event: Classification) -> ContextBlock:
    """Workflow link plus the pull request branch, if any."""
    return build_context_line(
        context.workflow_name,
        checks_url(context),
        branch=event.branch,
    )


def summary_section(
    context: WorkflowContext,
    event: Classification,
    *,
    icon: str = SUMMARY_ICON,
    prefix: str = "Deploying",
) -> SectionBlock:
    return SectionBlock(
        text=(
            f"{emoji(icon)} {prefix} {bold(context.repository_name)}: "
            f"{link(event.subject)}"
        )
    )


def compose_summary(context: WorkflowContext) -> Message:
    event = classify(context)
    actor = event.actor
    return Message(
        plain_text=f"Deploying {context.repository_name}: {event.subject.text}",
        blocks=(summary_section(context, event), summary_context(context, event)),
        display_name=f"{actor.display_name}{DISPLAY_NAME_SUFFIX}" if actor else None,
        avatar_url=actor.avatar_url if actor else None,
    )
