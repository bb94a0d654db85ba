"""Slack mrkdwn formatting primitives."""

from __future__ import annotations

from deploy_notifier.models import Subject


def escape(value: object) -> str:
    """Escape the three control characters Slack reserves in mrkdwn."""
    return (
        str(value or "")
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def bold(text: str) -> str:
    return f"*{escape(text)}*"


def emoji(name: str) -> str:
    """Render an emoji shortcode; unknown names show up as literal text in Slack."""
    return f":{name}:"


def link(subject: Subject) -> str:
    """Render ``<url|text>``, or just the text when there is no URL."""
    text = escape(subject.text)
    if not subject.url:
        return text
    return f"<{subject.url}|{text}>"
