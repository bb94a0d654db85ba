"""Classification of the GitHub event that triggered a workflow run."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from deploy_notifier.config import Settings
from deploy_notifier.errors import ConfigurationError, UnsupportedEventError
from deploy_notifier.models import Actor, EventPayload, Subject, WorkflowContext
from deploy_notifier.schemas import PullRequestPayload, PushPayload, Sender
from deploy_notifier.utils import split_repository

PULL_REQUEST_EVENTS = ("pull_request", "pull_request_target")
PUSH_EVENTS = ("push",)
SUPPORTED_EVENTS = PULL_REQUEST_EVENTS + PUSH_EVENTS


@dataclass(frozen=True)
class Classification:
    """Normalized view of the triggering event."""

    subject: Subject
    actor: Optional[Actor] = None
    branch: Optional[str] = None


def parse_payload(event_name: str, raw: Mapping[str, Any]) -> EventPayload:
    """
    Validate a raw webhook body against the schema for ``event_name``.

    Raises
    ------
    UnsupportedEventError
        For events other than pull requests and pushes, or bodies that do
        not match the event's schema.
    """
    event_key = (event_name or "").lower()
    if event_key in PULL_REQUEST_EVENTS:
        model: type[PullRequestPayload] | type[PushPayload] = PullRequestPayload
    elif event_key in PUSH_EVENTS:
        model = PushPayload
    else:
        raise UnsupportedEventError(event_name, SUPPORTED_EVENTS)
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise UnsupportedEventError(event_name, SUPPORTED_EVENTS) from exc


def actor_from_sender(sender: Optional[Sender]) -> Optional[Actor]:
    if sender is None or not sender.login:
        return None
    kind = "bot" if (sender.type or "").lower() == "bot" else "user"
    return Actor(kind=kind, display_name=sender.login, avatar_url=sender.avatar_url)


def classify(context: WorkflowContext) -> Classification:
    """
    Extract the subject, actor and branch of the triggering event.

    A push without a ``head_commit`` (e.g. a branch deletion) is treated as
    unsupported rather than producing a message with no subject.
    """
    event_key = context.event_name.lower()
    payload = context.payload

    if isinstance(payload, PullRequestPayload) and event_key in PULL_REQUEST_EVENTS:
        pr = payload.pull_request
        return Classification(
            subject=Subject(text=f"{pr.title} (#{pr.number})", url=pr.html_url),
            actor=actor_from_sender(payload.sender),
            branch=pr.head.ref or None,
        )

    if (
        isinstance(payload, PushPayload)
        and event_key in PUSH_EVENTS
        and payload.head_commit is not None
    ):
        commit = payload.head_commit
        return Classification(
            subject=Subject(text=commit.message, url=commit.url),
            actor=actor_from_sender(payload.sender),
        )

    raise UnsupportedEventError(context.event_name, SUPPORTED_EVENTS)


def checks_url(context: WorkflowContext) -> str:
    """Link to the checks tab of the pull request, or of the pushed commit."""
    payload = context.payload
    if isinstance(payload, PullRequestPayload) and payload.pull_request.html_url:
        return f"{payload.pull_request.html_url.rstrip('/')}/checks"
    base = context.server_url.rstrip("/")
    return f"{base}/{context.repository}/commit/{context.commit_sha}/checks"


def _read_event_file(path: str) -> Mapping[str, Any]:
    if not path:
        raise ConfigurationError("GITHUB_EVENT_PATH is not set")
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read event payload {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigurationError(f"Event payload {path} is not valid JSON") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Event payload {path} is not a JSON object")
    return data


def load_workflow_context(settings: Settings) -> WorkflowContext:
    """Build a WorkflowContext from the ``GITHUB_*`` environment of a run."""
    parts = split_repository(settings.repository)
    if parts is None:
        raise ConfigurationError(
            f"GITHUB_REPOSITORY must look like owner/repo, got {settings.repository!r}"
        )
    owner, name = parts
    payload = parse_payload(settings.event_name, _read_event_file(settings.event_path))
    return WorkflowContext(
        event_name=settings.event_name,
        repository_owner=owner,
        repository_name=name,
        workflow_name=settings.workflow,
        job_name=settings.job,
        commit_sha=settings.sha,
        payload=payload,
        server_url=settings.server_url,
    )
