"""Value types shared by the classifier, composers and transport."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from deploy_notifier.errors import InvalidStatusError
from deploy_notifier.schemas import PullRequestPayload, PushPayload

EventPayload = Union[PullRequestPayload, PushPayload]


@dataclass(frozen=True)
class Subject:
    """The thing being deployed: a pull request or a head commit."""

    text: str
    url: str = ""


@dataclass(frozen=True)
class Actor:
    """Who triggered the run; ``kind`` is "user" or "bot".

    Both kinds are displayed the same way, so ``kind`` is informational.
    """

    kind: str
    display_name: str
    avatar_url: Optional[str] = None


class RunStatus(str, enum.Enum):
    """Progress of a workflow job as reported by the action's ``status`` input."""

    RUNNING = "running"
    SUCCESS = "success"
    FAILURE = "failure"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: Union[str, "RunStatus", None]) -> "RunStatus":
        """Return the status named by ``value`` (case-insensitive)."""
        if isinstance(value, cls):
            return value
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidStatusError(value, [member.value for member in cls])


@dataclass(frozen=True)
class WorkflowContext:
    """Read-only snapshot of the workflow run that triggered the notifier."""

    event_name: str
    repository_owner: str
    repository_name: str
    workflow_name: str
    job_name: str
    commit_sha: str
    payload: EventPayload
    server_url: str = "https://github.com"

    @property
    def repository(self) -> str:
        return f"{self.repository_owner}/{self.repository_name}"


@dataclass(frozen=True)
class SectionBlock:
    text: str


@dataclass(frozen=True)
class ContextBlock:
    elements: tuple[str, ...]


Block = Union[SectionBlock, ContextBlock]


@dataclass(frozen=True)
class Message:
    """Transport-neutral description of one chat message.

    ``thread_id`` posts the message as a reply; ``edit_target_id`` marks it
    as a replacement for an already posted message.
    """

    plain_text: str
    blocks: tuple[Block, ...]
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    broadcast_reply: Optional[bool] = None
    thread_id: Optional[str] = None
    edit_target_id: Optional[str] = None


@dataclass(frozen=True)
class Progress:
    """A progress reply plus, for abnormal endings, an edit of the summary."""

    message: Message
    summary_edit: Optional[Message] = None
