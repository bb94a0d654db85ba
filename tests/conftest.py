"""Shared fixtures for deploy notifier tests."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from deploy_notifier.models import Message, WorkflowContext
from deploy_notifier.schemas import PullRequestPayload, PushPayload

SHA = "05b16c3beb3a07dceaf6cf964d0be9eccbc026e8"
THREAD_TS = "1662768005"  # 2022-09-10T00:00:05Z
NOW = dt.datetime(2022, 9, 10, tzinfo=dt.timezone.utc)

SENDER: dict[str, typ.Any] = {
    "type": "User",
    "login": "namoscato",
    "avatar_url": "github.com/namoscato",
}


def pull_request_body(**overrides: typ.Any) -> dict[str, typ.Any]:
    body: dict[str, typ.Any] = {
        "pull_request": {
            "title": "PR-TITLE",
            "number": 1,
            "html_url": "github.com/PR-1",
            "head": {"ref": "my-pr"},
        },
        "sender": dict(SENDER),
    }
    body.update(overrides)
    return body


def push_body(**overrides: typ.Any) -> dict[str, typ.Any]:
    body: dict[str, typ.Any] = {
        "head_commit": {"message": "COMMIT-MESSAGE", "url": "github.com/commit"},
        "sender": dict(SENDER),
    }
    body.update(overrides)
    return body


def make_context(
    event_name: str,
    payload: PullRequestPayload | PushPayload,
) -> WorkflowContext:
    return WorkflowContext(
        event_name=event_name,
        repository_owner="namoscato",
        repository_name="action-testing",
        workflow_name="Deploy App",
        job_name="JOB",
        commit_sha=SHA,
        payload=payload,
    )


@pytest.fixture
def pr_context() -> WorkflowContext:
    return make_context(
        "pull_request", PullRequestPayload.model_validate(pull_request_body())
    )


@pytest.fixture
def push_context() -> WorkflowContext:
    return make_context("push", PushPayload.model_validate(push_body()))


class FakeTransport:
    """Records create/update calls in the order they were made."""

    def __init__(self, ts: str = "TS") -> None:
        self.ts = ts
        self.calls: list[tuple[str, Message]] = []

    @property
    def created(self) -> list[Message]:
        return [message for kind, message in self.calls if kind == "create"]

    @property
    def updated(self) -> list[Message]:
        return [message for kind, message in self.calls if kind == "update"]

    async def create(self, message: Message) -> str:
        self.calls.append(("create", message))
        return self.ts

    async def update(self, message: Message) -> None:
        self.calls.append(("update", message))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
