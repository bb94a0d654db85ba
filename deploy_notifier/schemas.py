"""Webhook payload schemas.

Only the fields the notifier reads are declared; GitHub sends many more,
which are kept on the model but otherwise ignored.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Sender(BaseModel):
    """Account that triggered the workflow run."""

    model_config = ConfigDict(extra="allow")

    login: str = ""
    type: Optional[str] = None
    avatar_url: Optional[str] = None


class PullRequestHead(BaseModel):
    model_config = ConfigDict(extra="allow")

    ref: str = ""


class PullRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    number: int
    html_url: str = ""
    head: PullRequestHead = PullRequestHead()


class HeadCommit(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str
    url: str = ""


class PullRequestPayload(BaseModel):
    """``pull_request`` / ``pull_request_target`` event body."""

    model_config = ConfigDict(extra="allow")

    pull_request: PullRequest
    sender: Optional[Sender] = None


class PushPayload(BaseModel):
    """``push`` event body.

    ``head_commit`` is null when a branch is deleted, or when the push
    carried no commits.
    """

    model_config = ConfigDict(extra="allow")

    head_commit: Optional[HeadCommit] = None
    sender: Optional[Sender] = None
