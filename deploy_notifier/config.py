"""Runtime settings for the deploy notifier."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SLACK_API_BASE = "https://slack.com/api"
DEFAULT_GITHUB_SERVER_URL = "https://github.com"


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


@dataclass(frozen=True)
class Settings:
    """Action inputs, Slack credentials and GitHub run environment."""

    slack_bot_token: str = ""
    slack_channel_id: str = ""
    slack_api_base: str = DEFAULT_SLACK_API_BASE
    status: str = ""
    thread_ts: str = ""
    event_name: str = ""
    event_path: str = ""
    repository: str = ""
    workflow: str = ""
    job: str = ""
    sha: str = ""
    server_url: str = DEFAULT_GITHUB_SERVER_URL
    github_output: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        return cls(
            slack_bot_token=_clean(env.get("SLACK_BOT_TOKEN")),
            slack_channel_id=_clean(env.get("SLACK_CHANNEL_ID")),
            slack_api_base=_clean(env.get("SLACK_API_BASE")) or DEFAULT_SLACK_API_BASE,
            status=_clean(env.get("INPUT_STATUS")),
            thread_ts=_clean(env.get("INPUT_THREAD_TS")),
            event_name=_clean(env.get("GITHUB_EVENT_NAME")),
            event_path=_clean(env.get("GITHUB_EVENT_PATH")),
            repository=_clean(env.get("GITHUB_REPOSITORY")),
            workflow=_clean(env.get("GITHUB_WORKFLOW")),
            job=_clean(env.get("GITHUB_JOB")),
            sha=_clean(env.get("GITHUB_SHA")),
            server_url=_clean(env.get("GITHUB_SERVER_URL")) or DEFAULT_GITHUB_SERVER_URL,
            github_output=_clean(env.get("GITHUB_OUTPUT")),
            log_level=_clean(env.get("LOG_LEVEL")) or "INFO",
        )
