"""Command-line entry point used by the GitHub Action."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Optional

import click
import httpx

from deploy_notifier.config import Settings
from deploy_notifier.errors import ConfigurationError, DeployNotifierError
from deploy_notifier.services.github import load_workflow_context
from deploy_notifier.services.message import DispatchConfig, dispatch
from deploy_notifier.services.slack import SlackClient

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str) -> str:
    """Configure root logging; unknown levels fall back to INFO."""
    normalized = (level or "").strip().upper()
    invalid = normalized not in LOG_LEVELS
    if invalid:
        normalized = "INFO"
    logging.basicConfig(
        level=normalized,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if invalid:
        logger.warning("Unknown LOG_LEVEL %r, using INFO", level)
    return normalized


def write_output(path: str, name: str, value: str) -> None:
    """Append ``name=value`` to the step's GITHUB_OUTPUT file."""
    with open(path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}={value}\n")


def _require(settings: Settings) -> None:
    missing = [
        env
        for env, value in (
            ("SLACK_BOT_TOKEN", settings.slack_bot_token),
            ("SLACK_CHANNEL_ID", settings.slack_channel_id),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")


async def run(settings: Settings) -> Optional[str]:
    _require(settings)
    context = load_workflow_context(settings)
    transport = SlackClient(
        settings.slack_bot_token,
        settings.slack_channel_id,
        base_url=settings.slack_api_base,
    )
    config = DispatchConfig(
        status=settings.status or None,
        thread_reference_id=settings.thread_ts or None,
    )
    return await dispatch(context, config, transport)


@click.command()
@click.option("--status", default=None, help="running, success, failure or cancelled.")
@click.option("--thread-ts", default=None, help="Summary message ts from the first step.")
def main(status: Optional[str], thread_ts: Optional[str]) -> None:
    """Post or update a Slack deployment thread for the current workflow run."""
    settings = Settings.from_env()
    if status is not None:
        settings = replace(settings, status=status.strip())
    if thread_ts is not None:
        settings = replace(settings, thread_ts=thread_ts.strip())
    configure_logging(settings.log_level)

    try:
        ts = asyncio.run(run(settings))
    except (DeployNotifierError, httpx.HTTPError) as exc:
        logger.error("Deployment notification failed: %s", exc)
        raise click.ClickException(str(exc)) from exc

    if ts:
        if settings.github_output:
            write_output(settings.github_output, "ts", ts)
        click.echo(ts)
