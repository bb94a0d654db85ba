"""Entry point tying classification, composition and delivery together."""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from deploy_notifier.models import Message, RunStatus, WorkflowContext
from deploy_notifier.services.progress import compose_progress
from deploy_notifier.services.summary import compose_summary

logger = logging.getLogger(__name__)


class ChatTransport(Protocol):
    async def create(self, message: Message) -> str: ...

    async def update(self, message: Message) -> None: ...


@dataclass(frozen=True)
class DispatchConfig:
    """Per-invocation inputs; no ``thread_reference_id`` means a new run."""

    status: Union[RunStatus, str, None] = None
    thread_reference_id: Optional[str] = None


async def dispatch(
    context: WorkflowContext,
    config: DispatchConfig,
    transport: ChatTransport,
    *,
    now: Optional[dt.datetime] = None,
) -> Optional[str]:
    """
    Post the message for the current stage of a run.

    Returns
    -------
    str | None
        The identifier of the new summary message at the initial stage,
        otherwise None. Transport failures propagate unchanged.
    """
    if not config.thread_reference_id:
        logger.info("Posting deployment summary for %s", context.repository)
        return await transport.create(compose_summary(context))

    progress = compose_progress(
        context,
        RunStatus.parse(config.status),
        config.thread_reference_id,
        now=now,
    )
    logger.info(
        "Posting %r into thread %s", progress.message.plain_text, config.thread_reference_id
    )
    await transport.create(progress.message)
    if progress.summary_edit is not None:
        await transport.update(progress.summary_edit)
    return None
