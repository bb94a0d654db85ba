"""Slack Web API transport."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from deploy_notifier.config import DEFAULT_SLACK_API_BASE
from deploy_notifier.errors import SlackAPIError
from deploy_notifier.models import Block, ContextBlock, Message, SectionBlock

HTTP_TIMEOUT_SECONDS = 15

JSONDict = dict[str, Any]

logger = logging.getLogger(__name__)


def _block_payload(block: Block) -> JSONDict:
    if isinstance(block, SectionBlock):
        return {"type": "section", "text": {"type": "mrkdwn", "text": block.text}}
    if isinstance(block, ContextBlock):
        return {
            "type": "context",
            "elements": [{"type": "mrkdwn", "text": text} for text in block.elements],
        }
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def to_slack_payload(message: Message, channel: str) -> JSONDict:
    """Map a Message onto the chat.postMessage / chat.update JSON body."""
    payload: JSONDict = {
        "channel": channel,
        "text": message.plain_text,
        "blocks": [_block_payload(block) for block in message.blocks],
    }
    if message.display_name is not None:
        payload["username"] = message.display_name
    if message.avatar_url is not None:
        payload["icon_url"] = message.avatar_url
    if message.broadcast_reply is not None:
        payload["reply_broadcast"] = message.broadcast_reply
    if message.thread_id is not None:
        payload["thread_ts"] = message.thread_id
    if message.edit_target_id is not None:
        payload["ts"] = message.edit_target_id
    return payload


class SlackClient:
    """Posts and edits messages in one Slack channel with a bot token."""

    def __init__(
        self,
        token: str,
        channel: str,
        *,
        base_url: str = DEFAULT_SLACK_API_BASE,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.channel = channel
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    async def _call(self, method: str, payload: JSONDict) -> JSONDict:
        url = f"{self._base_url}/{method}"
        headers = {"Authorization": f"Bearer {self._token}"}
        if self._http_client is not None:
            resp = await self._http_client.post(url, json=payload, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as client:
                resp = await client.post(url, json=payload, headers=headers)

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        if resp.status_code >= 300 or not data.get("ok", False):
            error = data.get("error")
            logger.error("Slack %s failed: %s %s", method, resp.status_code, error)
            raise SlackAPIError(method, resp.status_code, error)
        return data

    async def create(self, message: Message) -> str:
        """Post a new message and return its ``ts`` identifier."""
        payload = to_slack_payload(message, self.channel)
        payload["unfurl_links"] = False
        data = await self._call("chat.postMessage", payload)
        ts = data.get("ts")
        if not ts:
            raise SlackAPIError("chat.postMessage", 200, "missing_ts")
        logger.info("Posted message %s to %s", ts, self.channel)
        return str(ts)

    async def update(self, message: Message) -> None:
        """Replace the message identified by ``message.edit_target_id``."""
        if not message.edit_target_id:
            raise ValueError("update requires a message with edit_target_id")
        await self._call("chat.update", to_slack_payload(message, self.channel))
        logger.info("Updated message %s in %s", message.edit_target_id, self.channel)
