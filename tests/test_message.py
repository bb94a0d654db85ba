"""Unit tests for the message dispatcher."""

from __future__ import annotations

import pytest

from deploy_notifier.errors import InvalidStatusError, SlackAPIError, UnsupportedEventError
from deploy_notifier.models import Message, WorkflowContext
from deploy_notifier.schemas import PushPayload
from deploy_notifier.services.message import DispatchConfig, dispatch
from tests.conftest import NOW, THREAD_TS, FakeTransport, make_context, push_body


@pytest.mark.asyncio
async def test_initial_stage_posts_summary(
    pr_context: WorkflowContext, transport: FakeTransport
) -> None:
    ts = await dispatch(pr_context, DispatchConfig(), transport, now=NOW)

    assert ts == "TS", "Expected the new summary ts to be returned."
    assert [kind for kind, _ in transport.calls] == ["create"]
    assert transport.created[0].plain_text == "Deploying action-testing: PR-TITLE (#1)"


@pytest.mark.asyncio
async def test_initial_stage_ignores_status(
    pr_context: WorkflowContext, transport: FakeTransport
) -> None:
    ts = await dispatch(pr_context, DispatchConfig(status="failure"), transport)
    assert ts == "TS"
    assert transport.updated == []


@pytest.mark.asyncio
async def test_success_posts_threaded_reply_only(
    push_context: WorkflowContext, transport: FakeTransport
) -> None:
    config = DispatchConfig(status="success", thread_reference_id=THREAD_TS)

    ts = await dispatch(push_context, config, transport, now=NOW)

    assert ts is None
    assert len(transport.created) == 1
    reply = transport.created[0]
    assert reply.plain_text == "Finished JOB"
    assert reply.broadcast_reply is False
    assert reply.thread_id == THREAD_TS
    assert transport.updated == []


@pytest.mark.asyncio
async def test_cancelled_posts_then_edits_summary(
    push_context: WorkflowContext, transport: FakeTransport
) -> None:
    config = DispatchConfig(status="cancelled", thread_reference_id=THREAD_TS)

    ts = await dispatch(push_context, config, transport, now=NOW)

    assert ts is None
    assert [kind for kind, _ in transport.calls] == ["create", "update"]
    reply, edit = (message for _, message in transport.calls)
    assert reply.plain_text == "Cancelled JOB"
    assert reply.broadcast_reply is True
    assert edit.edit_target_id == THREAD_TS
    assert edit.plain_text == "Cancelled deploying action-testing: COMMIT-MESSAGE"


@pytest.mark.asyncio
async def test_progress_stage_requires_known_status(
    push_context: WorkflowContext, transport: FakeTransport
) -> None:
    config = DispatchConfig(status=None, thread_reference_id=THREAD_TS)
    with pytest.raises(InvalidStatusError):
        await dispatch(push_context, config, transport, now=NOW)
    assert transport.calls == []


@pytest.mark.asyncio
async def test_unsupported_event_posts_nothing(transport: FakeTransport) -> None:
    context = make_context("push", PushPayload.model_validate(push_body(head_commit=None)))
    with pytest.raises(UnsupportedEventError):
        await dispatch(context, DispatchConfig(), transport)
    assert transport.calls == []


class _FailingTransport(FakeTransport):
    async def create(self, message: Message) -> str:
        self.calls.append(("create", message))
        raise SlackAPIError("chat.postMessage", 200, "channel_not_found")


@pytest.mark.asyncio
async def test_transport_failure_propagates_without_edit(
    push_context: WorkflowContext,
) -> None:
    transport = _FailingTransport()
    config = DispatchConfig(status="failure", thread_reference_id=THREAD_TS)

    with pytest.raises(SlackAPIError, match="channel_not_found"):
        await dispatch(push_context, config, transport, now=NOW)

    assert [kind for kind, _ in transport.calls] == ["create"]
