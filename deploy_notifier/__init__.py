"""Slack deployment notifications for GitHub Actions workflow runs."""

from deploy_notifier.errors import (
    ConfigurationError,
    DeployNotifierError,
    InvalidStatusError,
    SlackAPIError,
    UnsupportedEventError,
)
from deploy_notifier.models import Message, RunStatus, WorkflowContext
from deploy_notifier.services.message import ChatTransport, DispatchConfig, dispatch

__all__ = [
    "ChatTransport",
    "ConfigurationError",
    "DeployNotifierError",
    "DispatchConfig",
    "InvalidStatusError",
    "Message",
    "RunStatus",
    "SlackAPIError",
    "UnsupportedEventError",
    "WorkflowContext",
    "dispatch",
]
