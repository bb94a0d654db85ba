"""Error types raised while composing or delivering deployment messages."""

from __future__ import annotations

from typing import Optional, Sequence


class DeployNotifierError(Exception):
    """Base class for failures that should fail the workflow step."""


class ConfigurationError(DeployNotifierError):
    """Raised when required settings or run context are missing or malformed."""


class UnsupportedEventError(DeployNotifierError, ValueError):
    """Raised when the triggering event has no recognised payload shape."""

    def __init__(self, event_name: str, supported: Sequence[str]) -> None:
        self.event_name = event_name
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported event {event_name or '<none>'} "
            f"(currently supported events include: {', '.join(self.supported)})"
        )


class InvalidStatusError(DeployNotifierError, ValueError):
    """Raised when a run status is not one of the known values."""

    def __init__(self, value: object, allowed: Sequence[str]) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid status {value!r} (expected one of: {', '.join(self.allowed)})"
        )


class SlackAPIError(DeployNotifierError):
    """Raised when the Slack Web API rejects a request."""

    def __init__(
        self,
        method: str,
        status_code: int,
        error: Optional[str] = None,
    ) -> None:
        self.method = method
        self.status_code = status_code
        self.error = error
        detail = error or "unknown_error"
        super().__init__(f"Slack error: {method} {status_code} {detail}")
