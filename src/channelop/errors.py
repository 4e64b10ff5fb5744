"""Error taxonomy for channel reconciliation."""

from __future__ import annotations

from typing import Any


class ChannelOpError(Exception):
    """Base exception for everything the reconciliation core raises."""

    def __init__(self, message: str, *, code: str = "", raw: Any = None) -> None:
        super().__init__(message)
        self.code = code  # platform error code, empty for local/transport errors
        self.raw = raw


class NotFoundError(ChannelOpError):
    """Channel or user is absent on the remote platform."""


class ConflictError(ChannelOpError):
    """A channel with the same name already exists."""


class RemoteError(ChannelOpError):
    """Generic transport, auth or platform failure."""


class ValidationError(ChannelOpError):
    """Desired spec fails validation before any remote call."""


class PartialMembershipError(ChannelOpError):
    """Aggregate of per-member invite failures."""

    def __init__(self, errors: list[ChannelOpError]) -> None:
        details = "; ".join(str(e) for e in errors)
        super().__init__(f"{len(errors)} member invite(s) failed: {details}")
        self.errors = list(errors)
