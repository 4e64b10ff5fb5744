"""Slack channel reconciliation core."""

from channelop.errors import (
    ChannelOpError,
    ConflictError,
    NotFoundError,
    PartialMembershipError,
    RemoteError,
    ValidationError,
)
from channelop.models import DesiredChannelSpec, ObservedChannelState, RemoteUser

__all__ = [
    "ChannelOpError",
    "ConflictError",
    "DesiredChannelSpec",
    "NotFoundError",
    "ObservedChannelState",
    "PartialMembershipError",
    "RemoteError",
    "RemoteUser",
    "ValidationError",
]
