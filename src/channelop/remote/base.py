"""Protocol for the remote channel platform."""

from __future__ import annotations

from typing import Protocol

from channelop.models import ObservedChannelState, RemoteUser

# Platform error codes that mean the invite is already satisfied.
ALREADY_MEMBER_CODES = frozenset({"already_in_channel", "cant_invite_self"})


class SlackAPI(Protocol):
    """Remote operations consumed by the core.

    Every method raises a ``channelop.errors.ChannelOpError`` subclass on
    failure. Returned channel states never carry ``member_ids``; membership
    comes from ``list_channel_members``. Cursors are opaque strings and an
    empty cursor means there are no more pages.
    """

    def get_channel_info(self, channel_id: str) -> ObservedChannelState: ...

    def create_channel(self, name: str, is_private: bool) -> ObservedChannelState: ...

    def set_purpose(self, channel_id: str, purpose: str) -> ObservedChannelState: ...

    def set_topic(self, channel_id: str, topic: str) -> ObservedChannelState: ...

    def rename_channel(self, channel_id: str, name: str) -> ObservedChannelState: ...

    def archive_channel(self, channel_id: str) -> None: ...

    def unarchive_channel(self, channel_id: str) -> None: ...

    def list_channel_members(
        self, channel_id: str, *, cursor: str = "", limit: int = 1000
    ) -> tuple[list[str], str]: ...

    def invite_members(self, channel_id: str, user_ids: list[str]) -> None: ...

    def remove_member(self, channel_id: str, user_id: str) -> None: ...

    def list_channels(
        self, *, cursor: str = "", limit: int = 200
    ) -> tuple[list[ObservedChannelState], str]: ...

    def lookup_user_by_email(self, email: str) -> RemoteUser: ...

    def get_user_info(self, user_id: str) -> RemoteUser: ...
