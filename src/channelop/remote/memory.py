"""In-memory remote platform for tests and local runs.

Behaves like the Slack Web API for the operations the core uses: stored
topic/purpose text is HTML-escaped, duplicate names are rejected, and the
platform error codes are the real ones. Every call is appended to ``calls``
so tests can assert which remote operations were issued.
"""

from __future__ import annotations

import html
import itertools
from dataclasses import dataclass, field, replace

from channelop.errors import ChannelOpError, ConflictError, NotFoundError, RemoteError
from channelop.models import ObservedChannelState, RemoteUser

WRITE_METHODS = frozenset({
    "create_channel",
    "set_purpose",
    "set_topic",
    "rename_channel",
    "archive_channel",
    "unarchive_channel",
    "invite_members",
    "remove_member",
})


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


@dataclass
class _Channel:
    state: ObservedChannelState
    members: list[str] = field(default_factory=list)


class InMemorySlackAPI:
    """Fake remote API holding channels and users in dictionaries."""

    def __init__(self, *, bot_user_id: str = "UBOT") -> None:
        self.bot_user_id = bot_user_id
        self.channels: dict[str, _Channel] = {}
        self.users: dict[str, RemoteUser] = {}
        self.calls: list[tuple[str, tuple]] = []
        self.failures: dict[tuple[str, str], ChannelOpError] = {}
        self._ids = itertools.count(1)
        self.add_user(RemoteUser(id=bot_user_id, email="", is_bot=True))

    # --- Seeding / inspection helpers ---

    def add_user(self, user: RemoteUser) -> RemoteUser:
        self.users[user.id] = user
        return user

    def add_channel(
        self,
        name: str,
        *,
        remote_id: str | None = None,
        description: str = "",
        topic: str = "",
        private: bool = False,
        archived: bool = False,
        members: list[str] | None = None,
    ) -> ObservedChannelState:
        """Seed a channel. ``description``/``topic`` are stored as given (already escaped)."""
        remote_id = remote_id or f"C{next(self._ids):04d}"
        state = ObservedChannelState(
            remote_id=remote_id,
            name=name,
            description=description,
            topic=topic,
            private=private,
            archived=archived,
        )
        self.channels[remote_id] = _Channel(state=state, members=list(members or []))
        return state

    def fail(self, method: str, key: str, error: ChannelOpError) -> None:
        """Make ``method`` raise ``error`` whenever ``key`` is one of its arguments."""
        self.failures[(method, key)] = error

    def called(self, method: str) -> list[tuple]:
        return [args for name, args in self.calls if name == method]

    @property
    def writes(self) -> list[tuple[str, tuple]]:
        return [(name, args) for name, args in self.calls if name in WRITE_METHODS]

    def _record(self, method: str, *args) -> None:
        self.calls.append((method, args))
        keys: list[str] = []
        for arg in args:
            keys.extend(arg if isinstance(arg, tuple) else [str(arg)])
        for key in keys:
            error = self.failures.get((method, key))
            if error is not None:
                raise error

    def _channel(self, channel_id: str) -> _Channel:
        try:
            return self.channels[channel_id]
        except KeyError:
            raise NotFoundError(f"channel {channel_id}", code="channel_not_found") from None

    def _update(self, channel_id: str, **changes) -> ObservedChannelState:
        ch = self._channel(channel_id)
        ch.state = replace(ch.state, **changes)
        return ch.state

    # --- Channels ---

    def get_channel_info(self, channel_id: str) -> ObservedChannelState:
        self._record("get_channel_info", channel_id)
        return self._channel(channel_id).state

    def create_channel(self, name: str, is_private: bool) -> ObservedChannelState:
        self._record("create_channel", name, is_private)
        if any(ch.state.name == name for ch in self.channels.values()):
            raise ConflictError(f"channel {name} exists", code="name_taken")
        state = self.add_channel(name, private=is_private, members=[self.bot_user_id])
        return state

    def set_purpose(self, channel_id: str, purpose: str) -> ObservedChannelState:
        self._record("set_purpose", channel_id, purpose)
        return self._update(channel_id, description=_escape(purpose))

    def set_topic(self, channel_id: str, topic: str) -> ObservedChannelState:
        self._record("set_topic", channel_id, topic)
        return self._update(channel_id, topic=_escape(topic))

    def rename_channel(self, channel_id: str, name: str) -> ObservedChannelState:
        self._record("rename_channel", channel_id, name)
        if any(ch.state.name == name and cid != channel_id for cid, ch in self.channels.items()):
            raise ConflictError(f"channel {name} exists", code="name_taken")
        return self._update(channel_id, name=name)

    def archive_channel(self, channel_id: str) -> None:
        self._record("archive_channel", channel_id)
        if self._channel(channel_id).state.archived:
            raise RemoteError("already archived", code="already_archived")
        self._update(channel_id, archived=True)

    def unarchive_channel(self, channel_id: str) -> None:
        self._record("unarchive_channel", channel_id)
        if not self._channel(channel_id).state.archived:
            raise RemoteError("not archived", code="not_archived")
        self._update(channel_id, archived=False)

    def list_channels(
        self, *, cursor: str = "", limit: int = 200
    ) -> tuple[list[ObservedChannelState], str]:
        self._record("list_channels", cursor)
        return _page([ch.state for ch in self.channels.values()], cursor, limit)

    # --- Members ---

    def list_channel_members(
        self, channel_id: str, *, cursor: str = "", limit: int = 1000
    ) -> tuple[list[str], str]:
        self._record("list_channel_members", channel_id, cursor)
        return _page(self._channel(channel_id).members, cursor, limit)

    def invite_members(self, channel_id: str, user_ids: list[str]) -> None:
        self._record("invite_members", channel_id, tuple(user_ids))
        ch = self._channel(channel_id)
        for user_id in user_ids:
            if user_id == self.bot_user_id:
                raise RemoteError("cannot invite self", code="cant_invite_self")
            if user_id not in self.users:
                raise NotFoundError(f"user {user_id}", code="user_not_found")
            if user_id in ch.members:
                raise RemoteError("already in channel", code="already_in_channel")
            ch.members.append(user_id)

    def remove_member(self, channel_id: str, user_id: str) -> None:
        self._record("remove_member", channel_id, user_id)
        ch = self._channel(channel_id)
        if user_id not in ch.members:
            raise RemoteError("not in channel", code="not_in_channel")
        ch.members.remove(user_id)

    # --- Users ---

    def lookup_user_by_email(self, email: str) -> RemoteUser:
        self._record("lookup_user_by_email", email)
        for user in self.users.values():
            if user.email and user.email == email:
                return user
        raise NotFoundError(f"user {email}", code="users_not_found")

    def get_user_info(self, user_id: str) -> RemoteUser:
        self._record("get_user_info", user_id)
        try:
            return self.users[user_id]
        except KeyError:
            raise NotFoundError(f"user {user_id}", code="user_not_found") from None


def _page(items: list, cursor: str, limit: int) -> tuple[list, str]:
    """Slice ``items`` at an offset cursor; the last page returns an empty cursor."""
    start = int(cursor) if cursor else 0
    end = start + limit
    next_cursor = str(end) if end < len(items) else ""
    return list(items[start:end]), next_cursor
