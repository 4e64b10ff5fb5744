"""Value types shared by the remote layer and the reconciliation core."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class DesiredChannelSpec:
    """Caller-declared target configuration for a channel."""

    name: str
    description: str = ""
    topic: str = ""
    private: bool = False
    members: frozenset[str] = field(default_factory=frozenset)  # emails, or user IDs when projected

    def __post_init__(self) -> None:
        # Accept any iterable; membership is a set regardless of input order.
        if not isinstance(self.members, frozenset):
            object.__setattr__(self, "members", frozenset(self.members))


@dataclass(frozen=True, slots=True)
class ObservedChannelState:
    """Current remote truth for a channel.

    ``description`` and ``topic`` are stored HTML-escaped by the platform.
    ``member_ids`` is only populated by a full fetch; attribute writes and
    channel listings return it empty.
    """

    remote_id: str
    name: str
    description: str = ""
    topic: str = ""
    private: bool = False
    member_ids: frozenset[str] = field(default_factory=frozenset)
    archived: bool = False


@dataclass(frozen=True, slots=True)
class RemoteUser:
    id: str
    email: str = ""
    is_bot: bool = False
