"""Remote platform capability set: production Slack client and in-memory fake."""

from channelop.remote.base import ALREADY_MEMBER_CODES, SlackAPI
from channelop.remote.memory import InMemorySlackAPI
from channelop.remote.slack_ import SlackWebAPI

__all__ = [
    "ALREADY_MEMBER_CODES",
    "InMemorySlackAPI",
    "SlackAPI",
    "SlackWebAPI",
]
