"""Channel Finder — name lookup across the whole channel collection."""

from __future__ import annotations

import logging

from channelop.config import settings
from channelop.errors import NotFoundError
from channelop.models import ObservedChannelState
from channelop.remote.base import SlackAPI

log = logging.getLogger(__name__)


class ChannelFinder:
    def __init__(self, api: SlackAPI, *, page_size: int | None = None) -> None:
        self.api = api
        self.page_size = page_size or settings.channel_page_size

    def find_by_name(self, name: str) -> ObservedChannelState:
        """Return the first channel named ``name``, public or private, archived or not.

        Pages are requested in cursor order until a match is found or the
        platform returns an empty cursor. Remote errors propagate unchanged.
        """
        cursor = ""
        pages = 0
        while True:
            channels, cursor = self.api.list_channels(cursor=cursor, limit=self.page_size)
            pages += 1
            for channel in channels:
                if channel.name == name:
                    log.debug("Found channel %s as %s after %d page(s)", name, channel.remote_id, pages)
                    return channel
            if not cursor:
                break

        raise NotFoundError(f"No channel named {name!r}")
