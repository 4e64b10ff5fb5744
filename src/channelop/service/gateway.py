"""Remote Gateway — channel operations addressed by remote ID."""

from __future__ import annotations

import html
import logging
from dataclasses import replace

from channelop.config import settings
from channelop.errors import ChannelOpError
from channelop.models import ObservedChannelState, RemoteUser
from channelop.remote.base import SlackAPI

log = logging.getLogger(__name__)


class ChannelGateway:
    """Synchronous channel operations on top of a ``SlackAPI``.

    Attribute setters read the current value, unescape it and only write
    on mismatch, so calling them repeatedly with the same value is free of
    remote writes.
    """

    def __init__(self, api: SlackAPI, *, member_page_size: int | None = None) -> None:
        self.api = api
        self.member_page_size = member_page_size or settings.member_page_size

    def fetch(self, remote_id: str) -> ObservedChannelState:
        """Fetch attributes and membership of a channel."""
        channel = self._info(remote_id)
        return replace(channel, member_ids=self.list_members(remote_id))

    def create(self, name: str, private: bool) -> str:
        """Create a channel and return its remote ID.

        A duplicate name raises ConflictError; use ChannelFinder for
        find-or-create.
        """
        log.info("Creating Slack channel %s (private=%s)", name, private)
        channel = self.api.create_channel(name, private)
        log.debug("Created Slack channel %s as %s", name, channel.remote_id)
        return channel.remote_id

    def set_description(self, remote_id: str, text: str) -> ObservedChannelState:
        channel = self._info(remote_id)
        if html.unescape(channel.description) == text:
            return channel

        log.debug("Setting description of channel %s", remote_id)
        try:
            return self.api.set_purpose(remote_id, text)
        except ChannelOpError as exc:
            log.error("Error setting description of channel %s: %s", remote_id, exc)
            raise

    def set_topic(self, remote_id: str, text: str) -> ObservedChannelState:
        channel = self._info(remote_id)
        if html.unescape(channel.topic) == text:
            return channel

        log.debug("Setting topic of channel %s", remote_id)
        try:
            return self.api.set_topic(remote_id, text)
        except ChannelOpError as exc:
            log.error("Error setting topic of channel %s: %s", remote_id, exc)
            raise

    def rename(self, remote_id: str, new_name: str) -> ObservedChannelState:
        channel = self._info(remote_id)
        if html.unescape(channel.name) == new_name:
            return channel

        log.debug("Renaming channel %s to %s", remote_id, new_name)
        try:
            return self.api.rename_channel(remote_id, new_name)
        except ChannelOpError as exc:
            log.error("Error renaming channel %s: %s", remote_id, exc)
            raise

    def archive(self, remote_id: str) -> None:
        log.debug("Archiving channel %s", remote_id)
        try:
            self.api.archive_channel(remote_id)
        except ChannelOpError as exc:
            log.error("Error archiving channel %s: %s", remote_id, exc)
            raise

    def unarchive(self, remote_id: str) -> None:
        log.debug("Unarchiving channel %s", remote_id)
        try:
            self.api.unarchive_channel(remote_id)
        except ChannelOpError as exc:
            log.error("Error unarchiving channel %s: %s", remote_id, exc)
            raise

    def list_members(self, remote_id: str) -> frozenset[str]:
        """All member IDs of a channel, bots included, across every page."""
        return frozenset(self.list_member_ids(remote_id))

    def list_member_ids(self, remote_id: str) -> list[str]:
        """Member IDs in the order the platform lists them, duplicates dropped."""
        member_ids: list[str] = []
        seen: set[str] = set()
        cursor = ""
        while True:
            try:
                page, cursor = self.api.list_channel_members(
                    remote_id, cursor=cursor, limit=self.member_page_size
                )
            except ChannelOpError as exc:
                log.error("Error getting users in channel %s: %s", remote_id, exc)
                raise
            for user_id in page:
                if user_id not in seen:
                    seen.add(user_id)
                    member_ids.append(user_id)
            if not cursor:
                return member_ids

    def invite(self, remote_id: str, user_id: str) -> None:
        self.api.invite_members(remote_id, [user_id])

    def kick(self, remote_id: str, user_id: str) -> None:
        self.api.remove_member(remote_id, user_id)

    # --- Users ---

    def user_by_email(self, email: str) -> RemoteUser:
        try:
            return self.api.lookup_user_by_email(email)
        except ChannelOpError as exc:
            log.error("Error fetching user by email %s: %s", email, exc)
            raise

    def user_by_id(self, user_id: str) -> RemoteUser:
        try:
            return self.api.get_user_info(user_id)
        except ChannelOpError as exc:
            log.error("Error fetching user info %s: %s", user_id, exc)
            raise

    def _info(self, remote_id: str) -> ObservedChannelState:
        try:
            return self.api.get_channel_info(remote_id)
        except ChannelOpError as exc:
            log.error("Error fetching channel %s: %s", remote_id, exc)
            raise
