"""Slack provider — Web API client with error code mapping."""

from __future__ import annotations

import logging
from typing import Any

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from channelop.errors import ChannelOpError, ConflictError, NotFoundError, RemoteError
from channelop.models import ObservedChannelState, RemoteUser

log = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"channel_not_found", "user_not_found", "users_not_found"})
_CONFLICT_CODES = frozenset({"name_taken"})

_CHANNEL_TYPES = "private_channel,public_channel"


class SlackWebAPI:
    """Remote API backed by ``slack_sdk.WebClient``.

    The client is injected so a single handle can be shared by every
    component; it holds no per-channel state.
    """

    def __init__(self, client: WebClient) -> None:
        self._client = client

    def _call(self, method: str, **kwargs: Any) -> Any:
        try:
            return getattr(self._client, method)(**kwargs)
        except SlackApiError as exc:
            raise _map_api_error(method, exc) from exc
        except SlackClientError as exc:
            raise RemoteError(f"{method}: {exc}", raw=exc) from exc

    # --- Channels ---

    def get_channel_info(self, channel_id: str) -> ObservedChannelState:
        resp = self._call("conversations_info", channel=channel_id)
        return _parse_channel(resp["channel"])

    def create_channel(self, name: str, is_private: bool) -> ObservedChannelState:
        resp = self._call("conversations_create", name=name, is_private=is_private)
        return _parse_channel(resp["channel"])

    def set_purpose(self, channel_id: str, purpose: str) -> ObservedChannelState:
        self._call("conversations_setPurpose", channel=channel_id, purpose=purpose)
        # setPurpose only echoes the purpose string, not the channel.
        return self.get_channel_info(channel_id)

    def set_topic(self, channel_id: str, topic: str) -> ObservedChannelState:
        resp = self._call("conversations_setTopic", channel=channel_id, topic=topic)
        return _parse_channel(resp["channel"])

    def rename_channel(self, channel_id: str, name: str) -> ObservedChannelState:
        resp = self._call("conversations_rename", channel=channel_id, name=name)
        return _parse_channel(resp["channel"])

    def archive_channel(self, channel_id: str) -> None:
        self._call("conversations_archive", channel=channel_id)

    def unarchive_channel(self, channel_id: str) -> None:
        self._call("conversations_unarchive", channel=channel_id)

    def list_channels(
        self, *, cursor: str = "", limit: int = 200
    ) -> tuple[list[ObservedChannelState], str]:
        resp = self._call(
            "conversations_list",
            types=_CHANNEL_TYPES,
            exclude_archived=False,
            cursor=cursor or None,
            limit=limit,
        )
        channels = [_parse_channel(c) for c in resp.get("channels", [])]
        return channels, _next_cursor(resp)

    # --- Members ---

    def list_channel_members(
        self, channel_id: str, *, cursor: str = "", limit: int = 1000
    ) -> tuple[list[str], str]:
        resp = self._call(
            "conversations_members", channel=channel_id, cursor=cursor or None, limit=limit
        )
        return list(resp.get("members", [])), _next_cursor(resp)

    def invite_members(self, channel_id: str, user_ids: list[str]) -> None:
        self._call("conversations_invite", channel=channel_id, users=",".join(user_ids))

    def remove_member(self, channel_id: str, user_id: str) -> None:
        self._call("conversations_kick", channel=channel_id, user=user_id)

    # --- Users ---

    def lookup_user_by_email(self, email: str) -> RemoteUser:
        resp = self._call("users_lookupByEmail", email=email)
        return _parse_user(resp["user"])

    def get_user_info(self, user_id: str) -> RemoteUser:
        resp = self._call("users_info", user=user_id)
        return _parse_user(resp["user"])


def _map_api_error(method: str, exc: SlackApiError) -> ChannelOpError:
    """Translate a platform error response into the core's taxonomy."""
    code = ""
    if exc.response is not None:
        code = exc.response.get("error", "") or ""
    message = f"{method}: {code or exc}"
    if code in _NOT_FOUND_CODES:
        return NotFoundError(message, code=code, raw=exc)
    if code in _CONFLICT_CODES:
        return ConflictError(message, code=code, raw=exc)
    return RemoteError(message, code=code, raw=exc)


def _next_cursor(resp: Any) -> str:
    return (resp.get("response_metadata") or {}).get("next_cursor", "") or ""


def _parse_channel(data: dict) -> ObservedChannelState:
    return ObservedChannelState(
        remote_id=data["id"],
        name=data.get("name", ""),
        description=(data.get("purpose") or {}).get("value", ""),
        topic=(data.get("topic") or {}).get("value", ""),
        private=bool(data.get("is_private", False)),
        archived=bool(data.get("is_archived", False)),
    )


def _parse_user(data: dict) -> RemoteUser:
    return RemoteUser(
        id=data["id"],
        email=(data.get("profile") or {}).get("email", "") or "",
        is_bot=bool(data.get("is_bot", False)),
    )
