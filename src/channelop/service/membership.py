"""Membership Synchronizer — invite missing users, remove extraneous ones.

Invites are best-effort: every email is attempted and failures are
collected. Removals are fail-fast: the first failure aborts the call and
leaves the remaining extraneous members in place.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from channelop.errors import ChannelOpError
from channelop.remote.base import ALREADY_MEMBER_CODES
from channelop.service.gateway import ChannelGateway

log = logging.getLogger(__name__)


class MembershipSynchronizer:
    def __init__(self, gateway: ChannelGateway) -> None:
        self.gateway = gateway

    def invite(self, remote_id: str, desired_emails: Iterable[str]) -> list[ChannelOpError]:
        """Invite every desired user; return the failures (empty on success)."""
        errors: list[ChannelOpError] = []

        for email in sorted(set(desired_emails)):
            try:
                user = self.gateway.user_by_email(email)
            except ChannelOpError as exc:
                errors.append(exc)
                continue

            log.debug("Inviting user %s to channel %s", user.id, remote_id)
            try:
                self.gateway.invite(remote_id, user.id)
            except ChannelOpError as exc:
                if exc.code in ALREADY_MEMBER_CODES:
                    continue
                log.error("Error inviting user %s to channel %s: %s", user.id, remote_id, exc)
                errors.append(exc)

        return errors

    def remove(self, remote_id: str, desired_emails: Iterable[str]) -> None:
        """Remove non-bot members whose email is not desired; stop at the first failure."""
        desired = set(desired_emails)

        for user_id in self.gateway.list_member_ids(remote_id):
            user = self.gateway.user_by_id(user_id)
            if user.is_bot or user.email in desired:
                continue

            log.info("Removing user %s from channel %s", user_id, remote_id)
            try:
                self.gateway.kick(remote_id, user_id)
            except ChannelOpError as exc:
                log.error("Error removing user %s from channel %s: %s", user_id, remote_id, exc)
                raise
