"""Drift Detector — does a channel need corrective action?"""

from __future__ import annotations

import html
import logging

from channelop.models import DesiredChannelSpec, ObservedChannelState
from channelop.service.gateway import ChannelGateway

log = logging.getLogger(__name__)


class DriftDetector:
    """Compares a desired spec to observed state.

    Checks run in a fixed order and stop at the first mismatch: name, topic,
    description, then membership. Membership needs a user lookup per member,
    so the cheap attribute checks come first. Any lookup error propagates and
    no verdict is returned.
    """

    def __init__(self, gateway: ChannelGateway) -> None:
        self.gateway = gateway

    def needs_reconciliation(self, desired: DesiredChannelSpec, observed: ObservedChannelState) -> bool:
        if html.unescape(observed.name) != desired.name:
            log.debug("Channel %s: name differs", observed.remote_id)
            return True
        if html.unescape(observed.topic) != desired.topic:
            log.debug("Channel %s: topic differs", observed.remote_id)
            return True
        if html.unescape(observed.description) != desired.description:
            log.debug("Channel %s: description differs", observed.remote_id)
            return True
        return self.membership_differs(desired, observed)

    def membership_differs(self, desired: DesiredChannelSpec, observed: ObservedChannelState) -> bool:
        # Desired member missing from the channel
        for email in sorted(desired.members):
            user = self.gateway.user_by_email(email)
            if user.id not in observed.member_ids:
                log.debug("Channel %s: %s is not a member", observed.remote_id, email)
                return True

        # Non-bot member that should not be there
        for user_id in sorted(observed.member_ids):
            user = self.gateway.user_by_id(user_id)
            if not user.is_bot and user.email not in desired.members:
                log.debug("Channel %s: %s should be removed", observed.remote_id, user_id)
                return True

        return False
