"""Convergence API consumed by the controller."""

from __future__ import annotations

import logging

from channelop.errors import ChannelOpError, ConflictError, NotFoundError, PartialMembershipError
from channelop.models import DesiredChannelSpec, ObservedChannelState
from channelop.remote.base import SlackAPI
from channelop.service.drift import DriftDetector
from channelop.service.finder import ChannelFinder
from channelop.service.gateway import ChannelGateway
from channelop.service.membership import MembershipSynchronizer
from channelop.service.projection import project
from channelop.service.validation import validate

log = logging.getLogger(__name__)


class ChannelReconciler:
    """Drives a remote channel towards a desired spec.

    Holds no per-channel state. Callers must not reconcile the same remote
    ID concurrently: reads and writes are not transactional. Nothing here
    retries; a remote failure ends the attempt and the caller reconciles
    again on its next cycle.
    """

    def __init__(
        self,
        api: SlackAPI,
        *,
        channel_page_size: int | None = None,
        member_page_size: int | None = None,
    ) -> None:
        self.gateway = ChannelGateway(api, member_page_size=member_page_size)
        self.finder = ChannelFinder(api, page_size=channel_page_size)
        self.drift = DriftDetector(self.gateway)
        self.membership = MembershipSynchronizer(self.gateway)

    def reconcile(self, desired: DesiredChannelSpec, remote_id: str | None = None) -> ObservedChannelState:
        """Converge the channel and return its fresh observed state.

        Without ``remote_id`` the channel is created, or adopted by name if
        one already exists. Callers should persist the returned
        ``remote_id`` and pass it on later calls.
        """
        validate(desired)

        if remote_id is None:
            remote_id = self._create_or_adopt(desired)

        observed = self.gateway.fetch(remote_id)
        if observed.archived:
            log.info("Channel %s is archived, unarchiving", remote_id)
            self.gateway.unarchive(remote_id)
            observed = self.gateway.fetch(remote_id)

        if observed.private != desired.private:
            log.warning(
                "Channel %s privacy cannot change after creation (private=%s, desired %s)",
                remote_id,
                observed.private,
                desired.private,
            )

        if not self.drift.needs_reconciliation(desired, observed):
            log.debug("Channel %s is up to date", remote_id)
            return observed

        log.info("Reconciling channel %s (%s)", remote_id, desired.name)
        self.gateway.rename(remote_id, desired.name)
        self.gateway.set_topic(remote_id, desired.topic)
        self.gateway.set_description(remote_id, desired.description)

        if self._membership_may_differ(desired, observed):
            errors = self.membership.invite(remote_id, desired.members)
            self.membership.remove(remote_id, desired.members)
            if errors:
                raise PartialMembershipError(errors)

        return self.gateway.fetch(remote_id)

    def check(self, desired: DesiredChannelSpec, remote_id: str) -> bool:
        """Whether the channel has drifted from ``desired``."""
        return self.drift.needs_reconciliation(desired, self.gateway.fetch(remote_id))

    def finalize(self, remote_id: str) -> None:
        """Archive the channel of a deleted resource."""
        try:
            self.gateway.archive(remote_id)
        except NotFoundError:
            log.info("Channel %s no longer exists, nothing to archive", remote_id)

    def adopt(self, name: str) -> DesiredChannelSpec:
        """Project an existing channel into desired-spec form."""
        found = self.finder.find_by_name(name)
        return project(self.gateway.fetch(found.remote_id))

    def _create_or_adopt(self, desired: DesiredChannelSpec) -> str:
        try:
            return self.gateway.create(desired.name, desired.private)
        except ConflictError:
            log.info("Channel %s already exists, adopting it", desired.name)
            return self.finder.find_by_name(desired.name).remote_id

    def _membership_may_differ(self, desired: DesiredChannelSpec, observed: ObservedChannelState) -> bool:
        # Lookup failures fall through to invite, which records them per member.
        try:
            return self.drift.membership_differs(desired, observed)
        except ChannelOpError as exc:
            log.info("Channel %s: membership check failed (%s), converging membership", observed.remote_id, exc)
            return True
