"""Observed state → desired spec projection, used when adopting a channel."""

from __future__ import annotations

import html

from channelop.models import DesiredChannelSpec, ObservedChannelState


def project(observed: ObservedChannelState) -> DesiredChannelSpec:
    """Build a new desired spec from observed state.

    Text fields are unescaped back to plain text rather than copied raw, so
    the projected spec does not drift against its own channel. ``members``
    carries the raw observed member IDs, bots included; callers that need
    emails must resolve them themselves.
    """
    return DesiredChannelSpec(
        name=observed.name,
        description=html.unescape(observed.description),
        topic=html.unescape(observed.topic),
        private=observed.private,
        members=observed.member_ids,
    )
