"""Entry point wiring — configures logging and builds a reconciler on the Slack Web API."""

from __future__ import annotations

import logging

from slack_sdk import WebClient

from channelop.config import settings
from channelop.remote.slack_ import SlackWebAPI
from channelop.service.reconciler import ChannelReconciler

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)-7s %(name)s — %(message)s")
log = logging.getLogger("channelop")


def build_reconciler(token: str | None = None) -> ChannelReconciler:
    """Build a reconciler sharing one Slack client handle."""
    token = token or settings.slack_api_token
    if not token:
        raise ValueError("No Slack API token configured (set SLACK_API_TOKEN)")

    api = SlackWebAPI(WebClient(token=token))
    log.info("Slack channel reconciler ready")
    return ChannelReconciler(
        api,
        channel_page_size=settings.channel_page_size,
        member_page_size=settings.member_page_size,
    )
