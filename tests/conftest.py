"""Shared fixtures: an in-memory Slack workspace with a few users."""

from __future__ import annotations

import pytest

from channelop.models import RemoteUser
from channelop.remote.memory import InMemorySlackAPI
from channelop.service.gateway import ChannelGateway

ALICE = RemoteUser(id="U1", email="alice@co.com")
BOB = RemoteUser(id="U2", email="bob@co.com")
CAROL = RemoteUser(id="U3", email="carol@co.com")
HELPER_BOT = RemoteUser(id="B1", email="helper@bots.co.com", is_bot=True)


@pytest.fixture
def api() -> InMemorySlackAPI:
    fake = InMemorySlackAPI()
    for user in (ALICE, BOB, CAROL, HELPER_BOT):
        fake.add_user(user)
    return fake


@pytest.fixture
def gateway(api: InMemorySlackAPI) -> ChannelGateway:
    return ChannelGateway(api, member_page_size=2)
