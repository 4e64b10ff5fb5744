"""Tests for best-effort invites and fail-fast removals."""

from __future__ import annotations

import pytest

from channelop.errors import NotFoundError, RemoteError
from channelop.models import RemoteUser
from channelop.service.membership import MembershipSynchronizer


@pytest.fixture
def sync(gateway) -> MembershipSynchronizer:
    return MembershipSynchronizer(gateway)


class TestInvite:
    def test_invites_every_desired_user(self, api, sync):
        api.add_channel("team-x", remote_id="C1")

        errors = sync.invite("C1", ["alice@co.com", "bob@co.com"])

        assert errors == []
        assert api.channels["C1"].members == ["U1", "U2"]

    def test_partial_failure_is_tolerated(self, api, sync):
        """a invited, b fails lookup, c already a member → one error for b."""
        api.add_channel("team-x", remote_id="C1", members=["U3"])

        errors = sync.invite("C1", ["alice@co.com", "ghost@co.com", "carol@co.com"])

        assert len(errors) == 1
        assert isinstance(errors[0], NotFoundError)
        assert "U1" in api.channels["C1"].members
        assert api.called("invite_members") == [("C1", ("U1",)), ("C1", ("U3",))]

    def test_cant_invite_self_is_success(self, api, sync):
        api.add_user(RemoteUser(id="UBOT", email="operator@co.com", is_bot=True))
        api.add_channel("team-x", remote_id="C1")

        assert sync.invite("C1", ["operator@co.com"]) == []

    def test_other_invite_errors_are_collected(self, api, sync):
        api.add_channel("team-x", remote_id="C1")
        api.fail("invite_members", "U1", RemoteError("restricted", code="restricted_action"))

        errors = sync.invite("C1", ["alice@co.com", "bob@co.com"])

        assert [e.code for e in errors] == ["restricted_action"]
        assert api.channels["C1"].members == ["U2"]

    def test_duplicate_emails_invited_once(self, api, sync):
        api.add_channel("team-x", remote_id="C1")

        sync.invite("C1", ["alice@co.com", "alice@co.com"])

        assert len(api.called("invite_members")) == 1


class TestRemove:
    def test_removes_undesired_humans_only(self, api, sync):
        api.add_channel("team-x", remote_id="C1", members=["U1", "U2", "B1", "UBOT"])

        sync.remove("C1", ["alice@co.com"])

        assert sorted(api.channels["C1"].members) == ["B1", "U1", "UBOT"]

    def test_bot_never_removed_even_if_email_undesired(self, api, sync):
        api.add_channel("team-x", remote_id="C1", members=["B1"])

        sync.remove("C1", [])

        assert api.called("remove_member") == []

    def test_fail_fast_on_first_removal_error(self, api, sync):
        """x, y, z all undesired; removing x fails → y and z never attempted."""
        for uid in ("X", "Y", "Z"):
            api.add_user(RemoteUser(id=uid, email=f"{uid.lower()}@co.com"))
        api.add_channel("team-x", remote_id="C1", members=["X", "Y", "Z"])
        api.fail("remove_member", "X", RemoteError("denied", code="cant_kick_from_general"))

        with pytest.raises(RemoteError) as exc_info:
            sync.remove("C1", ["alice@co.com"])

        assert exc_info.value.code == "cant_kick_from_general"
        assert api.called("remove_member") == [("C1", "X")]
        assert api.channels["C1"].members == ["X", "Y", "Z"]

    def test_user_info_failure_aborts(self, api, sync):
        api.add_channel("team-x", remote_id="C1", members=["U1", "U2"])
        api.fail("get_user_info", "U1", RemoteError("boom", code="ratelimited"))

        with pytest.raises(RemoteError):
            sync.remove("C1", [])
        assert api.called("remove_member") == []

    def test_removal_follows_platform_listing_order(self, api, sync):
        """Members listed U9, U5, U7; the first listed kick fails → nobody is removed."""
        for uid in ("U9", "U5", "U7"):
            api.add_user(RemoteUser(id=uid, email=f"{uid.lower()}@co.com"))
        api.add_channel("team-x", remote_id="C1", members=["U9", "U5", "U7"])
        api.fail("remove_member", "U9", RemoteError("denied", code="restricted_action"))

        with pytest.raises(RemoteError):
            sync.remove("C1", ["alice@co.com"])

        assert api.called("remove_member") == [("C1", "U9")]
        assert api.channels["C1"].members == ["U9", "U5", "U7"]
