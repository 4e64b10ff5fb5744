"""Tests for the validation guard and the adoption projection."""

from __future__ import annotations

import pytest

from channelop.errors import ValidationError
from channelop.models import DesiredChannelSpec, ObservedChannelState
from channelop.service.projection import project
from channelop.service.validation import validate


class TestValidate:
    def test_empty_members_fails(self):
        with pytest.raises(ValidationError):
            validate(DesiredChannelSpec(name="team-x", topic="t", description="d", members=set()))

    def test_non_empty_members_passes_regardless_of_other_fields(self):
        assert validate(DesiredChannelSpec(name="", members={"a@co.com"})) is None

    def test_members_are_a_set(self):
        spec = DesiredChannelSpec(name="team-x", members=["a@co.com", "a@co.com"])
        assert spec.members == frozenset({"a@co.com"})


class TestProject:
    def test_maps_observed_fields(self):
        observed = ObservedChannelState(
            remote_id="C1",
            name="team-x",
            description="Q&amp;A",
            topic="Launch &amp;co",
            private=True,
            member_ids=frozenset({"U1", "B1"}),
            archived=True,
        )

        spec = project(observed)

        assert spec == DesiredChannelSpec(
            name="team-x",
            description="Q&A",
            topic="Launch &co",
            private=True,
            members=frozenset({"U1", "B1"}),
        )

    def test_does_not_touch_original(self):
        observed = ObservedChannelState(remote_id="C1", name="team-x")
        spec = project(observed)
        assert spec.members == frozenset()
        assert observed.name == "team-x"
