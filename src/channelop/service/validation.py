"""Validation guard run before any remote call."""

from __future__ import annotations

from channelop.errors import ValidationError
from channelop.models import DesiredChannelSpec


def validate(desired: DesiredChannelSpec) -> None:
    """Raise ValidationError if the desired spec cannot be reconciled.

    Only membership is checked here; name syntax is left to the platform.
    """
    if not desired.members:
        raise ValidationError("Users can not be empty")
