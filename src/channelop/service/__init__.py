"""Reconciliation core: gateway, finder, drift detection, membership, projection."""

from channelop.service.drift import DriftDetector
from channelop.service.finder import ChannelFinder
from channelop.service.gateway import ChannelGateway
from channelop.service.membership import MembershipSynchronizer
from channelop.service.projection import project
from channelop.service.reconciler import ChannelReconciler
from channelop.service.validation import validate

__all__ = [
    "ChannelFinder",
    "ChannelGateway",
    "ChannelReconciler",
    "DriftDetector",
    "MembershipSynchronizer",
    "project",
    "validate",
]
