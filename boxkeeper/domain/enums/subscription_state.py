"""Subscription lifecycle states.

ACTIVE -> DISPOSED is the only transition, and DISPOSED is terminal.
"""

from enum import Enum


class SubscriptionState(str, Enum):
    """State of an event subscription."""

    ACTIVE = "active"
    DISPOSED = "disposed"
