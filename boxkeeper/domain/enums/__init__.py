"""Domain enums."""

from boxkeeper.domain.enums.subscription_state import SubscriptionState

__all__ = [
    "SubscriptionState",
]
