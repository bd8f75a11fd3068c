"""Domain models for presence tracking."""

from webrtc_presence.domain.models.presence_keys import DEFAULT_PREFIX, PresenceKeys
from webrtc_presence.domain.models.presence_state import PresenceState

__all__ = [
    "DEFAULT_PREFIX",
    "PresenceKeys",
    "PresenceState",
]
