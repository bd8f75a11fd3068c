"""Domain layer - presence models, contracts and errors."""

from webrtc_presence.domain.contracts import PresenceStoreProtocol
from webrtc_presence.domain.errors import PresenceError, StoreUnavailableError
from webrtc_presence.domain.models import PresenceKeys, PresenceState

__all__ = [
    "PresenceError",
    "PresenceKeys",
    "PresenceState",
    "PresenceStoreProtocol",
    "StoreUnavailableError",
]
