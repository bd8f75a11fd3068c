"""Domain contracts (protocols)."""

from webrtc_presence.domain.contracts.presence_store import PresenceStoreProtocol

__all__ = ["PresenceStoreProtocol"]
