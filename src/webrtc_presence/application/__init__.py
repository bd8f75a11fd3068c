"""Application layer - use cases composed from domain contracts."""

from webrtc_presence.application.services import PresenceService

__all__ = ["PresenceService"]
