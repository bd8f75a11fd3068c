"""Application services."""

from webrtc_presence.application.services.presence_service import PresenceService

__all__ = ["PresenceService"]
