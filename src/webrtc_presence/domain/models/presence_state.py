"""Presence snapshot domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PresenceState(BaseModel):
    """Connected peers and the subset currently broadcasting.

    The two sets may have been read at slightly different instants, so
    broadcasting is not guaranteed to be a subset of peers.
    """

    model_config = ConfigDict(frozen=True)

    peers: frozenset[str] = Field(default_factory=frozenset)
    broadcasting: frozenset[str] = Field(default_factory=frozenset)

    def is_broadcasting(self, peer_id: str) -> bool:
        """Return True if the peer is in the broadcasting set."""
        return peer_id in self.broadcasting

    @property
    def listeners(self) -> frozenset[str]:
        """Connected peers that are not broadcasting."""
        return self.peers - self.broadcasting

    def to_message(self, message_type: str, peer_id: str | None = None) -> dict[str, Any]:
        """Build a signaling state message carrying this snapshot.

        Lists are sorted so serialized payloads are stable.

        Args:
            message_type: Signaling message type, e.g. "welcome" or "peer-left".
            peer_id: Peer the message is about, if any.

        Returns:
            Dict with "type", "peers", "broadcasting" and optionally "id".
        """
        message: dict[str, Any] = {"type": message_type}
        if peer_id is not None:
            message["id"] = peer_id
        message["peers"] = sorted(self.peers)
        message["broadcasting"] = sorted(self.broadcasting)
        return message
