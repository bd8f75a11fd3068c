"""Presence use cases for the signaling layer."""

import logging
from typing import Any

from webrtc_presence.domain.contracts.presence_store import PresenceStoreProtocol
from webrtc_presence.domain.errors import StoreUnavailableError
from webrtc_presence.domain.models.presence_state import PresenceState

logger = logging.getLogger(__name__)


class PresenceService:
    """Sequences presence store calls and builds the state messages sent to peers.

    Store errors are logged and re-raised; retry policy belongs to the caller.
    """

    def __init__(self, store: PresenceStoreProtocol) -> None:
        """Initialize with a presence store."""
        self._store = store

    async def reset(self) -> None:
        """Clear presence left behind by a previous signaling process."""
        try:
            await self._store.reset()
        except StoreUnavailableError as e:
            logger.warning(f"Could not reset presence: {e}")
            raise
        logger.info("Presence state reset")

    async def snapshot(self) -> PresenceState:
        """Return the current peers and broadcasters."""
        return await self._store.state()

    async def connect(self, peer_id: str) -> dict[str, Any]:
        """Register a newly connected peer.

        Args:
            peer_id: Identifier assigned to the peer by the signaling layer.

        Returns:
            The "welcome" message for the peer, carrying the current state.
        """
        try:
            await self._store.add_peer(peer_id)
            state = await self._store.state()
        except StoreUnavailableError as e:
            logger.warning(f"Presence connect failed for peer {peer_id}: {e}")
            raise
        logger.info(
            f"Peer {peer_id} connected. Peers: {len(state.peers)}, "
            f"Broadcasting: {len(state.broadcasting)}"
        )
        return state.to_message("welcome", peer_id)

    async def disconnect(self, peer_id: str) -> dict[str, Any]:
        """Drop a peer from presence, including its broadcast flag.

        Args:
            peer_id: Identifier of the departing peer.

        Returns:
            The "peer-left" message to send to the remaining peers.
        """
        try:
            await self._store.remove_peer(peer_id)
            state = await self._store.state()
        except StoreUnavailableError as e:
            logger.warning(f"Presence disconnect failed for peer {peer_id}: {e}")
            raise
        logger.info(f"Peer {peer_id} left. Peers: {len(state.peers)}")
        return state.to_message("peer-left", peer_id)

    async def set_broadcast(self, peer_id: str, enabled: bool) -> dict[str, Any]:
        """Start or stop broadcasting for a peer.

        Args:
            peer_id: Identifier of the peer.
            enabled: Whether the peer is now sending media.

        Returns:
            The "broadcast-state" message to send to all peers.
        """
        try:
            await self._store.set_broadcast(peer_id, enabled)
            state = await self._store.state()
        except StoreUnavailableError as e:
            logger.warning(f"Presence broadcast update failed for peer {peer_id}: {e}")
            raise
        logger.info(
            f"Peer {peer_id} {'started' if enabled else 'stopped'} broadcasting. "
            f"Broadcasting: {len(state.broadcasting)}"
        )
        message = state.to_message("broadcast-state", peer_id)
        message["enabled"] = enabled
        return message
