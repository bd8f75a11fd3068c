"""Presence store contract (protocol)."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from webrtc_presence.domain.models.presence_state import PresenceState


class PresenceStoreProtocol(Protocol):
    """Protocol for tracking connected and broadcasting peers.

    Every operation is a round trip to the backing store and raises
    StoreUnavailableError if the store cannot complete it. Implementations
    hold no local cache and never retry.
    """

    async def reset(self) -> None:
        """Clear both the peers and broadcasting sets in a single request.

        Safe to call when the sets do not exist yet.
        """
        ...

    async def add_peer(self, peer_id: str) -> None:
        """Add a peer to the connected set.

        Args:
            peer_id: Opaque peer identifier.
        """
        ...

    async def remove_peer(self, peer_id: str) -> None:
        """Remove a peer from both the connected and broadcasting sets atomically.

        Args:
            peer_id: Opaque peer identifier.
        """
        ...

    async def set_broadcast(self, peer_id: str, enabled: bool) -> None:
        """Mark or unmark a peer as broadcasting.

        Peer membership is not checked; callers sequence add_peer first.

        Args:
            peer_id: Opaque peer identifier.
            enabled: True to add to the broadcasting set, False to remove.
        """
        ...

    async def state(self) -> "PresenceState":
        """Read both sets in one grouped request.

        The two reads are not a consistent point-in-time snapshot.

        Returns:
            PresenceState with the current peers and broadcasters.
        """
        ...
