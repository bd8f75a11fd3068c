"""In-memory presence store implementation."""

from __future__ import annotations

import logging

from webrtc_presence.domain.contracts.presence_store import PresenceStoreProtocol
from webrtc_presence.domain.errors import StoreUnavailableError
from webrtc_presence.domain.models.presence_keys import PresenceKeys
from webrtc_presence.domain.models.presence_state import PresenceState

logger = logging.getLogger(__name__)


class InMemoryPresenceStore(PresenceStoreProtocol):
    """Process-local presence store for tests and single-instance deployments.

    Set available to False to simulate an unreachable store: every operation
    then raises StoreUnavailableError and leaves the sets untouched.
    """

    def __init__(self, prefix: str | None = None) -> None:
        """Initialize the store.

        Args:
            prefix: Optional key namespace prefix, kept for parity with shared backends.
        """
        self.keys = PresenceKeys.from_prefix(prefix)
        self.available = True
        self._peers: set[str] = set()
        self._broadcasting: set[str] = set()

    def _ensure_available(self, operation: str) -> None:
        if not self.available:
            raise StoreUnavailableError(operation, "in-memory store marked unavailable")

    async def reset(self) -> None:
        """Clear both sets."""
        self._ensure_available("reset")
        self._peers.clear()
        self._broadcasting.clear()
        logger.debug("Reset in-memory presence state")

    async def add_peer(self, peer_id: str) -> None:
        """Add a peer to the peers set."""
        self._ensure_available("add_peer")
        self._peers.add(peer_id)

    async def remove_peer(self, peer_id: str) -> None:
        """Remove a peer from both sets."""
        self._ensure_available("remove_peer")
        # No await between the two discards, so no other task sees a half-removed peer
        self._peers.discard(peer_id)
        self._broadcasting.discard(peer_id)

    async def set_broadcast(self, peer_id: str, enabled: bool) -> None:
        """Add a peer to or remove it from the broadcasting set."""
        self._ensure_available("set_broadcast")
        if enabled:
            self._broadcasting.add(peer_id)
        else:
            self._broadcasting.discard(peer_id)

    async def state(self) -> PresenceState:
        """Return a copy of both sets."""
        self._ensure_available("state")
        return PresenceState(
            peers=frozenset(self._peers),
            broadcasting=frozenset(self._broadcasting),
        )
