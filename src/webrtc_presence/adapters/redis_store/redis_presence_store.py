"""Redis-backed presence store."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from redis.asyncio import Redis
from redis.exceptions import RedisError

from webrtc_presence.domain.contracts.presence_store import PresenceStoreProtocol
from webrtc_presence.domain.errors import StoreUnavailableError
from webrtc_presence.domain.models.presence_keys import PresenceKeys
from webrtc_presence.domain.models.presence_state import PresenceState

if TYPE_CHECKING:
    from webrtc_presence.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)


def _decode_members(members: Iterable[bytes | str]) -> frozenset[str]:
    """Decode SMEMBERS replies from clients created without decode_responses."""
    return frozenset(m.decode("utf-8") if isinstance(m, bytes) else m for m in members)


class RedisPresenceStore(PresenceStoreProtocol):
    """Tracks peers and broadcasters in two Redis sets.

    Keys are "<prefix>:peers" and "<prefix>:broadcasting". Task cancellation
    is never shielded, so asyncio.CancelledError reaches the caller unchanged.
    """

    def __init__(self, client: Redis, prefix: str | None = None, owns_client: bool = False) -> None:
        """Initialize the store.

        Args:
            client: Async Redis client.
            prefix: Optional key namespace prefix (e.g. "webrtc").
            owns_client: Whether close() should also close the client.
        """
        self._client = client
        self._owns_client = owns_client
        self.keys = PresenceKeys.from_prefix(prefix)

    @classmethod
    def from_config(cls, config: AppConfig) -> RedisPresenceStore:
        """Create a store with its own client from application configuration.

        Args:
            config: Application configuration.

        Returns:
            RedisPresenceStore owning a new Redis client.
        """
        client = Redis.from_url(
            config.redis_url,
            socket_timeout=config.redis_socket_timeout,
            socket_connect_timeout=config.redis_connect_timeout,
            decode_responses=True,
        )
        logger.info(f"Using Redis presence store with namespace '{config.presence_prefix}'")
        return cls(client, prefix=config.presence_prefix, owns_client=True)

    async def close(self) -> None:
        """Release the connection pool if this store created the client."""
        if self._owns_client:
            await self._client.aclose()

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Wrap backend failures in StoreUnavailableError."""
        try:
            yield
        except (RedisError, OSError) as e:
            logger.warning(f"Redis presence {operation} failed: {e}")
            raise StoreUnavailableError(operation, str(e)) from e

    async def reset(self) -> None:
        """Delete both presence keys with a single DEL."""
        with self._translate_errors("reset"):
            await self._client.delete(self.keys.peers, self.keys.broadcasting)
        logger.debug(f"Reset presence keys in namespace '{self.keys.namespace}'")

    async def add_peer(self, peer_id: str) -> None:
        """Add a peer to the peers set."""
        with self._translate_errors("add_peer"):
            await self._client.sadd(self.keys.peers, peer_id)
        logger.debug(f"Added peer {peer_id}")

    async def remove_peer(self, peer_id: str) -> None:
        """Remove a peer from both sets inside one MULTI/EXEC transaction."""
        with self._translate_errors("remove_peer"):
            async with self._client.pipeline(transaction=True) as pipe:
                pipe.srem(self.keys.peers, peer_id)
                pipe.srem(self.keys.broadcasting, peer_id)
                await pipe.execute()
        logger.debug(f"Removed peer {peer_id}")

    async def set_broadcast(self, peer_id: str, enabled: bool) -> None:
        """Add a peer to or remove it from the broadcasting set."""
        with self._translate_errors("set_broadcast"):
            if enabled:
                await self._client.sadd(self.keys.broadcasting, peer_id)
            else:
                await self._client.srem(self.keys.broadcasting, peer_id)
        logger.debug(f"Set broadcast for peer {peer_id}: {enabled}")

    async def state(self) -> PresenceState:
        """Read both sets through one non-transactional pipeline."""
        with self._translate_errors("state"):
            async with self._client.pipeline(transaction=False) as pipe:
                pipe.smembers(self.keys.peers)
                pipe.smembers(self.keys.broadcasting)
                peers, broadcasting = await pipe.execute()
        return PresenceState(
            peers=_decode_members(peers),
            broadcasting=_decode_members(broadcasting),
        )
