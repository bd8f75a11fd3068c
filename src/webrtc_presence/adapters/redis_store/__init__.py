"""Redis presence store adapter."""

from webrtc_presence.adapters.redis_store.redis_presence_store import RedisPresenceStore

__all__ = ["RedisPresenceStore"]
