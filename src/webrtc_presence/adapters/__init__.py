"""Adapters layer - external system integrations."""

from webrtc_presence.adapters.config import AppConfig
from webrtc_presence.adapters.memory import InMemoryPresenceStore
from webrtc_presence.adapters.redis_store import RedisPresenceStore

__all__ = [
    "AppConfig",
    "InMemoryPresenceStore",
    "RedisPresenceStore",
]
