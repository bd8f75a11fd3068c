"""In-memory presence store adapter."""

from webrtc_presence.adapters.memory.in_memory_presence_store import InMemoryPresenceStore

__all__ = ["InMemoryPresenceStore"]
