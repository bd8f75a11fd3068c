"""Presence and broadcast tracking for a WebRTC signaling service."""

__version__ = "0.1.0"
