"""Configuration adapters."""

from webrtc_presence.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
