"""Configuration module for kv-shell."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
