"""Configuration module for TypedKV."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
