"""
TypedKV Configuration Settings

This module contains all configuration constants for the TypedKV shell.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Shell configuration settings."""

    # Shell settings
    PROMPT: str = os.environ.get("TYPEDKV_PROMPT", "")
    QUIT_COMMANDS: tuple = ("QUIT", "EXIT")

    # Logging settings
    DEBUG: bool = os.environ.get("TYPEDKV_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("TYPEDKV_LOG_LEVEL", "WARNING")


# Global settings instance
settings = Settings()
