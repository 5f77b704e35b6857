"""
kv-shell Configuration Settings

All runtime configuration for the store and the shell. Values come from
environment variables when set; command line flags override them.
"""

import os
from dataclasses import dataclass

LOAD_MODES = ("merge", "replace")


@dataclass
class Settings:
    """Shell and store configuration settings."""

    # Store settings
    # merge: loaded entries overwrite same-named keys, others are kept
    # replace: the store becomes exactly the file contents
    LOAD_MODE: str = os.environ.get("KV_SHELL_LOAD_MODE", "merge").lower()
    ENCODING: str = os.environ.get("KV_SHELL_ENCODING", "utf-8")

    # Shell settings
    PROMPT: str = os.environ.get("KV_SHELL_PROMPT", ">> ")

    # Logging settings
    DEBUG: bool = os.environ.get("KV_SHELL_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KV_SHELL_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# Global settings instance
settings = Settings()
