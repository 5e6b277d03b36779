"""
KV-Store Configuration Settings

This module contains the configuration constants for KV-Store.
Values are read from the environment once, at import time.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Store configuration settings."""

    # Logging settings
    DEBUG: bool = os.environ.get("KV_STORE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("KV_STORE_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    # Snapshot settings
    SNAPSHOT_VERSION: int = 1
    SNAPSHOT_ENCODING: str = "utf-8"


# Global settings instance
settings = Settings()
