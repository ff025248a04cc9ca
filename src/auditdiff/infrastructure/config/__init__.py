"""Configuration persistence."""

from .repository import AUDITOR_CONFIG_NAME, ConfigRepository

__all__ = ["ConfigRepository", "AUDITOR_CONFIG_NAME"]
