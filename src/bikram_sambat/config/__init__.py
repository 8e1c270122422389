"""Configuration module for the Bikram Sambat engine."""

from bikram_sambat.config.base import Settings
from bikram_sambat.config.loader import get_settings

__all__ = ["Settings", "get_settings"]
