"""Configuration management for WordWorld."""

from .config import WordWorldConfig
from .defaults import create_default_config

__all__ = ["WordWorldConfig", "create_default_config"]
