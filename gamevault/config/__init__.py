"""
Configuration Module

Usage:
======
    from gamevault.config import get_settings

    settings = get_settings()
"""

from gamevault.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
