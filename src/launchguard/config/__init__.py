"""Configuration module for LaunchGuard.

Usage:
    from launchguard.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.purchase_cooldown_seconds)
"""

from launchguard.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
