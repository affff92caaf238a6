"""Bot detection service package."""

from launchguard.services.detection.bot_detector import BotDetector

__all__ = ["BotDetector"]
