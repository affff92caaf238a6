"""Token security scoring service package."""

from launchguard.services.security.analyzer import SecurityAnalyzer
from launchguard.services.security.quality_scorer import calculate_quality_score
from launchguard.services.security.risk_scanner import scan_for_risks

__all__ = [
    "SecurityAnalyzer",
    "calculate_quality_score",
    "scan_for_risks",
]
