"""LaunchGuard domain models."""

from launchguard.models.detection import BotDetectionResult, TransactionAnalysis
from launchguard.models.protection import (
    AntiSnipeConfig,
    AntiSnipeOverrides,
    LaunchSchedule,
    LaunchStatus,
    ProtectionLevel,
    PurchaseDecision,
    PurchaseOutcome,
    WalletLimits,
)
from launchguard.models.security import (
    HoneypotAnalysis,
    MintAuthority,
    QualityComponents,
    QualityScore,
    Risk,
    RiskAssessment,
    RiskCategory,
    RiskSeverity,
    RugPullIndicator,
    RugPullIndicators,
    SecurityAnalysis,
    TokenConfig,
    TokenData,
    TokenProtocol,
)

__all__ = [
    "AntiSnipeConfig",
    "AntiSnipeOverrides",
    "BotDetectionResult",
    "HoneypotAnalysis",
    "LaunchSchedule",
    "LaunchStatus",
    "MintAuthority",
    "ProtectionLevel",
    "PurchaseDecision",
    "PurchaseOutcome",
    "QualityComponents",
    "QualityScore",
    "Risk",
    "RiskAssessment",
    "RiskCategory",
    "RiskSeverity",
    "RugPullIndicator",
    "RugPullIndicators",
    "SecurityAnalysis",
    "TokenConfig",
    "TokenData",
    "TokenProtocol",
    "TransactionAnalysis",
    "WalletLimits",
]
