"""Pre-creation risk scanning for token configurations.

Each triggered condition adds a Risk; the overall level is an ordered
cascade: critical, then high (2+ high risks), then medium (1 high risk
or 3+ risks in total), else low.
"""

import structlog

from launchguard.constants.security import (
    CRITICAL_RISK_PENALTY,
    EXCESSIVE_SUPPLY,
    EXCESSIVE_TRANSFER_FEE,
    HIGH_RISK_LEVEL_COUNT,
    HIGH_RISK_PENALTY,
    MEDIUM_RISK_LEVEL_TOTAL,
    MINIMAL_DESCRIPTION_MIN_LENGTH,
    PER_RISK_PENALTY,
)
from launchguard.models.security import (
    MintAuthority,
    Risk,
    RiskAssessment,
    RiskCategory,
    RiskSeverity,
    TokenConfig,
)

logger = structlog.get_logger(__name__)


def scan_for_risks(config: TokenConfig) -> RiskAssessment:
    """Scan a token configuration for security risks.

    Args:
        config: Token configuration snapshot

    Returns:
        RiskAssessment with risks in detection order
    """
    risks: list[Risk] = []
    warnings: list[str] = []
    critical_issues: list[str] = []

    # Authority risks
    if config.mint_authority == MintAuthority.REVOCABLE:
        risks.append(
            Risk(
                category=RiskCategory.AUTHORITY,
                severity=RiskSeverity.MEDIUM,
                title="Revocable Mint Authority",
                description="Token creator can mint unlimited supply",
                recommendation="Set permanent supply or revoke mint authority after creation",
            )
        )
        warnings.append("Unlimited minting capability - supply can be diluted")

    if config.freeze_authority:
        risks.append(
            Risk(
                category=RiskCategory.AUTHORITY,
                severity=RiskSeverity.HIGH,
                title="Freeze Authority Enabled",
                description="Token creator can freeze any holder's tokens",
                recommendation="Revoke freeze authority to build trust",
            )
        )
        warnings.append("Token accounts can be frozen by creator")

    # Tokenomics risks
    if config.supply and config.supply > EXCESSIVE_SUPPLY:
        risks.append(
            Risk(
                category=RiskCategory.TOKENOMICS,
                severity=RiskSeverity.MEDIUM,
                title="Extremely Large Supply",
                description="Supply exceeds 1 trillion tokens",
                recommendation="Consider reducing supply to reasonable amount",
            )
        )

    if config.transfer_fees and config.transfer_fees > EXCESSIVE_TRANSFER_FEE:
        risks.append(
            Risk(
                category=RiskCategory.TOKENOMICS,
                severity=RiskSeverity.CRITICAL,
                title="High Transfer Fees",
                description=(
                    f"Transfer fee of {config.transfer_fees:g}% may indicate honeypot"
                ),
                recommendation="Reduce transfer fees to 5% or below",
            )
        )
        critical_issues.append("Transfer fees above 10% - potential honeypot")

    # Metadata risks
    if not config.description or len(config.description) < MINIMAL_DESCRIPTION_MIN_LENGTH:
        risks.append(
            Risk(
                category=RiskCategory.METADATA,
                severity=RiskSeverity.LOW,
                title="Missing Description",
                description="No detailed token description provided",
                recommendation="Add comprehensive description",
            )
        )

    if not config.social_links:
        risks.append(
            Risk(
                category=RiskCategory.SOCIAL,
                severity=RiskSeverity.HIGH,
                title="No Social Verification",
                description="No social media links provided",
                recommendation="Add website and social media links",
            )
        )
        warnings.append("No social verification - difficult to verify legitimacy")

    # Liquidity risks
    if not config.has_liquidity:
        risks.append(
            Risk(
                category=RiskCategory.LIQUIDITY,
                severity=RiskSeverity.MEDIUM,
                title="No Liquidity",
                description="Token will not be tradeable without liquidity",
                recommendation="Add liquidity pool after creation",
            )
        )
    elif not config.liquidity_locked:
        risks.append(
            Risk(
                category=RiskCategory.LIQUIDITY,
                severity=RiskSeverity.HIGH,
                title="Unlocked Liquidity",
                description="Liquidity can be removed at any time (rug pull risk)",
                recommendation="Lock liquidity using a trusted locker",
            )
        )
        warnings.append("Liquidity not locked - high rug pull risk")

    critical_count = sum(1 for r in risks if r.severity == RiskSeverity.CRITICAL)
    high_count = sum(1 for r in risks if r.severity == RiskSeverity.HIGH)

    risk_level = _derive_risk_level(critical_count, high_count, len(risks), critical_issues)
    safety_score = max(
        0,
        100
        - (
            critical_count * CRITICAL_RISK_PENALTY
            + high_count * HIGH_RISK_PENALTY
            + len(risks) * PER_RISK_PENALTY
        ),
    )

    logger.debug(
        "risk_scan_completed",
        symbol=config.symbol,
        risk_level=risk_level.value,
        risk_count=len(risks),
        safety_score=safety_score,
    )

    return RiskAssessment(
        risk_level=risk_level,
        risks=risks,
        warnings=warnings,
        critical_issues=critical_issues,
        safety_score=safety_score,
    )


def _derive_risk_level(
    critical_count: int,
    high_count: int,
    total_count: int,
    critical_issues: list[str],
) -> RiskSeverity:
    if critical_count > 0 or critical_issues:
        return RiskSeverity.CRITICAL
    if high_count >= HIGH_RISK_LEVEL_COUNT:
        return RiskSeverity.HIGH
    if high_count == 1 or total_count >= MEDIUM_RISK_LEVEL_TOTAL:
        return RiskSeverity.MEDIUM
    return RiskSeverity.LOW
