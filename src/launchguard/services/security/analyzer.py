"""Security analysis of existing mints.

Reads the mint account through a TokenDataSource, maps it onto a
TokenConfig and runs the quality scorer and risk scanner alongside the
honeypot and rug-pull heuristics.
"""

import structlog

from launchguard.config.logging import short_address
from launchguard.constants.security import (
    HONEYPOT_CONFIDENCE_THRESHOLD,
    HONEYPOT_FREEZE_CONFIDENCE,
    RUG_PULL_FREEZE_AUTHORITY_SCORE,
    RUG_PULL_MINT_AUTHORITY_SCORE,
    VERIFIED_MIN_OVERALL,
)
from launchguard.core.exceptions import LaunchGuardError, SecurityAnalysisError
from launchguard.core.interfaces import TokenDataSource
from launchguard.models.security import (
    HoneypotAnalysis,
    MintAuthority,
    RiskSeverity,
    RugPullIndicator,
    RugPullIndicators,
    SecurityAnalysis,
    TokenConfig,
    TokenData,
)
from launchguard.services.security.quality_scorer import calculate_quality_score
from launchguard.services.security.risk_scanner import scan_for_risks

logger = structlog.get_logger(__name__)


def token_data_to_config(token_data: TokenData) -> TokenConfig:
    """Map on-chain mint data onto a scoreable TokenConfig.

    Metadata is not read from chain, so name and symbol stay empty.
    """
    return TokenConfig(
        name="",
        symbol="",
        decimals=token_data.decimals,
        supply=token_data.supply,
        mint_authority=(
            MintAuthority.REVOCABLE if token_data.mint_authority else MintAuthority.NONE
        ),
        freeze_authority=bool(token_data.freeze_authority),
        update_authority=False,
    )


def check_honeypot(token_data: TokenData) -> HoneypotAnalysis:
    """Honeypot heuristic; only the freeze authority is observable here."""
    indicators: list[str] = []
    confidence = 0

    if token_data.freeze_authority:
        indicators.append("Freeze authority enabled")
        confidence += HONEYPOT_FREEZE_CONFIDENCE

    return HoneypotAnalysis(
        is_honeypot=confidence > HONEYPOT_CONFIDENCE_THRESHOLD,
        confidence=confidence,
        indicators=indicators,
        can_buy=True,
        can_sell=True,
        buy_tax=0,
        sell_tax=0,
    )


def detect_rug_pull_indicators(token_data: TokenData) -> RugPullIndicators:
    """Rug-pull heuristic from the mint's active authorities."""
    indicators: list[RugPullIndicator] = []
    risk_score = 0

    if token_data.mint_authority:
        indicators.append(
            RugPullIndicator(
                name="Active Mint Authority",
                present=True,
                severity="medium",
                description="Creator can mint unlimited tokens, potentially diluting holders",
            )
        )
        risk_score += RUG_PULL_MINT_AUTHORITY_SCORE

    if token_data.freeze_authority:
        indicators.append(
            RugPullIndicator(
                name="Active Freeze Authority",
                present=True,
                severity="high",
                description="Creator can freeze any holder's tokens",
            )
        )
        risk_score += RUG_PULL_FREEZE_AUTHORITY_SCORE

    return RugPullIndicators(
        risk_score=risk_score,
        indicators=indicators,
        liquidity_locked=False,
        ownership_renounced=token_data.mint_authority is None,
        large_holders=False,
    )


class SecurityAnalyzer:
    """Combined security report for existing mints.

    Example:
        analyzer = SecurityAnalyzer(SolanaRPCClient())
        report = await analyzer.analyze_token_security("mint_address")
    """

    def __init__(self, source: TokenDataSource) -> None:
        self.source = source

    async def analyze_token_security(self, token_mint: str) -> SecurityAnalysis:
        """Fetch a mint and produce its security report.

        Args:
            token_mint: Mint address to analyze

        Returns:
            SecurityAnalysis with quality, risks, honeypot and rug-pull results

        Raises:
            SecurityAnalysisError: If the mint cannot be read or analyzed
        """
        try:
            token_data = await self.source.get_token_data(token_mint)
        except LaunchGuardError as e:
            logger.error(
                "security_analysis_failed",
                token=short_address(token_mint),
                error=str(e),
            )
            raise SecurityAnalysisError(
                f"Failed to analyze token security: {e}", token_mint=token_mint
            ) from e

        config = token_data_to_config(token_data)
        quality = calculate_quality_score(config)
        risks = scan_for_risks(config)
        honeypot = check_honeypot(token_data)
        rug_pull = detect_rug_pull_indicators(token_data)

        critical = risks.risk_level == RiskSeverity.CRITICAL
        analysis = SecurityAnalysis(
            token_mint=token_mint,
            quality_score=quality,
            risk_assessment=risks,
            honeypot_check=honeypot,
            rug_pull_indicators=rug_pull,
            is_verified=quality.overall >= VERIFIED_MIN_OVERALL and not critical,
            can_trade=not honeypot.is_honeypot and not critical,
        )

        logger.info(
            "security_analysis_completed",
            token=short_address(token_mint),
            grade=quality.grade,
            risk_level=risks.risk_level.value,
            is_verified=analysis.is_verified,
            can_trade=analysis.can_trade,
        )
        return analysis
