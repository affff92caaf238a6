"""Tests for on-chain token security analysis."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from launchguard.core.exceptions import ExternalServiceError, SecurityAnalysisError
from launchguard.models.security import MintAuthority, RiskSeverity
from launchguard.services.security.analyzer import (
    SecurityAnalyzer,
    check_honeypot,
    detect_rug_pull_indicators,
    token_data_to_config,
)
from tests.factories.token import TokenDataFactory


class TestTokenDataToConfig:
    """Tests for mapping chain data onto a TokenConfig."""

    def test_active_authorities(self) -> None:
        data = TokenDataFactory(decimals=6, supply=5_000_000)

        config = token_data_to_config(data)

        assert config.mint_authority == MintAuthority.REVOCABLE
        assert config.freeze_authority is True
        assert config.update_authority is False
        assert config.name == ""
        assert config.symbol == ""
        assert config.decimals == 6
        assert config.supply == 5_000_000

    def test_renounced_authorities(self) -> None:
        config = token_data_to_config(TokenDataFactory(mint_authority=None, freeze_authority=None))

        assert config.mint_authority == MintAuthority.NONE
        assert config.freeze_authority is False


class TestHeuristics:
    """Tests for honeypot and rug-pull heuristics."""

    def test_freeze_authority_raises_honeypot_confidence(self) -> None:
        result = check_honeypot(TokenDataFactory())

        assert result.confidence == 30
        assert result.indicators == ["Freeze authority enabled"]
        assert result.is_honeypot is False
        assert result.can_buy is True
        assert result.can_sell is True
        assert result.buy_tax == 0
        assert result.sell_tax == 0

    def test_no_freeze_authority_is_clean(self) -> None:
        result = check_honeypot(TokenDataFactory(freeze_authority=None))

        assert result.confidence == 0
        assert result.indicators == []

    def test_rug_pull_with_both_authorities(self) -> None:
        result = detect_rug_pull_indicators(TokenDataFactory())

        assert result.risk_score == 50
        assert [(i.name, i.severity) for i in result.indicators] == [
            ("Active Mint Authority", "medium"),
            ("Active Freeze Authority", "high"),
        ]
        assert result.ownership_renounced is False
        assert result.liquidity_locked is False
        assert result.large_holders is False

    def test_renounced_mint(self) -> None:
        result = detect_rug_pull_indicators(
            TokenDataFactory(mint_authority=None, freeze_authority=None)
        )

        assert result.risk_score == 0
        assert result.indicators == []
        assert result.ownership_renounced is True


class TestSecurityAnalyzer:
    """Tests for SecurityAnalyzer.analyze_token_security."""

    @pytest.mark.asyncio
    async def test_analysis_of_risky_mint(self) -> None:
        """
        Given: A mint with active mint and freeze authorities
        When: It is analyzed
        Then: The report is unverified, tradeable, and rates risk high
        """
        data = TokenDataFactory(decimals=6, supply=1_000_000_000)
        source = MagicMock()
        source.get_token_data = AsyncMock(return_value=data)

        report = await SecurityAnalyzer(source).analyze_token_security(data.mint_address)

        source.get_token_data.assert_awaited_once_with(data.mint_address)
        assert report.token_mint == data.mint_address
        assert report.quality_score.components.authorities == 60
        assert report.quality_score.overall == 44
        assert report.quality_score.grade == "D"
        assert report.risk_assessment.risk_level == RiskSeverity.HIGH
        assert report.honeypot_check.confidence == 30
        assert report.rug_pull_indicators.risk_score == 50
        assert report.is_verified is False
        assert report.can_trade is True

    @pytest.mark.asyncio
    async def test_analysis_of_renounced_mint(self, mock_token_source: MagicMock) -> None:
        report = await SecurityAnalyzer(mock_token_source).analyze_token_security("mint")

        assert report.rug_pull_indicators.ownership_renounced is True
        assert report.risk_assessment.risk_level == RiskSeverity.MEDIUM
        assert report.honeypot_check.is_honeypot is False
        assert report.can_trade is True

    @pytest.mark.asyncio
    async def test_source_failure_wrapped(self) -> None:
        """Source errors surface as SecurityAnalysisError with the cause chained."""
        cause = ExternalServiceError(service="Solana RPC", message="boom")
        source = MagicMock()
        source.get_token_data = AsyncMock(side_effect=cause)

        with pytest.raises(SecurityAnalysisError) as exc_info:
            await SecurityAnalyzer(source).analyze_token_security("MintAddr123")

        assert exc_info.value.token_mint == "MintAddr123"
        assert exc_info.value.__cause__ is cause
        assert "Solana RPC: boom" in str(exc_info.value)
