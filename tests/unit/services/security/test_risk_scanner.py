"""Tests for pre-creation risk scanning."""

from launchguard.models.security import MintAuthority, RiskCategory, RiskSeverity, TokenProtocol
from launchguard.services.security.risk_scanner import scan_for_risks
from tests.factories.token import TokenConfigFactory


class TestScanForRisks:
    """Tests for scan_for_risks."""

    def test_clean_token_has_no_risks(self) -> None:
        assessment = scan_for_risks(TokenConfigFactory())

        assert assessment.risks == []
        assert assessment.risk_level == RiskSeverity.LOW
        assert assessment.safety_score == 100

    def test_high_transfer_fee_is_critical(self) -> None:
        """
        Given: A Token-2022 config with a 15% transfer fee
        When: Scanned
        Then: Risk level is critical with a fee-related critical issue
        """
        config = TokenConfigFactory(protocol=TokenProtocol.TOKEN2022, transfer_fees=15)

        assessment = scan_for_risks(config)

        assert assessment.risk_level == RiskSeverity.CRITICAL
        assert assessment.critical_issues == ["Transfer fees above 10% - potential honeypot"]
        [risk] = assessment.risks
        assert risk.category == RiskCategory.TOKENOMICS
        assert risk.title == "High Transfer Fees"
        assert risk.description == "Transfer fee of 15% may indicate honeypot"
        assert assessment.safety_score == 100 - (40 + 5)

    def test_fee_at_ten_percent_is_not_critical(self) -> None:
        config = TokenConfigFactory(protocol=TokenProtocol.TOKEN2022, transfer_fees=10)

        assert scan_for_risks(config).risk_level == RiskSeverity.LOW

    def test_two_high_risks_make_level_high(self) -> None:
        config = TokenConfigFactory(freeze_authority=True, website=None, twitter=None, telegram=None)

        assessment = scan_for_risks(config)

        assert [r.title for r in assessment.risks] == [
            "Freeze Authority Enabled",
            "No Social Verification",
        ]
        assert assessment.risk_level == RiskSeverity.HIGH
        assert assessment.safety_score == 50
        assert assessment.warnings == [
            "Token accounts can be frozen by creator",
            "No social verification - difficult to verify legitimacy",
        ]

    def test_single_high_risk_makes_level_medium(self) -> None:
        assessment = scan_for_risks(TokenConfigFactory(liquidity_locked=False))

        assert [r.title for r in assessment.risks] == ["Unlocked Liquidity"]
        assert assessment.risk_level == RiskSeverity.MEDIUM
        assert assessment.safety_score == 75

    def test_three_minor_risks_make_level_medium(self) -> None:
        config = TokenConfigFactory(
            mint_authority=MintAuthority.REVOCABLE,
            supply=2_000_000_000_000,
            has_liquidity=False,
        )

        assessment = scan_for_risks(config)

        assert [r.severity for r in assessment.risks] == [RiskSeverity.MEDIUM] * 3
        assert assessment.risk_level == RiskSeverity.MEDIUM
        assert assessment.safety_score == 85

    def test_two_minor_risks_stay_low(self) -> None:
        config = TokenConfigFactory(mint_authority=MintAuthority.REVOCABLE, has_liquidity=False)

        assessment = scan_for_risks(config)

        assert len(assessment.risks) == 2
        assert assessment.risk_level == RiskSeverity.LOW
        assert assessment.safety_score == 90

    def test_risks_in_detection_order(self) -> None:
        assessment = scan_for_risks(TokenConfigFactory(bare=True))

        assert [r.title for r in assessment.risks] == [
            "Revocable Mint Authority",
            "Missing Description",
            "No Social Verification",
            "No Liquidity",
        ]
        assert assessment.risk_level == RiskSeverity.MEDIUM
        assert assessment.safety_score == 60

    def test_short_description_is_low_risk(self) -> None:
        assessment = scan_for_risks(TokenConfigFactory(description="tiny"))

        [risk] = assessment.risks
        assert risk.severity == RiskSeverity.LOW
        assert risk.category == RiskCategory.METADATA

    def test_safety_score_floors_at_zero(self) -> None:
        config = TokenConfigFactory(
            protocol=TokenProtocol.TOKEN2022,
            transfer_fees=20,
            freeze_authority=True,
            website=None,
            twitter=None,
            telegram=None,
            liquidity_locked=False,
        )

        assessment = scan_for_risks(config)

        assert assessment.risk_level == RiskSeverity.CRITICAL
        assert assessment.safety_score == 0
