"""Token security scoring constants."""

from typing import Final

# =============================================================================
# Quality Score Weights (must sum to 1.0)
# =============================================================================

AUTHORITIES_WEIGHT: Final[float] = 0.25
METADATA_WEIGHT: Final[float] = 0.20
TOKENOMICS_WEIGHT: Final[float] = 0.25
LIQUIDITY_WEIGHT: Final[float] = 0.20
VERIFICATION_WEIGHT: Final[float] = 0.10

# =============================================================================
# Grade Bands (inclusive lower bounds, checked top-down)
# =============================================================================

GRADE_BANDS: Final[tuple[tuple[int, str], ...]] = (
    (95, "A+"),
    (85, "A"),
    (70, "B"),
    (55, "C"),
    (40, "D"),
)
FAILING_GRADE: Final[str] = "F"

# =============================================================================
# Recommendation Triggers (component score below threshold)
# =============================================================================

AUTHORITIES_RECOMMENDATION_BELOW: Final[int] = 70
METADATA_RECOMMENDATION_BELOW: Final[int] = 70
TOKENOMICS_RECOMMENDATION_BELOW: Final[int] = 60
LIQUIDITY_RECOMMENDATION_BELOW: Final[int] = 50
VERIFICATION_RECOMMENDATION_BELOW: Final[int] = 50

# =============================================================================
# Tokenomics
# =============================================================================

REASONABLE_SUPPLY_MIN: Final[float] = 1_000_000
REASONABLE_SUPPLY_MAX: Final[float] = 1_000_000_000
EXCESSIVE_SUPPLY: Final[float] = 1_000_000_000_000
STANDARD_DECIMALS_MIN: Final[int] = 6
STANDARD_DECIMALS_MAX: Final[int] = 9
REASONABLE_TRANSFER_FEE_MAX: Final[float] = 5
EXCESSIVE_TRANSFER_FEE: Final[float] = 10

# =============================================================================
# Metadata
# =============================================================================

DETAILED_DESCRIPTION_MIN_LENGTH: Final[int] = 20
MINIMAL_DESCRIPTION_MIN_LENGTH: Final[int] = 10

# =============================================================================
# Risk Assessment
# =============================================================================

CRITICAL_RISK_PENALTY: Final[int] = 40
HIGH_RISK_PENALTY: Final[int] = 20
PER_RISK_PENALTY: Final[int] = 5
HIGH_RISK_LEVEL_COUNT: Final[int] = 2
MEDIUM_RISK_LEVEL_TOTAL: Final[int] = 3

# =============================================================================
# On-chain Analysis
# =============================================================================

VERIFIED_MIN_OVERALL: Final[int] = 70
HONEYPOT_FREEZE_CONFIDENCE: Final[int] = 30
HONEYPOT_CONFIDENCE_THRESHOLD: Final[int] = 70
RUG_PULL_MINT_AUTHORITY_SCORE: Final[int] = 20
RUG_PULL_FREEZE_AUTHORITY_SCORE: Final[int] = 30
