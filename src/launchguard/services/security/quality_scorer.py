"""Token quality scoring.

Five sub-scores (0-100) combined with fixed weights:
- Authorities 25%: mint / freeze / update authority setup
- Metadata 20%: name, symbol, description, image, links
- Tokenomics 25%: supply range, decimals, transfer fees
- Liquidity 20%: pool present and locked
- Verification 10%: social presence

Pure functions: the same TokenConfig always yields the same QualityScore.
"""

import structlog

from launchguard.constants.security import (
    AUTHORITIES_RECOMMENDATION_BELOW,
    AUTHORITIES_WEIGHT,
    DETAILED_DESCRIPTION_MIN_LENGTH,
    EXCESSIVE_SUPPLY,
    EXCESSIVE_TRANSFER_FEE,
    FAILING_GRADE,
    GRADE_BANDS,
    LIQUIDITY_RECOMMENDATION_BELOW,
    LIQUIDITY_WEIGHT,
    METADATA_RECOMMENDATION_BELOW,
    METADATA_WEIGHT,
    REASONABLE_SUPPLY_MAX,
    REASONABLE_SUPPLY_MIN,
    REASONABLE_TRANSFER_FEE_MAX,
    STANDARD_DECIMALS_MAX,
    STANDARD_DECIMALS_MIN,
    TOKENOMICS_RECOMMENDATION_BELOW,
    TOKENOMICS_WEIGHT,
    VERIFICATION_RECOMMENDATION_BELOW,
    VERIFICATION_WEIGHT,
)
from launchguard.models.security import (
    Grade,
    MintAuthority,
    QualityComponents,
    QualityScore,
    TokenConfig,
    TokenProtocol,
)

logger = structlog.get_logger(__name__)


def _clamp(score: int) -> int:
    return min(max(score, 0), 100)


def score_authorities(config: TokenConfig) -> int:
    """Score authority configuration (base 50)."""
    score = 50

    if config.mint_authority == MintAuthority.PERMANENT:
        score += 30
    elif config.mint_authority == MintAuthority.NONE:
        score += 25
    else:
        score += 10

    score += -5 if config.freeze_authority else 15

    if not config.update_authority:
        score += 5

    return _clamp(score)


def score_metadata(config: TokenConfig) -> int:
    """Score metadata completeness."""
    score = 0

    if config.name.strip():
        score += 20
    if config.symbol.strip():
        score += 20

    description = config.description or ""
    if description.strip() and len(description) >= DETAILED_DESCRIPTION_MIN_LENGTH:
        score += 15
    if config.image:
        score += 15

    for link in (config.website, config.twitter, config.telegram):
        if link and link.strip():
            score += 10

    return _clamp(score)


def score_tokenomics(config: TokenConfig) -> int:
    """Score supply, decimals and transfer fees (base 50)."""
    score = 50

    if config.supply:
        score += 20
        if REASONABLE_SUPPLY_MIN <= config.supply <= REASONABLE_SUPPLY_MAX:
            score += 10
        elif config.supply > EXCESSIVE_SUPPLY:
            score -= 10
    else:
        score -= 10

    if STANDARD_DECIMALS_MIN <= config.decimals <= STANDARD_DECIMALS_MAX:
        score += 10

    if config.protocol == TokenProtocol.TOKEN2022 and config.transfer_fees is not None:
        if 0 < config.transfer_fees <= REASONABLE_TRANSFER_FEE_MAX:
            score += 5
        elif config.transfer_fees > EXCESSIVE_TRANSFER_FEE:
            score -= 15

    return _clamp(score)


def score_liquidity(config: TokenConfig) -> int:
    """Score liquidity setup (base 30)."""
    score = 30

    if config.has_liquidity:
        score += 40
        score += 30 if config.liquidity_locked else 10

    return _clamp(score)


def score_verification(config: TokenConfig) -> int:
    """Score social presence: 40 for any link plus 20 per link."""
    links = config.social_links
    score = 40 if links else 0
    score += 20 * len(links)
    return _clamp(score)


def calculate_grade(score: float) -> Grade:
    """Letter grade for an overall score."""
    for lower_bound, grade in GRADE_BANDS:
        if score >= lower_bound:
            return grade  # type: ignore[return-value]
    return FAILING_GRADE  # type: ignore[return-value]


def generate_recommendations(components: QualityComponents, config: TokenConfig) -> list[str]:
    """Improvement suggestions for components below their thresholds."""
    recommendations: list[str] = []

    if components.authorities < AUTHORITIES_RECOMMENDATION_BELOW:
        if config.mint_authority != MintAuthority.PERMANENT:
            recommendations.append(
                "Consider setting permanent supply by revoking mint authority"
            )
        if config.freeze_authority:
            recommendations.append("Revoke freeze authority to build trust with holders")

    if components.metadata < METADATA_RECOMMENDATION_BELOW:
        if not config.description or len(config.description) < DETAILED_DESCRIPTION_MIN_LENGTH:
            recommendations.append(
                "Add a detailed description explaining your token's purpose"
            )
        if not config.image:
            recommendations.append("Upload a professional logo/image for your token")
        if not config.website:
            recommendations.append("Add a website URL to establish legitimacy")

    if components.tokenomics < TOKENOMICS_RECOMMENDATION_BELOW:
        if not config.supply:
            recommendations.append("Set an initial supply to bootstrap your token")
        if config.transfer_fees and config.transfer_fees > REASONABLE_TRANSFER_FEE_MAX:
            recommendations.append(
                f"Consider reducing transfer fees (current: {config.transfer_fees:g}%) "
                "to avoid honeypot flags"
            )

    if components.liquidity < LIQUIDITY_RECOMMENDATION_BELOW:
        recommendations.append("Add liquidity after token creation to enable trading")
        recommendations.append("Consider locking liquidity to prevent rug pulls")

    if components.verification < VERIFICATION_RECOMMENDATION_BELOW:
        recommendations.append(
            "Add social media links (Twitter, Telegram, Website) to verify legitimacy"
        )

    return recommendations


def calculate_quality_score(config: TokenConfig) -> QualityScore:
    """Score a token configuration.

    Args:
        config: Token configuration snapshot

    Returns:
        QualityScore with rounded overall, components, grade and recommendations
    """
    components = QualityComponents(
        authorities=score_authorities(config),
        metadata=score_metadata(config),
        tokenomics=score_tokenomics(config),
        liquidity=score_liquidity(config),
        verification=score_verification(config),
    )

    weighted = (
        components.authorities * AUTHORITIES_WEIGHT
        + components.metadata * METADATA_WEIGHT
        + components.tokenomics * TOKENOMICS_WEIGHT
        + components.liquidity * LIQUIDITY_WEIGHT
        + components.verification * VERIFICATION_WEIGHT
    )

    # Half-up rounding; the grade is read off the rounded score
    overall = int(weighted + 0.5)
    grade = calculate_grade(overall)

    logger.debug(
        "quality_score_calculated",
        symbol=config.symbol,
        overall=overall,
        grade=grade,
    )

    return QualityScore(
        overall=overall,
        components=components,
        grade=grade,
        recommendations=generate_recommendations(components, config),
    )
