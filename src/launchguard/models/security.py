"""Token security domain models.

TokenConfig is the caller's pre-creation snapshot that gets scored;
TokenData is what the chain reports for an existing mint.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class MintAuthority(str, Enum):
    """How the mint authority is configured."""

    PERMANENT = "permanent"
    REVOCABLE = "revocable"
    NONE = "none"


class TokenProtocol(str, Enum):
    """Token program the mint is created under."""

    SPL = "spl"
    TOKEN2022 = "token2022"


class TokenConfig(BaseModel):
    """Token configuration snapshot for quality scoring and risk scanning."""

    name: str = ""
    symbol: str = ""
    decimals: int = Field(default=9, ge=0)
    supply: float | None = Field(default=None, ge=0)
    mint_authority: MintAuthority
    freeze_authority: bool = False
    update_authority: bool = False
    description: str | None = None
    website: str | None = None
    twitter: str | None = None
    telegram: str | None = None
    image: str | None = None
    use_extensions: bool = False
    transfer_fees: float | None = Field(default=None, ge=0)
    non_transferable: bool = False
    has_liquidity: bool = False
    liquidity_locked: bool = False
    protocol: TokenProtocol | None = None

    @property
    def social_links(self) -> list[str]:
        """Non-empty website / twitter / telegram links."""
        return [link for link in (self.website, self.twitter, self.telegram) if link]


class QualityComponents(BaseModel):
    """Per-area quality sub-scores, each 0-100."""

    authorities: int = Field(..., ge=0, le=100)
    metadata: int = Field(..., ge=0, le=100)
    tokenomics: int = Field(..., ge=0, le=100)
    liquidity: int = Field(..., ge=0, le=100)
    verification: int = Field(..., ge=0, le=100)


Grade = Literal["A+", "A", "B", "C", "D", "F"]


class QualityScore(BaseModel):
    """Weighted quality score with letter grade and suggestions."""

    overall: int = Field(..., ge=0, le=100)
    components: QualityComponents
    grade: Grade
    recommendations: list[str] = Field(default_factory=list)


class RiskCategory(str, Enum):
    """Area a risk belongs to."""

    AUTHORITY = "authority"
    LIQUIDITY = "liquidity"
    METADATA = "metadata"
    TOKENOMICS = "tokenomics"
    SOCIAL = "social"


class RiskSeverity(str, Enum):
    """Severity of a single risk, also used for the overall risk level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Risk(BaseModel):
    """A single triggered risk condition."""

    category: RiskCategory
    severity: RiskSeverity
    title: str
    description: str
    recommendation: str


class RiskAssessment(BaseModel):
    """Itemised risks with an overall level and safety score."""

    risk_level: RiskSeverity
    risks: list[Risk] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    critical_issues: list[str] = Field(default_factory=list)
    safety_score: int = Field(..., ge=0, le=100)


class TokenData(BaseModel):
    """On-chain mint account snapshot."""

    mint_address: str
    decimals: int = Field(..., ge=0)
    supply: float = Field(..., ge=0)  # UI units (raw / 10**decimals)
    mint_authority: str | None = None
    freeze_authority: str | None = None


class HoneypotAnalysis(BaseModel):
    """Honeypot heuristic result for an existing mint."""

    is_honeypot: bool = False
    confidence: int = Field(default=0, ge=0, le=100)
    indicators: list[str] = Field(default_factory=list)
    can_buy: bool = True
    can_sell: bool = True
    buy_tax: float | None = None
    sell_tax: float | None = None


class RugPullIndicator(BaseModel):
    """One rug-pull signal."""

    name: str
    present: bool
    severity: Literal["low", "medium", "high"]
    description: str


class RugPullIndicators(BaseModel):
    """Rug-pull heuristic result for an existing mint."""

    risk_score: int = Field(default=0, ge=0, le=100)
    indicators: list[RugPullIndicator] = Field(default_factory=list)
    liquidity_locked: bool = False
    ownership_renounced: bool = False
    large_holders: bool = False


class SecurityAnalysis(BaseModel):
    """Combined security report for an existing mint."""

    token_mint: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    quality_score: QualityScore
    risk_assessment: RiskAssessment
    honeypot_check: HoneypotAnalysis
    rug_pull_indicators: RugPullIndicators
    is_verified: bool
    can_trade: bool
