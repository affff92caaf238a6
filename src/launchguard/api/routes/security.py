"""Token security API routes."""

from fastapi import APIRouter, HTTPException

from launchguard.api.dependencies import LaunchGuardDep
from launchguard.core.exceptions import SecurityAnalysisError
from launchguard.models.security import (
    QualityScore,
    RiskAssessment,
    SecurityAnalysis,
    TokenConfig,
)
from launchguard.services.security.quality_scorer import calculate_quality_score
from launchguard.services.security.risk_scanner import scan_for_risks

router = APIRouter(prefix="/security", tags=["security"])


@router.post("/quality-score", response_model=QualityScore)
async def quality_score(config: TokenConfig) -> QualityScore:
    """Score a token configuration."""
    return calculate_quality_score(config)


@router.post("/risk-scan", response_model=RiskAssessment)
async def risk_scan(config: TokenConfig) -> RiskAssessment:
    """Scan a token configuration for risks."""
    return scan_for_risks(config)


@router.get("/tokens/{token_mint}", response_model=SecurityAnalysis)
async def analyze_token(token_mint: str, guard: LaunchGuardDep) -> SecurityAnalysis:
    """Security report for an existing mint."""
    try:
        return await guard.analyzer.analyze_token_security(token_mint)
    except SecurityAnalysisError as e:
        raise HTTPException(status_code=502, detail=str(e)) from e
