"""Bot detection API routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from launchguard.api.dependencies import LaunchGuardDep
from launchguard.core.exceptions import ValidationError
from launchguard.models.detection import BotDetectionResult, TransactionAnalysis

router = APIRouter(prefix="/detection", tags=["detection"])


class RecordTransactionRequest(BaseModel):
    """Request to record a purchase attempt."""

    wallet: str
    amount: float
    flags: list[str] = Field(default_factory=list)


@router.post("/transactions", response_model=TransactionAnalysis)
async def record_transaction(
    request: RecordTransactionRequest,
    guard: LaunchGuardDep,
) -> TransactionAnalysis:
    """Append a transaction to a wallet's ledger."""
    try:
        return guard.detector.record_transaction(request.wallet, request.amount, request.flags)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.get("/wallets/{wallet}", response_model=BotDetectionResult)
async def detect_bot(wallet: str, guard: LaunchGuardDep) -> BotDetectionResult:
    """Score a wallet's recorded history for bot behaviour."""
    return guard.detector.detect_bot(wallet)
