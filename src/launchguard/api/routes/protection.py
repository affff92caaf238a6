"""Launch protection API routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from launchguard.api.dependencies import LaunchGuardDep
from launchguard.core.dependencies import LaunchGuard
from launchguard.core.exceptions import ValidationError
from launchguard.models.protection import (
    AntiSnipeConfig,
    AntiSnipeOverrides,
    LaunchSchedule,
    ProtectionLevel,
    PurchaseDecision,
)
from launchguard.services.protection import config_policy

router = APIRouter(prefix="/protection", tags=["protection"])


class CreateConfigRequest(BaseModel):
    """Request to build a protection config."""

    level: ProtectionLevel
    overrides: AntiSnipeOverrides | None = None


class ConfigResponse(BaseModel):
    """Protection config with display summary and setup cost."""

    config: AntiSnipeConfig
    description: str
    setup_cost_sol: float


class ValidatePurchaseRequest(BaseModel):
    """Request to validate a purchase against a launch."""

    wallet: str
    amount: float = Field(..., ge=0)
    config: AntiSnipeConfig


@router.post("/config", response_model=ConfigResponse)
async def create_config(request: CreateConfigRequest) -> ConfigResponse:
    """Build a protection config for a level with optional overrides."""
    config = config_policy.create_config(request.level, request.overrides)
    return ConfigResponse(
        config=config,
        description=config_policy.describe_config(config),
        setup_cost_sol=config_policy.estimate_setup_cost(config),
    )


@router.post("/launches/{token_mint}", response_model=LaunchSchedule)
async def schedule_launch(
    token_mint: str,
    config: AntiSnipeConfig,
    guard: LaunchGuardDep,
) -> LaunchSchedule:
    """Schedule (or reschedule) a token launch."""
    try:
        return guard.scheduler.schedule_token_launch(token_mint, config)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.get("/launches/{token_mint}", response_model=LaunchSchedule)
async def get_launch(token_mint: str, guard: LaunchGuardDep) -> LaunchSchedule:
    """Get a launch schedule."""
    return _require_schedule(token_mint, guard)


@router.post("/launches/{token_mint}/activate", response_model=LaunchSchedule)
async def activate_launch(token_mint: str, guard: LaunchGuardDep) -> LaunchSchedule:
    """Open a scheduled launch to the public."""
    _require_schedule(token_mint, guard)
    guard.scheduler.activate_launch(token_mint)
    return _require_schedule(token_mint, guard)


@router.post("/launches/{token_mint}/complete", response_model=LaunchSchedule)
async def complete_launch(token_mint: str, guard: LaunchGuardDep) -> LaunchSchedule:
    """Mark an active launch as completed."""
    _require_schedule(token_mint, guard)
    guard.scheduler.complete_launch(token_mint)
    return _require_schedule(token_mint, guard)


@router.post("/launches/{token_mint}/cancel", response_model=LaunchSchedule)
async def cancel_launch(token_mint: str, guard: LaunchGuardDep) -> LaunchSchedule:
    """Cancel a scheduled or active launch."""
    _require_schedule(token_mint, guard)
    guard.scheduler.cancel_launch(token_mint)
    return _require_schedule(token_mint, guard)


@router.post("/launches/{token_mint}/validate", response_model=PurchaseDecision)
async def validate_purchase(
    token_mint: str,
    request: ValidatePurchaseRequest,
    guard: LaunchGuardDep,
) -> PurchaseDecision:
    """Check whether a wallet may buy right now."""
    return guard.scheduler.validate_purchase(
        request.wallet, request.amount, token_mint, request.config
    )


def _require_schedule(token_mint: str, guard: LaunchGuard) -> LaunchSchedule:
    schedule = guard.scheduler.get_launch_status(token_mint)
    if schedule is None:
        raise HTTPException(status_code=404, detail=f"No launch scheduled for {token_mint}")
    return schedule
