"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter

from launchguard.api.dependencies import LaunchGuardDep

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(guard: LaunchGuardDep) -> dict[str, Any]:
    """
    Health check endpoint.

    Returns:
        dict with status, version and the number of known bots.
    """
    return {
        "status": "ok",
        "version": guard.settings.app_version,
        "known_bots": guard.detector.known_bot_count,
    }
