"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from launchguard.core.dependencies import LaunchGuard


def get_launch_guard(request: Request) -> LaunchGuard:
    """Engine instance attached to the running app."""
    guard: LaunchGuard = request.app.state.launch_guard
    return guard


LaunchGuardDep = Annotated[LaunchGuard, Depends(get_launch_guard)]
