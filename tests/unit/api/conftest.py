"""Fixtures for API route tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from launchguard.api.app import create_app
from launchguard.config.settings import Settings
from launchguard.core.dependencies import LaunchGuard, build_launch_guard


@pytest.fixture
def guard(settings: Settings, clock, mock_token_source: MagicMock) -> LaunchGuard:
    """Engine on the fake clock with a mocked token source."""
    return build_launch_guard(settings, clock=clock, token_source=mock_token_source)


@pytest.fixture
def client(guard: LaunchGuard) -> TestClient:
    """Create test client for the FastAPI app."""
    return TestClient(create_app(guard))
