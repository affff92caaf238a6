"""Shared pytest fixtures for LaunchGuard tests.

This module provides fixtures for:
- Test environment variables and settings cache isolation
- A controllable millisecond clock
- Wired detector / scheduler / gate instances sharing that clock
- Test data factories

Usage:
    @pytest.mark.unit
    def test_something(scheduler, clock):
        clock.advance(60_000)
        ...
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest

from launchguard.config.settings import Settings, get_settings
from launchguard.services.detection.bot_detector import BotDetector
from launchguard.services.protection.launch_scheduler import LaunchScheduler
from launchguard.services.protection.purchase_gate import PurchaseGate
from tests.factories.token import TokenConfigFactory, TokenDataFactory

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Load .env file if it exists (won't override existing env vars)
    load_dotenv()

    os.environ.setdefault("SOLANA_RPC_URL", "http://localhost:8899")

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults, independent of the environment."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        solana_rpc_url="http://localhost:8899",
        debug=False,
        known_bot_addresses=[],
    )


# =============================================================================
# Clock and Components
# =============================================================================


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 0) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms

    def set(self, ms: int) -> None:
        self.now = ms


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at t=0."""
    return FakeClock()


@pytest.fixture
def detector(clock: FakeClock) -> BotDetector:
    """Bot detector with an empty known-bot set."""
    return BotDetector(clock=clock)


@pytest.fixture
def scheduler(detector: BotDetector, clock: FakeClock) -> LaunchScheduler:
    """Launch scheduler sharing the detector and clock."""
    return LaunchScheduler(detector, clock=clock)


@pytest.fixture
def gate(scheduler: LaunchScheduler, detector: BotDetector) -> PurchaseGate:
    """Purchase gate over the shared scheduler and detector."""
    return PurchaseGate(scheduler, detector)


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def token_config_factory() -> type[TokenConfigFactory]:
    """Provide token config factory."""
    return TokenConfigFactory


@pytest.fixture
def token_data_factory() -> type[TokenDataFactory]:
    """Provide on-chain token data factory."""
    return TokenDataFactory


# =============================================================================
# Mock Collaborators
# =============================================================================


@pytest.fixture
def mock_submitter() -> MagicMock:
    """Mock transaction submitter.

    Returns a mock whose submit_purchase resolves to a fake signature.
    """
    mock = MagicMock()
    mock.submit_purchase = AsyncMock(return_value="5xTestSignature")
    return mock


@pytest.fixture
def mock_token_source() -> MagicMock:
    """Mock token data source returning a fully renounced mint."""
    mock = MagicMock()
    mock.get_token_data = AsyncMock(
        return_value=TokenDataFactory(mint_authority=None, freeze_authority=None)
    )
    return mock
