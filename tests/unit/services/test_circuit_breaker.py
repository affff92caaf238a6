"""Tests for CircuitBreaker implementation."""

from datetime import UTC, datetime, timedelta

import pytest

from launchguard.core.exceptions import CircuitBreakerOpenError
from launchguard.services.base import CircuitBreaker, CircuitState


class TestCircuitBreaker:
    """Tests for CircuitBreaker dataclass."""

    def test_initial_state_is_closed(self) -> None:
        cb = CircuitBreaker()

        assert cb.state == CircuitState.CLOSED
        assert cb.failure_threshold == 5
        assert cb.cooldown_seconds == 30

    def test_record_success_resets(self) -> None:
        """
        Given: CircuitBreaker in HALF_OPEN state with failures
        When: record_success() is called
        Then: Failure count resets and state becomes CLOSED
        """
        cb = CircuitBreaker()
        cb.failure_count = 3
        cb.state = CircuitState.HALF_OPEN

        cb.record_success()

        assert cb.failure_count == 0
        assert cb.state == CircuitState.CLOSED

    def test_opens_at_threshold(self) -> None:
        cb = CircuitBreaker(failure_threshold=3)

        cb.record_failure()
        cb.record_failure()
        assert cb.state == CircuitState.CLOSED

        cb.record_failure()
        assert cb.state == CircuitState.OPEN
        assert cb.last_failure_time is not None

    def test_blocks_while_cooling_down(self) -> None:
        cb = CircuitBreaker(cooldown_seconds=30)
        cb.state = CircuitState.OPEN
        cb.last_failure_time = datetime.now(UTC)

        assert cb.can_execute() is False
        with pytest.raises(CircuitBreakerOpenError, match="Circuit breaker is open"):
            cb.raise_if_open()

    def test_half_open_after_cooldown(self) -> None:
        """
        Given: CircuitBreaker in OPEN state, cooldown elapsed
        When: can_execute() is called
        Then: Transitions to HALF_OPEN and returns True
        """
        cb = CircuitBreaker(cooldown_seconds=30)
        cb.state = CircuitState.OPEN
        cb.last_failure_time = datetime.now(UTC) - timedelta(seconds=31)

        assert cb.can_execute() is True
        assert cb.state == CircuitState.HALF_OPEN

    def test_failure_in_half_open_reopens(self) -> None:
        cb = CircuitBreaker(failure_threshold=5)
        cb.state = CircuitState.HALF_OPEN

        cb.record_failure()

        assert cb.state == CircuitState.OPEN

    def test_open_without_failure_time_blocks(self) -> None:
        cb = CircuitBreaker()
        cb.state = CircuitState.OPEN

        assert cb.can_execute() is False
