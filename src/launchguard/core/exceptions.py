"""LaunchGuard exception hierarchy.

Scoring, scanning and bot detection never raise on well-formed input; these
exceptions mark boundary violations and failures of external collaborators.
"""


class LaunchGuardError(Exception):
    """Base exception for all LaunchGuard errors.

    All custom exceptions in LaunchGuard should inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(LaunchGuardError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("Unknown protection level: extreme")
    """

    pass


class ValidationError(LaunchGuardError):
    """Raised when input data fails boundary validation.

    Use this for empty wallet or mint identifiers, negative amounts and
    other inputs the engine refuses to record.

    Example:
        raise ValidationError("Transaction amount must be a non-negative number")
    """

    pass


class ExternalServiceError(LaunchGuardError):
    """Raised when an external service call fails.

    Attributes:
        service: Name of the external service that failed.
        status_code: HTTP status code if available, None otherwise.

    Example:
        raise ExternalServiceError(service="Solana RPC", message="Rate limited", status_code=429)
    """

    def __init__(
        self,
        service: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.service = service
        self.status_code = status_code
        super().__init__(f"{service}: {message}")


class CircuitBreakerOpenError(LaunchGuardError):
    """Raised when the RPC client's circuit breaker is open."""

    pass


class SecurityAnalysisError(LaunchGuardError):
    """Raised when on-chain security analysis of a token cannot complete.

    Attributes:
        token_mint: The mint address being analyzed.
    """

    def __init__(self, message: str, token_mint: str | None = None) -> None:
        super().__init__(message)
        self.token_mint = token_mint
