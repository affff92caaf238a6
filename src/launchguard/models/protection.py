"""Launch protection domain models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from launchguard.models.detection import BotDetectionResult


class ProtectionLevel(str, Enum):
    """Coarse anti-snipe protection level chosen by the token creator."""

    NONE = "none"
    BASIC = "basic"
    STANDARD = "standard"
    ADVANCED = "advanced"

    @property
    def rank(self) -> int:
        """Ordinal position; higher means stricter defaults."""
        return list(ProtectionLevel).index(self)


def _unique(addresses: tuple[str, ...]) -> tuple[str, ...]:
    """Drop duplicate addresses, keeping first-seen order."""
    return tuple(dict.fromkeys(addresses))


class AntiSnipeConfig(BaseModel):
    """Concrete protection settings for one token launch.

    Immutable: whitelist and blacklist updates go through
    config_policy.add_to_whitelist / add_to_blacklist, which return a copy.
    A buy_limit_per_tx of 0 or None means no per-transaction limit.
    """

    model_config = ConfigDict(frozen=True)

    level: ProtectionLevel
    launch_delay_minutes: int = Field(default=0, ge=0)
    max_wallet_percentage: float | None = Field(default=None, ge=0, le=100)
    buy_limit_per_tx: int | None = Field(default=None, ge=0)
    whitelist_enabled: bool = False
    whitelist: tuple[str, ...] = ()
    blacklist_enabled: bool = False
    blacklist: tuple[str, ...] = ()
    honeypot_monitor_minutes: int | None = Field(default=None, ge=0)

    @field_validator("whitelist", "blacklist")
    @classmethod
    def dedupe_addresses(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Keep each address once."""
        return _unique(v)

    @property
    def has_buy_limit(self) -> bool:
        """Whether a non-zero per-transaction limit is configured."""
        return bool(self.buy_limit_per_tx)


class AntiSnipeOverrides(BaseModel):
    """Caller overrides applied on top of a level's base configuration.

    Only fields explicitly set are applied. Unknown keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    launch_delay_minutes: int | None = Field(default=None, ge=0)
    max_wallet_percentage: float | None = Field(default=None, ge=0, le=100)
    buy_limit_per_tx: int | None = Field(default=None, ge=0)
    whitelist_enabled: bool | None = None
    whitelist: tuple[str, ...] | None = None
    blacklist_enabled: bool | None = None
    blacklist: tuple[str, ...] | None = None
    honeypot_monitor_minutes: int | None = Field(default=None, ge=0)


class LaunchStatus(str, Enum):
    """Lifecycle state of a scheduled launch."""

    SCHEDULED = "scheduled"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class LaunchSchedule(BaseModel):
    """Launch timeline for one token mint. Timestamps are ms since epoch."""

    token_mint: str
    scheduled_time: int
    status: LaunchStatus = LaunchStatus.SCHEDULED
    whitelist_phase_end: int | None = None
    public_phase_start: int

    @model_validator(mode="after")
    def check_phase_order(self) -> "LaunchSchedule":
        """Whitelist phase must end before the public phase starts."""
        if (
            self.whitelist_phase_end is not None
            and self.whitelist_phase_end >= self.public_phase_start
        ):
            raise ValueError("whitelist_phase_end must precede public_phase_start")
        return self


class PurchaseDecision(BaseModel):
    """Allow/deny verdict for a purchase attempt."""

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> "PurchaseDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "PurchaseDecision":
        return cls(allowed=False, reason=reason)


class WalletLimits(BaseModel):
    """Per-wallet holding cap derived from a percentage of total supply."""

    max_percentage: float = Field(..., gt=0, le=100)
    max_tokens: float = Field(..., ge=0)
    cooldown_seconds: int = Field(default=60, ge=0)


class PurchaseOutcome(BaseModel):
    """Result of running a purchase through validation, bot checks and submission."""

    decision: PurchaseDecision
    bot_detection: BotDetectionResult | None = None
    signature: str | None = None

    @property
    def submitted(self) -> bool:
        return self.signature is not None
