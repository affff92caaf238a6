"""Protection level presets and config helpers.

Maps a coarse ProtectionLevel to a concrete AntiSnipeConfig:

| level    | delay | max wallet | buy limit | whitelist | blacklist | honeypot |
|----------|-------|------------|-----------|-----------|-----------|----------|
| none     | 0     | -          | -         | off       | off       | -        |
| basic    | 5     | 5%         | -         | off       | on        | 2        |
| standard | 15    | 3%         | 0         | off       | on        | 5        |
| advanced | 30    | 2%         | 0         | on        | on        | 10       |

The buy limit of 0 on standard/advanced is kept as published; a zero
limit means "no per-transaction limit" everywhere it is read.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from launchguard.constants.protection import (
    BASE_TRANSACTION_FEE_SOL,
    DESCRIPTION_SEPARATOR,
    HONEYPOT_MONITORING_FEE_SOL,
    NO_PROTECTION_DESCRIPTION,
    PURCHASE_COOLDOWN_SECONDS,
    WHITELIST_ENTRY_FEE_SOL,
)
from launchguard.core.exceptions import ConfigurationError, ValidationError
from launchguard.models.protection import (
    AntiSnipeConfig,
    AntiSnipeOverrides,
    ProtectionLevel,
    WalletLimits,
)

logger = structlog.get_logger(__name__)


BASE_CONFIGS: Mapping[ProtectionLevel, AntiSnipeConfig] = {
    ProtectionLevel.NONE: AntiSnipeConfig(
        level=ProtectionLevel.NONE,
        launch_delay_minutes=0,
        whitelist_enabled=False,
        blacklist_enabled=False,
    ),
    ProtectionLevel.BASIC: AntiSnipeConfig(
        level=ProtectionLevel.BASIC,
        launch_delay_minutes=5,
        max_wallet_percentage=5,
        whitelist_enabled=False,
        blacklist_enabled=True,
        honeypot_monitor_minutes=2,
    ),
    ProtectionLevel.STANDARD: AntiSnipeConfig(
        level=ProtectionLevel.STANDARD,
        launch_delay_minutes=15,
        max_wallet_percentage=3,
        buy_limit_per_tx=0,
        whitelist_enabled=False,
        blacklist_enabled=True,
        honeypot_monitor_minutes=5,
    ),
    ProtectionLevel.ADVANCED: AntiSnipeConfig(
        level=ProtectionLevel.ADVANCED,
        launch_delay_minutes=30,
        max_wallet_percentage=2,
        buy_limit_per_tx=0,
        whitelist_enabled=True,
        blacklist_enabled=True,
        honeypot_monitor_minutes=10,
    ),
}


def create_config(
    level: ProtectionLevel | str,
    overrides: AntiSnipeOverrides | Mapping[str, Any] | None = None,
) -> AntiSnipeConfig:
    """Build the config for a protection level with caller overrides applied.

    Overrides win per field. Only fields the caller actually set are
    applied, so an override model with defaults left alone changes nothing.

    Args:
        level: Protection level (enum or its string value)
        overrides: Optional per-field overrides

    Returns:
        New AntiSnipeConfig

    Raises:
        ConfigurationError: If the level is unknown
        pydantic.ValidationError: If an override key is unknown or out of range
    """
    try:
        level = ProtectionLevel(level)
    except ValueError:
        raise ConfigurationError(f"Unknown protection level: {level}") from None

    base = BASE_CONFIGS[level]
    if overrides is None:
        return base

    if not isinstance(overrides, AntiSnipeOverrides):
        overrides = AntiSnipeOverrides.model_validate(overrides)

    updates = overrides.model_dump(exclude_unset=True)
    if not updates:
        return base

    # Re-validate the merged result so override values pass field constraints
    merged = AntiSnipeConfig.model_validate({**base.model_dump(), **updates})
    logger.debug(
        "anti_snipe_config_overridden",
        level=level.value,
        fields=sorted(updates),
    )
    return merged


def add_to_whitelist(config: AntiSnipeConfig, wallet: str) -> AntiSnipeConfig:
    """Return a copy of config with wallet whitelisted and the whitelist enabled."""
    whitelist = config.whitelist
    if wallet not in whitelist:
        whitelist = (*whitelist, wallet)
    return config.model_copy(update={"whitelist": whitelist, "whitelist_enabled": True})


def add_to_blacklist(config: AntiSnipeConfig, wallet: str) -> AntiSnipeConfig:
    """Return a copy of config with wallet blacklisted and the blacklist enabled."""
    blacklist = config.blacklist
    if wallet not in blacklist:
        blacklist = (*blacklist, wallet)
    return config.model_copy(update={"blacklist": blacklist, "blacklist_enabled": True})


def estimate_setup_cost(config: AntiSnipeConfig) -> float:
    """Estimate the SOL cost of setting up a launch's protection."""
    cost = 0.0

    if config.launch_delay_minutes > 0:
        cost += BASE_TRANSACTION_FEE_SOL

    if config.whitelist_enabled and config.whitelist:
        cost += WHITELIST_ENTRY_FEE_SOL * len(config.whitelist)

    if config.honeypot_monitor_minutes:
        cost += HONEYPOT_MONITORING_FEE_SOL

    return cost


def describe_config(config: AntiSnipeConfig) -> str:
    """Summarise a config for display, e.g. "5 minute launch delay • 5% max wallet size"."""
    parts: list[str] = []

    if config.launch_delay_minutes > 0:
        parts.append(f"{config.launch_delay_minutes} minute launch delay")

    if config.max_wallet_percentage:
        parts.append(f"{config.max_wallet_percentage:g}% max wallet size")

    if config.whitelist_enabled:
        parts.append("Whitelist-only early access")

    if config.blacklist_enabled:
        parts.append("Bot blacklist protection")

    if config.honeypot_monitor_minutes:
        parts.append(f"{config.honeypot_monitor_minutes} min honeypot monitoring")

    return DESCRIPTION_SEPARATOR.join(parts) or NO_PROTECTION_DESCRIPTION


def calculate_wallet_limits(
    max_percentage: float,
    total_supply: float,
    cooldown_seconds: int = PURCHASE_COOLDOWN_SECONDS,
) -> WalletLimits:
    """Translate a max-wallet percentage into an absolute token cap.

    Args:
        max_percentage: Share of total supply one wallet may hold (0-100]
        total_supply: Total token supply
        cooldown_seconds: Minimum seconds between buys

    Raises:
        ValidationError: If the percentage or supply is out of range
    """
    if not 0 < max_percentage <= 100:
        raise ValidationError(f"max_percentage must be in (0, 100], got {max_percentage}")
    if total_supply < 0:
        raise ValidationError(f"total_supply must be non-negative, got {total_supply}")

    max_tokens = total_supply * max_percentage / 100
    logger.info(
        "wallet_limits_calculated",
        max_percentage=max_percentage,
        max_tokens=max_tokens,
    )
    return WalletLimits(
        max_percentage=max_percentage,
        max_tokens=max_tokens,
        cooldown_seconds=cooldown_seconds,
    )
