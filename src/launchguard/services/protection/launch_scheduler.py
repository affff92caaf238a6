"""Launch schedules and purchase gating.

A schedule holds a token back until its public start; whitelisted
wallets get an early-access window before that. validate_purchase runs
its checks in a fixed order and stops at the first denial:

1. whitelist-only phase
2. before public launch
3. blacklist
4. known bot
5. per-transaction buy limit
6. wallet cap (fixed single-purchase ceiling)
7. per-wallet cooldown
"""

from __future__ import annotations

import math
import threading
from datetime import UTC, datetime

import structlog

from launchguard.config.logging import short_address
from launchguard.constants.protection import (
    MAX_PURCHASE_AMOUNT_THRESHOLD,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    PURCHASE_COOLDOWN_SECONDS,
    SUSPECTED_BOT_REASON,
    WHITELIST_EARLY_ACCESS_MINUTES,
)
from launchguard.core.exceptions import ValidationError
from launchguard.models.protection import (
    AntiSnipeConfig,
    LaunchSchedule,
    LaunchStatus,
    PurchaseDecision,
)
from launchguard.services.detection.bot_detector import BotDetector, Clock, system_clock

logger = structlog.get_logger(__name__)

# Allowed manual transitions; anything else is ignored
_TRANSITIONS: dict[LaunchStatus, set[LaunchStatus]] = {
    LaunchStatus.SCHEDULED: {LaunchStatus.ACTIVE, LaunchStatus.CANCELLED},
    LaunchStatus.ACTIVE: {LaunchStatus.COMPLETED, LaunchStatus.CANCELLED},
    LaunchStatus.COMPLETED: set(),
    LaunchStatus.CANCELLED: set(),
}


def _iso(timestamp_ms: int) -> str:
    """Format a millisecond timestamp like JavaScript's toISOString()."""
    moment = datetime.fromtimestamp(timestamp_ms / MS_PER_SECOND, tz=UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class LaunchScheduler:
    """Tracks launch schedules per token mint and validates purchases.

    Bot flags and purchase history come from the shared BotDetector so
    that validation sees every recorded transaction.
    """

    def __init__(
        self,
        detector: BotDetector,
        clock: Clock = system_clock,
        cooldown_seconds: int = PURCHASE_COOLDOWN_SECONDS,
        whitelist_early_access_minutes: int = WHITELIST_EARLY_ACCESS_MINUTES,
        max_purchase_amount: float = MAX_PURCHASE_AMOUNT_THRESHOLD,
    ) -> None:
        """Initialize launch scheduler.

        Args:
            detector: Bot detector owning ledgers and known bots
            clock: Millisecond clock (injectable for tests)
            cooldown_seconds: Minimum gap between purchases by one wallet
            whitelist_early_access_minutes: Whitelist window before public start (0 disables it)
            max_purchase_amount: Single-purchase ceiling applied when a wallet cap is set
        """
        self.detector = detector
        self.cooldown_seconds = cooldown_seconds
        self.whitelist_early_access_minutes = whitelist_early_access_minutes
        self.max_purchase_amount = max_purchase_amount
        self._clock = clock
        self._schedules: dict[str, LaunchSchedule] = {}
        self._lock = threading.Lock()

    def schedule_token_launch(self, token_mint: str, config: AntiSnipeConfig) -> LaunchSchedule:
        """Schedule a delayed launch, replacing any previous schedule for the mint.

        Args:
            token_mint: Token mint address
            config: Protection config (delay and whitelist setting)

        Returns:
            The new schedule

        Raises:
            ValidationError: If token_mint is blank
        """
        if not token_mint or not token_mint.strip():
            raise ValidationError("Token mint is required")

        scheduled_time = self._clock() + config.launch_delay_minutes * MS_PER_MINUTE
        whitelist_phase_end = None
        # No early-access window means no whitelist phase
        if config.whitelist_enabled and self.whitelist_early_access_minutes > 0:
            whitelist_phase_end = (
                scheduled_time - self.whitelist_early_access_minutes * MS_PER_MINUTE
            )

        schedule = LaunchSchedule(
            token_mint=token_mint,
            scheduled_time=scheduled_time,
            status=LaunchStatus.SCHEDULED,
            whitelist_phase_end=whitelist_phase_end,
            public_phase_start=scheduled_time,
        )

        with self._lock:
            replaced = token_mint in self._schedules
            self._schedules[token_mint] = schedule

        logger.info(
            "launch_scheduled",
            token=short_address(token_mint),
            scheduled_for=_iso(scheduled_time),
            whitelist_phase=config.whitelist_enabled,
            replaced=replaced,
        )
        return schedule.model_copy()

    def get_launch_status(self, token_mint: str) -> LaunchSchedule | None:
        """Current schedule for a mint, or None if never scheduled."""
        with self._lock:
            schedule = self._schedules.get(token_mint)
            return schedule.model_copy() if schedule else None

    def activate_launch(self, token_mint: str) -> None:
        """Open a scheduled launch to the public. Unknown mints are ignored."""
        self._transition(token_mint, LaunchStatus.ACTIVE)

    def complete_launch(self, token_mint: str) -> None:
        """Mark an active launch as completed."""
        self._transition(token_mint, LaunchStatus.COMPLETED)

    def cancel_launch(self, token_mint: str) -> None:
        """Cancel a scheduled or active launch."""
        self._transition(token_mint, LaunchStatus.CANCELLED)

    def _transition(self, token_mint: str, target: LaunchStatus) -> None:
        with self._lock:
            schedule = self._schedules.get(token_mint)
            if schedule is None:
                return
            current = schedule.status
            if target not in _TRANSITIONS[current]:
                allowed = False
            else:
                schedule.status = target
                allowed = True

        if allowed:
            logger.info("launch_status_changed", token=short_address(token_mint), status=target.value)
        else:
            logger.warning(
                "launch_transition_ignored",
                token=short_address(token_mint),
                current=current.value,
                requested=target.value,
            )

    def validate_purchase(
        self,
        wallet: str,
        amount: float,
        token_mint: str,
        config: AntiSnipeConfig,
    ) -> PurchaseDecision:
        """Decide whether a wallet may buy right now.

        Malformed requests are denied rather than passed through.

        Args:
            wallet: Buyer wallet address
            amount: Token amount requested
            token_mint: Token mint address
            config: Protection config for the token

        Returns:
            PurchaseDecision with the first failing check's reason
        """
        decision = self._check_purchase(wallet, amount, token_mint, config)
        if not decision.allowed:
            logger.info(
                "purchase_denied",
                wallet=short_address(wallet or ""),
                token=short_address(token_mint or ""),
                reason=decision.reason,
            )
        return decision

    def _check_purchase(
        self,
        wallet: str,
        amount: float,
        token_mint: str,
        config: AntiSnipeConfig,
    ) -> PurchaseDecision:
        if not wallet or not wallet.strip():
            return PurchaseDecision.deny("Invalid purchase request: wallet address is required")
        if not isinstance(amount, int | float) or not math.isfinite(amount) or amount < 0:
            return PurchaseDecision.deny(
                "Invalid purchase request: amount must be a non-negative number"
            )

        now = self._clock()

        schedule = self.get_launch_status(token_mint)
        if (
            schedule is not None
            and schedule.status == LaunchStatus.SCHEDULED
            and now < schedule.public_phase_start
        ):
            decision = self._check_launch_phase(wallet, now, schedule, config)
            if decision is not None:
                return decision

        if config.blacklist_enabled and wallet in config.blacklist:
            return PurchaseDecision.deny("Wallet is blacklisted")

        if self.detector.is_known_bot(wallet):
            return PurchaseDecision.deny(SUSPECTED_BOT_REASON)

        if config.has_buy_limit and amount > config.buy_limit_per_tx:
            return PurchaseDecision.deny(
                f"Exceeds maximum purchase of {config.buy_limit_per_tx} tokens"
            )

        if config.max_wallet_percentage and amount > self.max_purchase_amount:
            return PurchaseDecision.deny("Purchase amount exceeds maximum wallet limit")

        last_tx = self.detector.last_transaction(wallet)
        if last_tx is not None:
            elapsed_seconds = (now - last_tx.timestamp) / MS_PER_SECOND
            if elapsed_seconds < self.cooldown_seconds:
                wait = math.ceil(self.cooldown_seconds - elapsed_seconds)
                return PurchaseDecision.deny(f"Cooldown period active. Wait {wait}s")

        return PurchaseDecision.allow()

    @staticmethod
    def _check_launch_phase(
        wallet: str,
        now: int,
        schedule: LaunchSchedule,
        config: AntiSnipeConfig,
    ) -> PurchaseDecision | None:
        """Pre-launch gate; returns None when the wallet may proceed.

        With a whitelist phase, non-whitelisted wallets are held until the
        public start and whitelisted wallets may buy from whitelist_phase_end on.
        """
        if schedule.whitelist_phase_end is None:
            return PurchaseDecision.deny(f"Token launches at {_iso(schedule.public_phase_start)}")

        if wallet not in config.whitelist:
            return PurchaseDecision.deny("Token launch is in whitelist-only phase")

        if now < schedule.whitelist_phase_end:
            return PurchaseDecision.deny(
                f"Whitelist early access opens at {_iso(schedule.whitelist_phase_end)}"
            )
        return None
