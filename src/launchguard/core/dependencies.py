"""Wiring of the engine's components.

One BotDetector is shared by the scheduler and the purchase gate so that
validation sees every recorded transaction and every flagged bot.
"""

from dataclasses import dataclass

import structlog

from launchguard.config.settings import Settings, get_settings
from launchguard.core.interfaces import TokenDataSource
from launchguard.services.detection.bot_detector import BotDetector, Clock, system_clock
from launchguard.services.protection.launch_scheduler import LaunchScheduler
from launchguard.services.protection.purchase_gate import PurchaseGate
from launchguard.services.security.analyzer import SecurityAnalyzer
from launchguard.services.solana.rpc_client import SolanaRPCClient

log = structlog.get_logger(__name__)


@dataclass
class LaunchGuard:
    """Container for one engine instance and its shared state."""

    settings: Settings
    detector: BotDetector
    scheduler: LaunchScheduler
    gate: PurchaseGate
    analyzer: SecurityAnalyzer
    token_source: TokenDataSource

    async def close(self) -> None:
        """Release the token source's network resources, if it holds any."""
        if isinstance(self.token_source, SolanaRPCClient):
            await self.token_source.close()


def build_launch_guard(
    settings: Settings | None = None,
    clock: Clock = system_clock,
    token_source: TokenDataSource | None = None,
) -> LaunchGuard:
    """Build a LaunchGuard from settings.

    Args:
        settings: Settings to use (defaults to get_settings())
        clock: Millisecond clock shared by detector and scheduler
        token_source: Mint data source (defaults to a SolanaRPCClient)

    Returns:
        Fully wired LaunchGuard
    """
    settings = settings or get_settings()

    detector = BotDetector(
        known_bots=settings.known_bot_addresses,
        history_limit=settings.transaction_history_limit,
        clock=clock,
    )
    scheduler = LaunchScheduler(
        detector,
        clock=clock,
        cooldown_seconds=settings.purchase_cooldown_seconds,
        whitelist_early_access_minutes=settings.whitelist_early_access_minutes,
        max_purchase_amount=settings.max_purchase_amount_threshold,
    )
    source = token_source or SolanaRPCClient(settings)

    log.debug("launch_guard_built", known_bots=detector.known_bot_count)
    return LaunchGuard(
        settings=settings,
        detector=detector,
        scheduler=scheduler,
        gate=PurchaseGate(scheduler, detector),
        analyzer=SecurityAnalyzer(source),
        token_source=source,
    )
