"""Purchase gate in front of the TransactionSubmitter.

The gate is the only place a purchase reaches the submitter; denied
purchases never do. Every well-formed attempt lands in the wallet's
ledger: denied ones are recorded with `denied=True` and a
"Denied: <reason>" flag, so repeated attempts against a closed launch
feed the bot indicators without restarting the cooldown. A wallet whose
ledger already reads as a bot is added to the known-bot set before it
is turned away.
"""

import structlog

from launchguard.config.logging import short_address
from launchguard.constants.protection import SUSPECTED_BOT_REASON
from launchguard.core.exceptions import ValidationError
from launchguard.core.interfaces import TransactionSubmitter
from launchguard.models.protection import AntiSnipeConfig, PurchaseDecision, PurchaseOutcome
from launchguard.services.detection.bot_detector import BotDetector
from launchguard.services.protection.launch_scheduler import LaunchScheduler

logger = structlog.get_logger(__name__)

DENIED_FLAG_PREFIX = "Denied: "


class PurchaseGate:
    """Runs purchase attempts through the scheduler and the bot detector."""

    def __init__(self, scheduler: LaunchScheduler, detector: BotDetector) -> None:
        self.scheduler = scheduler
        self.detector = detector

    async def attempt_purchase(
        self,
        wallet: str,
        amount: float,
        token_mint: str,
        config: AntiSnipeConfig,
        submitter: TransactionSubmitter,
    ) -> PurchaseOutcome:
        """Validate a purchase and submit it if it passes.

        Args:
            wallet: Buyer wallet address
            amount: Token amount requested
            token_mint: Token mint address
            config: Protection config for the token
            submitter: Collaborator that builds and sends the transaction

        Returns:
            PurchaseOutcome; signature is set only when the purchase was submitted
        """
        decision = self.scheduler.validate_purchase(wallet, amount, token_mint, config)
        if not decision.allowed:
            self._record_denied(wallet, amount, decision)
            return PurchaseOutcome(decision=decision)

        detection = self.detector.detect_bot(wallet)
        if detection.is_bot:
            denial = PurchaseDecision.deny(SUSPECTED_BOT_REASON)
            self.detector.add_known_bot(wallet)
            self._record_denied(wallet, amount, denial, detection.indicators)
            logger.warning(
                "purchase_blocked_bot",
                wallet=short_address(wallet),
                token=short_address(token_mint),
                confidence=detection.confidence,
            )
            return PurchaseOutcome(decision=denial, bot_detection=detection)

        self.detector.record_transaction(wallet, amount, flags=detection.indicators)
        signature = await submitter.submit_purchase(wallet, amount, token_mint)

        logger.info(
            "purchase_submitted",
            wallet=short_address(wallet),
            token=short_address(token_mint),
            amount=amount,
        )
        return PurchaseOutcome(decision=decision, bot_detection=detection, signature=signature)

    def _record_denied(
        self,
        wallet: str,
        amount: float,
        decision: PurchaseDecision,
        indicators: list[str] | None = None,
    ) -> None:
        flags = [*(indicators or []), f"{DENIED_FLAG_PREFIX}{decision.reason}"]
        try:
            self.detector.record_transaction(wallet, amount, flags=flags, denied=True)
        except ValidationError:
            # Malformed requests (blank wallet, bad amount) have no ledger to go to
            logger.debug("denied_attempt_not_recorded", reason=decision.reason)
