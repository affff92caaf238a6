"""Bot behaviour detection over per-wallet transaction ledgers.

Indicators (independent, weights add up):
- Known bot address: +50
- Last 3 transactions average < 5s apart: +30
- Any amount that is a multiple of 1,000,000: +10
- 5+ transactions at identical (to the second) intervals: +20
- Single transaction larger than 100,000: +15

Confidence is clamped to 100. is_bot at >= 60, should_block at >= 70.
"""

from __future__ import annotations

import math
import threading
import time
from collections import deque
from collections.abc import Callable, Iterable, Sequence

import structlog

from launchguard.config.logging import short_address
from launchguard.constants.detection import (
    BLOCK_CONFIDENCE_THRESHOLD,
    BOT_CONFIDENCE_THRESHOLD,
    CONSISTENT_INTERVALS_INDICATOR,
    CONSISTENT_INTERVALS_MIN_HISTORY,
    CONSISTENT_INTERVALS_WEIGHT,
    KNOWN_BOT_INDICATOR,
    KNOWN_BOT_WEIGHT,
    LARGE_FIRST_TRANSACTION_AMOUNT,
    LARGE_FIRST_TRANSACTION_INDICATOR,
    LARGE_FIRST_TRANSACTION_WEIGHT,
    MAX_CONFIDENCE,
    RAPID_AVERAGE_GAP_MS,
    RAPID_TRANSACTIONS_INDICATOR,
    RAPID_TRANSACTIONS_WEIGHT,
    RAPID_WINDOW_SIZE,
    ROUND_AMOUNT_INDICATOR,
    ROUND_AMOUNT_UNIT,
    ROUND_AMOUNT_WEIGHT,
    TRANSACTION_HISTORY_LIMIT,
)
from launchguard.constants.protection import MS_PER_SECOND
from launchguard.core.exceptions import ValidationError
from launchguard.models.detection import BotDetectionResult, TransactionAnalysis

logger = structlog.get_logger(__name__)

Clock = Callable[[], int]


def system_clock() -> int:
    """Current time in milliseconds since epoch."""
    return time.time_ns() // 1_000_000


class BotDetector:
    """Owns the per-wallet transaction ledgers and the known-bot set.

    Each wallet keeps its newest `history_limit` transactions; older ones
    are evicted first. Both maps are guarded by one lock so purchase
    validation and recording can interleave safely.
    """

    def __init__(
        self,
        known_bots: Iterable[str] = (),
        history_limit: int = TRANSACTION_HISTORY_LIMIT,
        clock: Clock = system_clock,
    ) -> None:
        """Initialize bot detector.

        Args:
            known_bots: Wallets flagged as bots up front
            history_limit: Transactions kept per wallet
            clock: Millisecond clock (injectable for tests)
        """
        if history_limit < 1:
            raise ValidationError("history_limit must be at least 1")

        self.history_limit = history_limit
        self._clock = clock
        self._history: dict[str, deque[TransactionAnalysis]] = {}
        self._known_bots: set[str] = set(known_bots)
        self._lock = threading.Lock()

        logger.info("known_bots_loaded", count=len(self._known_bots))

    # ------------------------------------------------------------------
    # Known bots
    # ------------------------------------------------------------------

    def is_known_bot(self, wallet: str) -> bool:
        with self._lock:
            return wallet in self._known_bots

    def add_known_bot(self, wallet: str) -> None:
        """Flag a wallet as a bot."""
        with self._lock:
            self._known_bots.add(wallet)
        logger.info("known_bot_added", wallet=short_address(wallet))

    def remove_known_bot(self, wallet: str) -> None:
        """Clear a wallet's bot flag. Unknown wallets are ignored."""
        with self._lock:
            self._known_bots.discard(wallet)

    @property
    def known_bot_count(self) -> int:
        with self._lock:
            return len(self._known_bots)

    # ------------------------------------------------------------------
    # Ledger
    # ------------------------------------------------------------------

    def record_transaction(
        self,
        wallet: str,
        amount: float,
        flags: Sequence[str] = (),
        denied: bool = False,
    ) -> TransactionAnalysis:
        """Append a purchase attempt to the wallet's ledger.

        Args:
            wallet: Buyer wallet address
            amount: Token amount
            flags: Free-text suspicion flags (any flag marks it suspicious)
            denied: Whether the attempt was turned away

        Returns:
            The recorded TransactionAnalysis

        Raises:
            ValidationError: If wallet is blank or amount is negative/non-finite
        """
        if not wallet or not wallet.strip():
            raise ValidationError("Wallet address is required")
        if not math.isfinite(amount) or amount < 0:
            raise ValidationError("Transaction amount must be a non-negative number")

        entry = TransactionAnalysis(
            wallet=wallet,
            timestamp=self._clock(),
            amount=amount,
            flags=tuple(flags),
            denied=denied,
        )

        with self._lock:
            ledger = self._history.get(wallet)
            if ledger is None:
                ledger = deque(maxlen=self.history_limit)
                self._history[wallet] = ledger
            ledger.append(entry)

        if entry.is_suspicious:
            logger.info(
                "suspicious_transaction_recorded",
                wallet=short_address(wallet),
                amount=amount,
                flags=list(entry.flags),
            )
        return entry

    def get_history(self, wallet: str) -> list[TransactionAnalysis]:
        """Wallet's recorded transactions, oldest first (a copy)."""
        with self._lock:
            return list(self._history.get(wallet, ()))

    def last_transaction(self, wallet: str) -> TransactionAnalysis | None:
        """Most recent attempt that was not denied."""
        with self._lock:
            ledger = self._history.get(wallet, ())
            return next((tx for tx in reversed(ledger) if not tx.denied), None)

    # ------------------------------------------------------------------
    # Detection
    # ------------------------------------------------------------------

    def detect_bot(
        self,
        wallet: str,
        history: Sequence[TransactionAnalysis] | None = None,
    ) -> BotDetectionResult:
        """Score a wallet for bot-like behaviour.

        Args:
            wallet: Wallet address
            history: Transactions to analyze instead of the recorded ledger

        Returns:
            BotDetectionResult with matched indicators in evaluation order
        """
        indicators: list[str] = []
        confidence = 0

        if self.is_known_bot(wallet):
            indicators.append(KNOWN_BOT_INDICATOR)
            confidence += KNOWN_BOT_WEIGHT

        if history is None:
            history = self.get_history(wallet)

        if _has_rapid_transactions(history):
            indicators.append(RAPID_TRANSACTIONS_INDICATOR)
            confidence += RAPID_TRANSACTIONS_WEIGHT

        if any(tx.amount % ROUND_AMOUNT_UNIT == 0 for tx in history):
            indicators.append(ROUND_AMOUNT_INDICATOR)
            confidence += ROUND_AMOUNT_WEIGHT

        if _has_consistent_intervals(history):
            indicators.append(CONSISTENT_INTERVALS_INDICATOR)
            confidence += CONSISTENT_INTERVALS_WEIGHT

        if len(history) == 1 and history[0].amount > LARGE_FIRST_TRANSACTION_AMOUNT:
            indicators.append(LARGE_FIRST_TRANSACTION_INDICATOR)
            confidence += LARGE_FIRST_TRANSACTION_WEIGHT

        confidence = min(confidence, MAX_CONFIDENCE)
        is_bot = confidence >= BOT_CONFIDENCE_THRESHOLD

        logger.info(
            "bot_detection_completed",
            wallet=short_address(wallet),
            verdict="bot" if is_bot else "human",
            confidence=confidence,
            history_size=len(history),
        )

        return BotDetectionResult(
            wallet=wallet,
            is_bot=is_bot,
            confidence=confidence,
            indicators=indicators,
            should_block=confidence >= BLOCK_CONFIDENCE_THRESHOLD,
        )


def _has_rapid_transactions(history: Sequence[TransactionAnalysis]) -> bool:
    """Average gap across the last three transactions is under 5 seconds."""
    if len(history) < RAPID_WINDOW_SIZE:
        return False

    window = history[-RAPID_WINDOW_SIZE:]
    gaps = [later.timestamp - earlier.timestamp for earlier, later in zip(window, window[1:])]
    return sum(gaps) / len(gaps) < RAPID_AVERAGE_GAP_MS


def _has_consistent_intervals(history: Sequence[TransactionAnalysis]) -> bool:
    """Every gap in the history rounds to the same whole second."""
    if len(history) < CONSISTENT_INTERVALS_MIN_HISTORY:
        return False

    rounded = {
        _round_half_up((later.timestamp - earlier.timestamp) / MS_PER_SECOND)
        for earlier, later in zip(history, history[1:])
    }
    return len(rounded) == 1


def _round_half_up(value: float) -> int:
    # round() uses banker's rounding; halves go up here
    return math.floor(value + 0.5)
