"""Bot detection constants.

Indicator weights add up to a confidence score; the thresholds below
turn that score into the is_bot / should_block decisions.
"""

from typing import Final

# Ledger size per wallet (oldest entries evicted first)
TRANSACTION_HISTORY_LIMIT: Final[int] = 100

# =============================================================================
# Decision Thresholds
# =============================================================================

BOT_CONFIDENCE_THRESHOLD: Final[int] = 60
BLOCK_CONFIDENCE_THRESHOLD: Final[int] = 70
MAX_CONFIDENCE: Final[int] = 100

# =============================================================================
# Indicator Weights
# =============================================================================

KNOWN_BOT_WEIGHT: Final[int] = 50
RAPID_TRANSACTIONS_WEIGHT: Final[int] = 30
ROUND_AMOUNT_WEIGHT: Final[int] = 10
CONSISTENT_INTERVALS_WEIGHT: Final[int] = 20
LARGE_FIRST_TRANSACTION_WEIGHT: Final[int] = 15

# =============================================================================
# Indicator Parameters
# =============================================================================

RAPID_WINDOW_SIZE: Final[int] = 3
RAPID_AVERAGE_GAP_MS: Final[int] = 5_000
ROUND_AMOUNT_UNIT: Final[int] = 1_000_000
CONSISTENT_INTERVALS_MIN_HISTORY: Final[int] = 5
LARGE_FIRST_TRANSACTION_AMOUNT: Final[float] = 100_000

# =============================================================================
# Indicator Descriptions
# =============================================================================

KNOWN_BOT_INDICATOR: Final[str] = "Known bot address"
RAPID_TRANSACTIONS_INDICATOR: Final[str] = "Rapid successive transactions (< 5s apart)"
ROUND_AMOUNT_INDICATOR: Final[str] = "Suspiciously round purchase amounts"
CONSISTENT_INTERVALS_INDICATOR: Final[str] = "Consistent transaction intervals (bot-like pattern)"
LARGE_FIRST_TRANSACTION_INDICATOR: Final[str] = "New wallet with large first transaction"
