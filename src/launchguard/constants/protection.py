"""Launch protection constants.

Defaults for launch scheduling, purchase validation and setup cost
estimation. Runtime values that operators tune live in Settings; these
are the fallbacks used when a component is built without settings.
"""

from typing import Final

# =============================================================================
# Launch Scheduling
# =============================================================================

MS_PER_SECOND: Final[int] = 1_000
MS_PER_MINUTE: Final[int] = 60 * MS_PER_SECOND

# Whitelisted wallets may buy this many minutes before the public launch
WHITELIST_EARLY_ACCESS_MINUTES: Final[int] = 5

# =============================================================================
# Purchase Validation
# =============================================================================

# Minimum gap between two purchases by the same wallet
PURCHASE_COOLDOWN_SECONDS: Final[int] = 60

# Holdings are not tracked, so the wallet cap is enforced as a fixed
# single-purchase ceiling
MAX_PURCHASE_AMOUNT_THRESHOLD: Final[float] = 1_000_000_000

# =============================================================================
# Setup Cost Estimation (SOL)
# =============================================================================

BASE_TRANSACTION_FEE_SOL: Final[float] = 0.000005
WHITELIST_ENTRY_FEE_SOL: Final[float] = 0.000005
HONEYPOT_MONITORING_FEE_SOL: Final[float] = 0.00001

# =============================================================================
# Descriptions
# =============================================================================

DESCRIPTION_SEPARATOR: Final[str] = " • "
NO_PROTECTION_DESCRIPTION: Final[str] = "No protection"

# Denial reason shared by purchase validation and the purchase gate
SUSPECTED_BOT_REASON: Final[str] = "Suspected bot activity"
