"""Bot detection domain models."""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class TransactionAnalysis(BaseModel):
    """One recorded purchase attempt in a wallet's ledger."""

    model_config = ConfigDict(frozen=True)

    wallet: str
    timestamp: int  # ms since epoch
    amount: float = Field(..., ge=0)
    flags: tuple[str, ...] = ()
    denied: bool = False  # attempt was turned away before submission

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_suspicious(self) -> bool:
        """A transaction is suspicious when any flag is attached."""
        return len(self.flags) > 0


class BotDetectionResult(BaseModel):
    """Outcome of bot-behaviour analysis for a wallet."""

    wallet: str
    is_bot: bool = False
    confidence: int = Field(default=0, ge=0, le=100)
    indicators: list[str] = Field(default_factory=list)
    should_block: bool = False
