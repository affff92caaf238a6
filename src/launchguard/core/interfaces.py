"""Narrow interfaces to the collaborators the engine does not implement.

Transaction construction, signing and chain reads live outside the
engine; it only depends on these protocols.
"""

from typing import Protocol, runtime_checkable

from launchguard.models.security import TokenData


@runtime_checkable
class TokenDataSource(Protocol):
    """Reads mint account data for an existing token."""

    async def get_token_data(self, token_mint: str) -> TokenData:
        """Fetch decimals, supply and authorities for a mint."""
        ...


@runtime_checkable
class TransactionSubmitter(Protocol):
    """Builds, signs and sends an approved purchase."""

    async def submit_purchase(self, wallet: str, amount: float, token_mint: str) -> str:
        """Submit the purchase and return its transaction signature."""
        ...
