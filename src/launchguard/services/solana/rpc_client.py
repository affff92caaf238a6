"""Solana RPC client for mint account reads.

Extends BaseRPCClient to inherit:
- Automatic retry with exponential backoff
- Circuit breaker pattern for failure protection
- Proper resource cleanup
"""

from typing import Any

import httpx
import structlog

from launchguard.config.logging import short_address
from launchguard.config.settings import Settings, get_settings
from launchguard.core.exceptions import ExternalServiceError
from launchguard.models.security import TokenData
from launchguard.services.base import BaseRPCClient

log = structlog.get_logger(__name__)


class SolanaRPCClient(BaseRPCClient):
    """Reads SPL / Token-2022 mint accounts over JSON-RPC.

    Example:
        client = SolanaRPCClient()
        data = await client.get_token_data("mint_address")
        await client.close()
    """

    service_name = "Solana RPC"

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Solana RPC client from settings."""
        settings = settings or get_settings()
        super().__init__(
            base_url=settings.solana_rpc_url,
            timeout=settings.rpc_timeout_seconds,
            max_retries=settings.rpc_max_retries,
            circuit_breaker_threshold=settings.circuit_breaker_threshold,
            circuit_breaker_cooldown=settings.circuit_breaker_cooldown,
            transport=transport,
        )
        log.debug("solana_rpc_client_initialized", base_url=settings.solana_rpc_url)

    async def get_token_data(self, token_mint: str) -> TokenData:
        """Fetch decimals, supply and authorities of a mint.

        Args:
            token_mint: Mint address (base58).

        Returns:
            TokenData with supply in UI units.

        Raises:
            ExternalServiceError: If the RPC call fails or the account is not a mint.
        """
        log.debug("solana_get_token_data", token=short_address(token_mint))

        result = await self.call("getAccountInfo", [token_mint, {"encoding": "jsonParsed"}])
        value = (result or {}).get("value")
        if value is None:
            raise ExternalServiceError(
                service=self.service_name,
                message=f"Mint account not found: {token_mint}",
            )

        return _parse_mint_account(token_mint, value)


def _parse_mint_account(token_mint: str, value: dict[str, Any]) -> TokenData:
    data = value.get("data")
    parsed = data.get("parsed") if isinstance(data, dict) else None
    if not parsed or parsed.get("type") != "mint":
        raise ExternalServiceError(
            service=SolanaRPCClient.service_name,
            message=f"Account is not a token mint: {token_mint}",
        )

    info = parsed.get("info", {})
    try:
        decimals = int(info["decimals"])
        raw_supply = int(info["supply"])
    except (KeyError, TypeError, ValueError) as e:
        raise ExternalServiceError(
            service=SolanaRPCClient.service_name,
            message=f"Malformed mint account: {token_mint}",
        ) from e

    return TokenData(
        mint_address=token_mint,
        decimals=decimals,
        supply=raw_supply / 10**decimals,
        mint_authority=info.get("mintAuthority"),
        freeze_authority=info.get("freezeAuthority"),
    )
