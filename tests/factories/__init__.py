"""Test data factories using factory_boy.

These factories generate realistic test data for LaunchGuard models.
"""

from tests.factories.token import (
    TokenConfigFactory,
    TokenDataFactory,
    generate_valid_solana_address,
)

__all__ = [
    "TokenConfigFactory",
    "TokenDataFactory",
    "generate_valid_solana_address",
]
