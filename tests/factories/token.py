"""Factories for token configuration and on-chain token data."""

import factory
from faker import Faker

from launchguard.models.security import MintAuthority, TokenConfig, TokenData, TokenProtocol

fake = Faker()


def generate_valid_solana_address() -> str:
    """Generate a valid-looking Solana address (base58, 44 chars)."""
    alphabet = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    return "".join(fake.random_element(alphabet) for _ in range(44))


class TokenConfigFactory(factory.Factory):
    """Factory for TokenConfig model.

    Defaults describe a well-configured token: permanent supply, no
    freeze authority, full metadata and locked liquidity.

    Usage:
        # A clean token
        config = TokenConfigFactory()

        # A bare token with nothing but a mint authority
        config = TokenConfigFactory(bare=True)

        # A suspicious Token-2022 token
        config = TokenConfigFactory(protocol=TokenProtocol.TOKEN2022, transfer_fees=15)
    """

    class Meta:
        model = TokenConfig

    name = factory.LazyFunction(lambda: fake.word().capitalize() + " Token")
    symbol = factory.LazyFunction(
        lambda: fake.lexify(text="????", letters="ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    )
    decimals = 9
    supply = 1_000_000_000
    mint_authority = MintAuthority.PERMANENT
    freeze_authority = False
    update_authority = False
    description = factory.LazyFunction(
        lambda: "A community token for " + fake.sentence(nb_words=8)
    )
    website = factory.LazyFunction(lambda: fake.url())
    twitter = factory.LazyFunction(lambda: "https://x.com/" + fake.user_name())
    telegram = factory.LazyFunction(lambda: "https://t.me/" + fake.user_name())
    image = factory.LazyFunction(lambda: fake.image_url())
    protocol = TokenProtocol.SPL
    has_liquidity = True
    liquidity_locked = True

    class Params:
        bare = factory.Trait(
            name="",
            symbol="",
            supply=None,
            mint_authority=MintAuthority.REVOCABLE,
            description=None,
            website=None,
            twitter=None,
            telegram=None,
            image=None,
            protocol=None,
            has_liquidity=False,
            liquidity_locked=False,
        )


class TokenDataFactory(factory.Factory):
    """Factory for on-chain TokenData.

    Usage:
        data = TokenDataFactory()                        # both authorities active
        data = TokenDataFactory(freeze_authority=None)   # freeze revoked
    """

    class Meta:
        model = TokenData

    mint_address = factory.LazyFunction(generate_valid_solana_address)
    decimals = 6
    supply = 1_000_000_000.0
    mint_authority = factory.LazyFunction(generate_valid_solana_address)
    freeze_authority = factory.LazyFunction(generate_valid_solana_address)
