"""Tokens accepted by facilitators in the catalog."""
from __future__ import annotations

from facilitator_directory.domain.models import Network, TokenRef

USDC_BASE_TOKEN = TokenRef(
    address="0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
    symbol="USDC",
    decimals=6,
    network=Network.BASE,
)

USDC_POLYGON_TOKEN = TokenRef(
    address="0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359",
    symbol="USDC",
    decimals=6,
    network=Network.POLYGON,
)

USDC_SOLANA_TOKEN = TokenRef(
    address="EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
    symbol="USDC",
    decimals=6,
    network=Network.SOLANA,
)
