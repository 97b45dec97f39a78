from __future__ import annotations

from datetime import date

from facilitator_directory.catalog.tokens import USDC_BASE_TOKEN
from facilitator_directory.domain.models import Address, Facilitator, FacilitatorMetadata, Network

TREASURE = Facilitator(
    id="treasure",
    metadata=FacilitatorMetadata(
        name="Treasure",
        image="https://images.treasure.lol/treasure.png",
        docs_url="https://x402.treasure.lol/facilitator",
        color="#DC2626",
    ),
    facilitator_url="https://x402.treasure.lol/facilitator",
    addresses={
        Network.BASE: (
            Address(
                address="0xe07e9cbf9a55d02e3ac356ed4706353d98c5a618",
                tokens=(USDC_BASE_TOKEN,),
                date_of_first_transaction=date(2025, 11, 6),
            ),
        ),
    },
)
