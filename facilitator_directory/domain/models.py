"""Domain models for the facilitator directory.

These dataclasses capture the static catalog schema: facilitators, the
networks they operate on and the on-chain addresses they settle from.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterator, Mapping, Sequence


class Network(str, Enum):
    """Blockchain networks a facilitator can hold addresses on."""

    BASE = "base"
    POLYGON = "polygon"
    SOLANA = "solana"


class AccessType(str, Enum):
    OPEN = "open"
    GATED = "gated"
    GATED_PAID = "gated_paid"


@dataclass(frozen=True)
class TokenRef:
    """Fungible token accepted on a given network."""

    address: str
    symbol: str
    decimals: int
    network: Network


@dataclass(frozen=True)
class Address:
    """On-chain address operated by a facilitator."""

    address: str
    tokens: Sequence[TokenRef] = field(default_factory=tuple)
    date_of_first_transaction: date | None = None


@dataclass(frozen=True)
class FacilitatorMetadata:
    name: str
    image: str
    docs_url: str
    color: str


@dataclass(frozen=True)
class Facilitator:
    """Static catalog entry for one facilitator service.

    ``addresses`` keeps insertion order; cards render networks in the order
    the entry declares them.
    """

    id: str
    metadata: FacilitatorMetadata
    facilitator_url: str
    addresses: Mapping[Network, Sequence[Address]]
    fee: float = 0
    access_type: AccessType = AccessType.OPEN

    def iter_addresses(self) -> Iterator[tuple[Network, Address]]:
        for network, addresses in self.addresses.items():
            for address in addresses:
                yield network, address
