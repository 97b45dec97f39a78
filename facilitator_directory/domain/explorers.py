"""Block explorer links and icons per network."""
from __future__ import annotations

from dataclasses import dataclass

from .errors import UnknownNetworkError
from .models import Network


@dataclass(frozen=True)
class Explorer:
    name: str
    base_url: str
    icon: str

    def address_url(self, address: str) -> str:
        return f"{self.base_url}/address/{address}"


EXPLORERS: dict[Network, Explorer] = {
    Network.BASE: Explorer(name="BaseScan", base_url="https://basescan.org", icon="base.svg"),
    Network.POLYGON: Explorer(name="PolygonScan", base_url="https://polygonscan.com", icon="polygon.svg"),
    Network.SOLANA: Explorer(name="Solana Explorer", base_url="https://explorer.solana.com", icon="solana.svg"),
}


def explorer_for(network: Network) -> Explorer:
    try:
        return EXPLORERS[network]
    except KeyError:
        raise UnknownNetworkError(network) from None


def explorer_url(address: str, network: Network) -> str:
    return explorer_for(network).address_url(address)


def network_icon(network: Network) -> str:
    return explorer_for(network).icon


def explorer_name(network: Network) -> str:
    return explorer_for(network).name


def required_icons() -> tuple[str, ...]:
    """Icon filenames the site needs, in table order."""
    return tuple(explorer.icon for explorer in EXPLORERS.values())
