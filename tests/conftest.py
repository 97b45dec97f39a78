from datetime import date
from typing import Callable, Mapping, Sequence

import pytest

from facilitator_directory.domain.models import (
    AccessType,
    Address,
    Facilitator,
    FacilitatorMetadata,
    Network,
)


def _make_facilitator(
    facilitator_id: str = "acme",
    addresses: Mapping[Network, Sequence[Address]] | None = None,
    fee: float = 0,
    access_type: AccessType = AccessType.OPEN,
) -> Facilitator:
    if addresses is None:
        addresses = {Network.BASE: (Address(address="0xabc"),)}
    return Facilitator(
        id=facilitator_id,
        metadata=FacilitatorMetadata(
            name=facilitator_id.title(),
            image=f"https://example.com/{facilitator_id}.png",
            docs_url=f"https://docs.example.com/{facilitator_id}",
            color="#123456",
        ),
        facilitator_url=f"https://{facilitator_id}.example.com/facilitator",
        addresses=addresses,
        fee=fee,
        access_type=access_type,
    )


@pytest.fixture
def make_facilitator() -> Callable[..., Facilitator]:
    return _make_facilitator


@pytest.fixture
def make_addresses() -> Callable[..., tuple[Address, ...]]:
    def factory(*values: str, first_seen: date | None = None) -> tuple[Address, ...]:
        return tuple(Address(address=value, date_of_first_transaction=first_seen) for value in values)

    return factory
