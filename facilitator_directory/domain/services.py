"""Domain services for aggregating and checking the facilitator catalog."""
from __future__ import annotations

from collections import defaultdict
from typing import Mapping, Sequence

from .errors import CatalogValidationError
from .models import AccessType, Facilitator, Network
from .results import CatalogStatistics


class CatalogAggregator:
    """Computes catalog-wide statistics and the directory ordering."""

    @staticmethod
    def address_count_of(facilitator: Facilitator) -> int:
        return sum(len(addresses) for addresses in facilitator.addresses.values())

    def summarize(self, facilitators: Sequence[Facilitator]) -> CatalogStatistics:
        networks: set[Network] = set()
        total_addresses = 0
        for facilitator in facilitators:
            networks.update(facilitator.addresses.keys())
            total_addresses += self.address_count_of(facilitator)

        return CatalogStatistics(
            total_facilitators=len(facilitators),
            total_networks=len(networks),
            total_addresses=total_addresses,
        )

    def sort_by_address_count(self, facilitators: Sequence[Facilitator]) -> list[Facilitator]:
        """Most addresses first; ties keep catalog order."""
        return sorted(facilitators, key=self.address_count_of, reverse=True)


class CatalogValidator:
    """Checks the invariants the renderer relies on but does not enforce."""

    def validate(self, facilitators: Sequence[Facilitator]) -> None:
        problems: list[str] = []

        for facilitator_id, count in self._detect_duplicates(facilitators).items():
            problems.append(f"{count} facilitators share the id {facilitator_id!r}")

        for facilitator in facilitators:
            if facilitator.access_type is not None:
                try:
                    AccessType(facilitator.access_type)
                except ValueError:
                    problems.append(f"{facilitator.id}: unknown access type {facilitator.access_type!r}")
            for network, addresses in facilitator.addresses.items():
                if not isinstance(network, Network):
                    problems.append(f"{facilitator.id}: unknown network {network!r}")
                    continue
                if not addresses:
                    problems.append(f"{facilitator.id}: no addresses listed for {network.value}")

        if problems:
            raise CatalogValidationError(problems)

    @staticmethod
    def _detect_duplicates(facilitators: Sequence[Facilitator]) -> Mapping[str, int]:
        counts: dict[str, int] = defaultdict(int)
        for facilitator in facilitators:
            counts[facilitator.id] += 1
        return {facilitator_id: count for facilitator_id, count in counts.items() if count > 1}
