"""Directory page composition."""
from __future__ import annotations

from typing import Sequence

from facilitator_directory.domain.models import Facilitator
from facilitator_directory.domain.results import CatalogStatistics
from facilitator_directory.domain.services import CatalogAggregator
from facilitator_directory.presentation.cards import render_card

TOTAL_FACILITATORS = "{{TOTAL_FACILITATORS}}"
TOTAL_NETWORKS = "{{TOTAL_NETWORKS}}"
TOTAL_ADDRESSES = "{{TOTAL_ADDRESSES}}"
FACILITATOR_CARDS = "{{FACILITATOR_CARDS}}"

PLACEHOLDERS = (TOTAL_FACILITATORS, TOTAL_NETWORKS, TOTAL_ADDRESSES, FACILITATOR_CARDS)


def missing_placeholders(template: str) -> list[str]:
    return [token for token in PLACEHOLDERS if token not in template]


def compose_page(template: str, statistics: CatalogStatistics, cards: Sequence[str]) -> str:
    """Substitute statistics and cards into ``template``.

    Only the first occurrence of each placeholder is replaced. A placeholder
    missing from the template is left alone rather than reported.
    """
    return (
        template.replace(TOTAL_FACILITATORS, str(statistics.total_facilitators), 1)
        .replace(TOTAL_NETWORKS, str(statistics.total_networks), 1)
        .replace(TOTAL_ADDRESSES, str(statistics.total_addresses), 1)
        .replace(FACILITATOR_CARDS, "\n".join(cards), 1)
    )


def render_directory(
    facilitators: Sequence[Facilitator],
    template: str,
    aggregator: CatalogAggregator | None = None,
) -> str:
    aggregator = aggregator or CatalogAggregator()
    statistics = aggregator.summarize(facilitators)
    cards = [render_card(facilitator) for facilitator in aggregator.sort_by_address_count(facilitators)]
    return compose_page(template, statistics, cards)
