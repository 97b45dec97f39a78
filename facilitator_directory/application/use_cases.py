"""Application services orchestrating the site build."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from facilitator_directory.application.dto import BuildResult
from facilitator_directory.domain.explorers import required_icons
from facilitator_directory.domain.repositories import (
    FacilitatorRepository,
    SiteRepository,
    TemplateRepository,
)
from facilitator_directory.domain.services import CatalogAggregator, CatalogValidator
from facilitator_directory.presentation.cards import render_card
from facilitator_directory.presentation.page import compose_page

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildSiteContext:
    facilitator_repository: FacilitatorRepository
    template_repository: TemplateRepository
    site_repository: SiteRepository
    cname_path: Path | None = None
    index_filename: str = "index.html"
    aggregator: CatalogAggregator = field(default_factory=CatalogAggregator)
    validator: CatalogValidator | None = field(default_factory=CatalogValidator)


class BuildSiteUseCase:
    def __init__(self, context: BuildSiteContext) -> None:
        self._context = context

    def execute(self) -> BuildResult:
        context = self._context
        site = context.site_repository
        aggregator = context.aggregator

        # Everything that can fail runs before the output directory is touched.
        facilitators = context.facilitator_repository.list_facilitators()
        if context.validator is not None:
            context.validator.validate(facilitators)
        template = context.template_repository.read_template()
        site.check_assets(required_icons())

        statistics = aggregator.summarize(facilitators)
        cards = [render_card(facilitator) for facilitator in aggregator.sort_by_address_count(facilitators)]
        html = compose_page(template, statistics, cards)

        output_dir = site.prepare()
        assets = [site.copy_asset(icon) for icon in required_icons()]
        cname = site.copy_optional(context.cname_path) if context.cname_path else None
        index_path = site.write_text(context.index_filename, html)

        logger.info(
            "Built %s with %d facilitators into %s",
            context.index_filename,
            statistics.total_facilitators,
            output_dir,
        )
        return BuildResult(statistics=statistics, index_path=index_path, assets=tuple(assets), cname=cname)
