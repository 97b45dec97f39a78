"""Static site generator for the x402 facilitator directory."""
from facilitator_directory.application.use_cases import BuildSiteContext, BuildSiteUseCase
from facilitator_directory.domain.services import CatalogAggregator, CatalogValidator
from facilitator_directory.infrastructure.repositories.static_catalog import StaticFacilitatorRepository
from facilitator_directory.presentation.page import render_directory

__all__ = [
    "BuildSiteUseCase",
    "BuildSiteContext",
    "CatalogAggregator",
    "CatalogValidator",
    "StaticFacilitatorRepository",
    "render_directory",
]
