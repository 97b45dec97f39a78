"""Command-line entrypoint for building the directory site."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from facilitator_directory.application.use_cases import BuildSiteContext, BuildSiteUseCase
from facilitator_directory.config import SETTINGS, Settings
from facilitator_directory.domain.errors import DirectoryError
from facilitator_directory.domain.services import CatalogValidator
from facilitator_directory.infrastructure.repositories.static_catalog import StaticFacilitatorRepository
from facilitator_directory.infrastructure.storage.site_repository import FileSystemSiteRepository
from facilitator_directory.infrastructure.storage.template_store import FileTemplateRepository


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the x402 facilitator directory website")
    parser.add_argument("--output-dir", type=Path, help="Override the output directory")
    parser.add_argument("--assets-dir", type=Path, help="Override the network icon directory")
    return parser.parse_args(argv)


def build_context(settings: Settings) -> BuildSiteContext:
    return BuildSiteContext(
        facilitator_repository=StaticFacilitatorRepository(),
        template_repository=FileTemplateRepository(settings.template_path),
        site_repository=FileSystemSiteRepository(settings.output_dir, settings.assets_dir),
        cname_path=settings.cname_path,
        index_filename=settings.index_filename,
        validator=CatalogValidator() if settings.validate_catalog else None,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = SETTINGS.with_overrides(output_dir=args.output_dir, assets_dir=args.assets_dir)

    print("Building x402 Facilitators website...")
    try:
        result = BuildSiteUseCase(build_context(settings)).execute()
    except DirectoryError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        return 1

    statistics = result.statistics
    print(f"Facilitators: {statistics.total_facilitators}")
    print(f"Networks: {statistics.total_networks}")
    print(f"Addresses: {statistics.total_addresses}")
    print(f"Output: {result.index_path.parent}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
