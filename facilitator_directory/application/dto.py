"""Application-level DTOs for the site build."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from facilitator_directory.domain.results import CatalogStatistics


@dataclass(slots=True, frozen=True)
class BuildResult:
    statistics: CatalogStatistics
    index_path: Path
    assets: Sequence[Path]
    cname: Path | None
