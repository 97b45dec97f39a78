"""Filesystem repository for the generated site."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Sequence

from facilitator_directory.domain.errors import MissingAssetError
from facilitator_directory.domain.repositories import SiteRepository

logger = logging.getLogger(__name__)


class FileSystemSiteRepository(SiteRepository):
    def __init__(self, root: Path, assets_dir: Path) -> None:
        self._root = Path(root)
        self._assets_dir = Path(assets_dir)

    @property
    def root(self) -> Path:
        return self._root

    def check_assets(self, names: Sequence[str]) -> None:
        for name in names:
            source = self._assets_dir / name
            if not source.is_file():
                raise MissingAssetError(source, what="icon")

    def prepare(self) -> Path:
        self._root.mkdir(parents=True, exist_ok=True)
        return self._root

    def copy_asset(self, name: str) -> Path:
        self.check_assets((name,))
        source = self._assets_dir / name
        target = self._root / name
        shutil.copyfile(source, target)
        logger.debug("Copied %s to %s", source, target)
        return target

    def copy_optional(self, source: Path) -> Path | None:
        source = Path(source)
        if not source.is_file():
            logger.info("No %s file found (skipping)", source.name)
            return None
        target = self._root / source.name
        shutil.copyfile(source, target)
        logger.info("Copied %s file", source.name)
        return target

    def write_text(self, name: str, content: str) -> Path:
        target = self._root / name
        target.write_text(content, encoding="utf-8")
        return target
