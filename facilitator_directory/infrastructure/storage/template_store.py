"""Storage helpers for the directory page template."""
from __future__ import annotations

import logging
from pathlib import Path

from facilitator_directory.domain.errors import MissingAssetError
from facilitator_directory.domain.repositories import TemplateRepository
from facilitator_directory.presentation.page import missing_placeholders

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path(__file__).resolve().parents[2] / "website" / "template.html"


def load_template(path: Path | None = None) -> str:
    template_path = path or DEFAULT_PATH
    if not template_path.is_file():
        raise MissingAssetError(template_path, what="template")
    template = template_path.read_text(encoding="utf-8")
    for token in missing_placeholders(template):
        logger.warning("Template %s has no %s placeholder", template_path, token)
    return template


class FileTemplateRepository(TemplateRepository):
    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    def read_template(self) -> str:
        return load_template(self._path)
