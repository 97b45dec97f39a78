"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from .models import Facilitator


class FacilitatorRepository(Protocol):
    """Provides the facilitator catalog."""

    def list_facilitators(self) -> Sequence[Facilitator]:
        ...


class TemplateRepository(Protocol):
    """Provides the page template text."""

    def read_template(self) -> str:
        ...


class SiteRepository(Protocol):
    """Receives the generated site."""

    def check_assets(self, names: Sequence[str]) -> None:
        ...

    def prepare(self) -> Path:
        ...

    def copy_asset(self, name: str) -> Path:
        ...

    def copy_optional(self, source: Path) -> Path | None:
        ...

    def write_text(self, name: str, content: str) -> Path:
        ...
