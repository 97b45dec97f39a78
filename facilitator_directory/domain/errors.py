"""Exceptions raised while building the facilitator directory."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence


class DirectoryError(Exception):
    """Base class for build failures reported by the CLI."""


class MissingAssetError(DirectoryError, FileNotFoundError):
    """Raised when the template or a required icon cannot be found."""

    def __init__(self, path: Path, what: str = "asset") -> None:
        super().__init__(f"Required {what} not found: {path}")
        self.path = path


class CatalogValidationError(DirectoryError, ValueError):
    """Raised when catalog entries violate the catalog invariants."""

    def __init__(self, problems: Sequence[str]) -> None:
        self.problems = tuple(problems)
        super().__init__("Invalid facilitator catalog: " + "; ".join(self.problems))


class UnknownNetworkError(DirectoryError, KeyError):
    """Raised when a network has no explorer entry."""

    def __init__(self, network: object) -> None:
        super().__init__(network)
        self.network = network

    def __str__(self) -> str:
        return f"No explorer registered for network {self.network!r}"


__all__ = (
    "DirectoryError",
    "MissingAssetError",
    "CatalogValidationError",
    "UnknownNetworkError",
)
