"""Domain-level results for catalog aggregation."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogStatistics:
    total_facilitators: int
    total_networks: int
    total_addresses: int
