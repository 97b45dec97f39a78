"""Static facilitator catalog.

New facilitators get their own module under ``catalog.facilitators`` and an
entry in ``ALL_FACILITATORS``.
"""
from __future__ import annotations

from facilitator_directory.catalog.facilitators.treasure import TREASURE
from facilitator_directory.domain.models import Facilitator

ALL_FACILITATORS: tuple[Facilitator, ...] = (
    TREASURE,
)

__all__ = ["ALL_FACILITATORS"]
