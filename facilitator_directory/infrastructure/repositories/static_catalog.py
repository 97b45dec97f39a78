"""In-memory repository over the static facilitator catalog."""
from __future__ import annotations

from typing import Sequence

from facilitator_directory.catalog import ALL_FACILITATORS
from facilitator_directory.domain.models import Facilitator
from facilitator_directory.domain.repositories import FacilitatorRepository


class StaticFacilitatorRepository(FacilitatorRepository):
    def __init__(self, facilitators: Sequence[Facilitator] | None = None) -> None:
        self._facilitators = tuple(ALL_FACILITATORS if facilitators is None else facilitators)

    def list_facilitators(self) -> Sequence[Facilitator]:
        return self._facilitators
