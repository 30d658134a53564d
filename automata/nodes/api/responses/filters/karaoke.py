from __future__ import annotations

import dataclasses

from automata.nodes.api.responses.filters.base import FilterOptions


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Karaoke(FilterOptions):
    level: float | None = None
    monoLevel: float | None = None
    filterBand: float | None = None
    filterWidth: float | None = None
