from __future__ import annotations

import dataclasses

from automata.nodes.api.responses.filters.base import FilterOptions


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Timescale(FilterOptions):
    speed: float | None = None
    pitch: float | None = None
    rate: float | None = None
