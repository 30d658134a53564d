from __future__ import annotations

import dataclasses

from automata.nodes.api.responses.filters.base import FilterOptions


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Vibrato(FilterOptions):
    frequency: float | None = None
    depth: float | None = None
