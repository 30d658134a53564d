from __future__ import annotations

import dataclasses

from automata.nodes.api.responses.filters.base import FilterOptions


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Rotation(FilterOptions):
    """Audio panning around the listener, ``rotationHz=0.2`` gives the "8D" effect."""

    rotationHz: float | None = None
