from __future__ import annotations

import dataclasses
from typing import Union

from automata.nodes.api.responses.filters.base import FilterOptions


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class EqualizerBand(FilterOptions):
    band: int | None = None
    gain: float | None = None


Equalizer = list[Union[EqualizerBand, dict]]
