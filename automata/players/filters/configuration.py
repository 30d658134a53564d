from __future__ import annotations

import dataclasses
from typing import Any

from deepdiff import DeepDiff  # type: ignore

from automata.constants.node_features import SUPPORTED_FILTERS
from automata.nodes.api.responses.filters import (
    Equalizer,
    EqualizerBand,
    FilterOptions,
    Karaoke,
    Rotation,
    Timescale,
    Vibrato,
)
from automata.type_hints.dict_typing import JSON_DICT_TYPE


@dataclasses.dataclass(repr=True, kw_only=True, slots=True)
class FilterConfiguration:
    """Every audio filter currently configured for one playback session.

    ``None`` means the group is disabled; it is still sent to the node so that the node disables it too.
    """

    volume: float | None = None
    equalizer: Equalizer = dataclasses.field(default_factory=list)
    karaoke: Karaoke | dict | None = None
    timescale: Timescale | dict | None = None
    vibrato: Vibrato | dict | None = None
    rotation: Rotation | dict | None = None

    def to_dict(self) -> JSON_DICT_TYPE:
        """A full snapshot of the configuration in the node's ``filters`` format."""
        response: JSON_DICT_TYPE = {"volume": self.volume}
        for filter_name in SUPPORTED_FILTERS:
            response = self._process_filter(filter_name, response)
        return response

    def _process_filter(self, name: str, response: JSON_DICT_TYPE) -> JSON_DICT_TYPE:
        match name:
            case "equalizer":
                return self._process_equalizer(response)
            case "karaoke":
                return self._process_filter_object(name, self.karaoke, response)
            case "timescale":
                return self._process_filter_object(name, self.timescale, response)
            case "vibrato":
                return self._process_filter_object(name, self.vibrato, response)
            case "rotation":
                return self._process_filter_object(name, self.rotation, response)
            case __:
                return response

    def _process_equalizer(self, response: JSON_DICT_TYPE) -> JSON_DICT_TYPE:
        response["equalizer"] = [
            band.to_dict() if isinstance(band, EqualizerBand) else dict(band) for band in self.equalizer or []
        ]
        return response

    @staticmethod
    def _process_filter_object(
        name: str, options: FilterOptions | dict | None, response: JSON_DICT_TYPE
    ) -> JSON_DICT_TYPE:
        if isinstance(options, FilterOptions):
            response[name] = options.to_dict()
        elif isinstance(options, dict):
            response[name] = dict(options)
        else:
            response[name] = None
        return response

    @property
    def changed(self) -> bool:
        """Whether any filter group differs from the defaults; volume is not taken into account."""
        return bool(
            DeepDiff(
                self.to_dict(),
                FilterConfiguration().to_dict(),
                ignore_order=True,
                max_passes=1,
                cache_size=100,
                exclude_paths=["root['volume']"],
            )
        )

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FilterConfiguration):
            return not DeepDiff(self.to_dict(), other.to_dict(), max_passes=1, cache_size=100)
        return NotImplemented
