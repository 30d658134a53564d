from automata.nodes.api.responses.filters.base import FilterOptions as FilterOptions
from automata.nodes.api.responses.filters.equalizer import Equalizer as Equalizer
from automata.nodes.api.responses.filters.equalizer import EqualizerBand as EqualizerBand
from automata.nodes.api.responses.filters.karaoke import Karaoke as Karaoke
from automata.nodes.api.responses.filters.rotation import Rotation as Rotation
from automata.nodes.api.responses.filters.timescale import Timescale as Timescale
from automata.nodes.api.responses.filters.vibrato import Vibrato as Vibrato

__all__ = (
    "FilterOptions",
    "Equalizer",
    "EqualizerBand",
    "Karaoke",
    "Rotation",
    "Timescale",
    "Vibrato",
)
