from __future__ import annotations

from automata.nodes.api.responses.filters import EqualizerBand


def _bands(*gains: float) -> tuple[EqualizerBand, ...]:
    return tuple(EqualizerBand(band=band, gain=gain) for band, gain in enumerate(gains))


BASS_BOOST_EQUALIZER = _bands(0.2, 0.15, 0.1, 0.05, 0.0, -0.05, -0.1, -0.1, -0.1, -0.1, -0.1, -0.1, -0.1, -0.1, -0.1)
SOFT_EQUALIZER = _bands(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -0.25, -0.25, -0.25, -0.25, -0.25, -0.25, -0.25)
TV_EQUALIZER = _bands(0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.65, 0.65, 0.65, 0.65, 0.65, 0.65, 0.65, 0.0)
TREBLE_BASS_EQUALIZER = _bands(0.6, 0.67, 0.67, 0.0, -0.5, 0.15, -0.45, 0.23, 0.35, 0.45, 0.55, 0.6, 0.55, 0.0, 0.0)
VAPORWAVE_EQUALIZER = _bands(0.3, 0.3, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)
