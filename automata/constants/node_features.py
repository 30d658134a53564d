from __future__ import annotations

__all__ = (
    "SUPPORTED_SEARCHES",
    "SUPPORTED_FILTERS",
)

# noinspection SpellCheckingInspection
SUPPORTED_SEARCHES = {
    "ytmsearch": "YouTube Music",
    "ytsearch": "YouTube",
    "spsearch": "Spotify",
    "scsearch": "SoundCloud",
    "amsearch": "Apple Music",
    "dzsearch": "Deezer",
}

SUPPORTED_FILTERS = (
    "volume",
    "equalizer",
    "karaoke",
    "timescale",
    "vibrato",
    "rotation",
)
