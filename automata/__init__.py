from __future__ import annotations

import typing

from packaging.version import Version, parse

from automata.__version__ import __version__ as __version__

VERSION: Version = typing.cast(Version, parse(__version__))

from automata.nodes.node import Node  # noqa: E402
from automata.players.filters import FilterChain, FilterConfiguration  # noqa: E402
from automata.players.tracks.obj import Track  # noqa: E402
from automata.players.tracks.resolver import TrackResolver  # noqa: E402
from automata.players.tracks.response import LoadResult, normalize  # noqa: E402

__all__ = (
    "__version__",
    "VERSION",
    "Node",
    "FilterChain",
    "FilterConfiguration",
    "Track",
    "TrackResolver",
    "LoadResult",
    "normalize",
)
