from __future__ import annotations

from automata.players.filters.chain import FilterChain as FilterChain
from automata.players.filters.chain import NodeCommandChannel as NodeCommandChannel
from automata.players.filters.chain import SessionState as SessionState
from automata.players.filters.configuration import FilterConfiguration as FilterConfiguration

__all__ = (
    "FilterChain",
    "FilterConfiguration",
    "NodeCommandChannel",
    "SessionState",
)
