from __future__ import annotations

from automata.constants.config.env_var import DEFAULT_SEARCH_SOURCE as DEFAULT_SEARCH_SOURCE
from automata.constants.config.env_var import FALLBACK_SEARCH_SOURCE as FALLBACK_SEARCH_SOURCE
from automata.constants.config.env_var import TRACE_REQUESTS as TRACE_REQUESTS

__all__ = (
    "DEFAULT_SEARCH_SOURCE",
    "FALLBACK_SEARCH_SOURCE",
    "TRACE_REQUESTS",
)
