from __future__ import annotations

import os

from automata.constants.node_features import SUPPORTED_SEARCHES
from automata.logging import getLogger

LOGGER = getLogger("Automata.Environment")

# noinspection SpellCheckingInspection
FALLBACK_SEARCH_SOURCE = "ytmsearch"

# Unset means "let the caller decide", see TrackResolver.resolve
DEFAULT_SEARCH_SOURCE = os.getenv("AUTOMATA__DEFAULT_SEARCH_SOURCE") or None
if DEFAULT_SEARCH_SOURCE is not None and DEFAULT_SEARCH_SOURCE not in SUPPORTED_SEARCHES:
    LOGGER.warning("Invalid search source %s, defaulting to %s", DEFAULT_SEARCH_SOURCE, FALLBACK_SEARCH_SOURCE)
    LOGGER.info("Valid search sources are %s", ", ".join(SUPPORTED_SEARCHES.keys()))
    DEFAULT_SEARCH_SOURCE = FALLBACK_SEARCH_SOURCE

TRACE_REQUESTS = bool(int(os.getenv("AUTOMATA__TRACE_REQUESTS", "0")))
