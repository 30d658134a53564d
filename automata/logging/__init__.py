from __future__ import annotations

import logging
import os

from red_commons.logging import RedTraceLogger  # type: ignore
from red_commons.logging import getLogger as redgetLogger
from red_commons.logging import maybe_update_logger_class

__all__ = ("getLogger", "LOGGER_PREFIX")

maybe_update_logger_class()

LOGGER_PREFIX = os.getenv("AUTOMATA__LOGGER_PREFIX", "")

# DeepDiff logs every comparison it cannot cache, and filters are compared on each change.
for __noisy in ("deepdiff.diff",):
    logging.getLogger(__noisy).disabled = True


# noinspection PyPep8Naming
def getLogger(name: str) -> RedTraceLogger:  # noqa: N802
    """A red_commons logger with ``trace`` and ``verbose`` levels, named ``AUTOMATA__LOGGER_PREFIX`` + ``name``."""
    return redgetLogger(f"{LOGGER_PREFIX}{name}")
