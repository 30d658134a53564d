from __future__ import annotations

from automata.exceptions.base import AutomataException as AutomataException
from automata.exceptions.request import HTTPException as HTTPException
from automata.exceptions.request import UnauthorizedException as UnauthorizedException
from automata.exceptions.track import InvalidTrackException as InvalidTrackException
from automata.exceptions.track import TrackException as TrackException

__all__ = (
    "AutomataException",
    "HTTPException",
    "UnauthorizedException",
    "TrackException",
    "InvalidTrackException",
)
