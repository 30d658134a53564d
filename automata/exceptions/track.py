from __future__ import annotations

from automata.exceptions.base import AutomataException


class TrackException(AutomataException):
    """Base exception for Track errors"""


class InvalidTrackException(TrackException):
    """Raised when an invalid track was passed"""
