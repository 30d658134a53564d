from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Protocol

from automata.constants.config import DEFAULT_SEARCH_SOURCE, FALLBACK_SEARCH_SOURCE
from automata.constants.node import DURATION_MATCH_WINDOW, TOPIC_CHANNEL_SUFFIX
from automata.logging import getLogger
from automata.players.tracks.obj import Track
from automata.players.tracks.response import LoadResult

LOGGER = getLogger("Automata.TrackResolver")


class SearchBackend(Protocol):
    async def search(self, query: str, source: str, requester: Any) -> LoadResult | None:
        ...


class TrackResolver:
    """Finds a fresh playable reference for a track whose original one stopped working.

    Candidates are picked in this order:

    1. When the author is known, the first candidate whose author is the same artist
       (or that artist's auto-generated "Topic" channel) or whose title is the same title.
    2. When the duration is known, the first candidate within two seconds of it.
    3. Otherwise the first candidate.

    Parameters
    ----------
    backend: SearchBackend
        Where candidates are searched for.
    source: str | None
        The search source to use, e.g. ``ytmsearch``.
        Defaults to the ``AUTOMATA__DEFAULT_SEARCH_SOURCE`` environment variable.
    """

    __slots__ = ("_backend", "_source")

    def __init__(self, backend: SearchBackend, *, source: str | None = None) -> None:
        self._backend = backend
        self._source = source or DEFAULT_SEARCH_SOURCE

    @property
    def source(self) -> str | None:
        """The configured search source, if any"""
        return self._source

    @staticmethod
    def build_query(track: Track) -> str:
        return " - ".join(part for part in (track.author, track.title) if part)

    async def resolve(self, track: Track, default_source: str = FALLBACK_SEARCH_SOURCE) -> Track:
        """|coro|
        Re-resolves ``track`` in place and returns it.

        If the search comes back empty the track is returned untouched,
        callers should compare its ``encoded`` value to tell whether anything changed.
        Errors raised by the backend are not handled here.
        """
        query = self.build_query(track)
        source = self._source or default_source
        LOGGER.trace("Resolving %r with %s:%s", track, source, query)
        result = await self._backend.search(query, source, track.requester)
        if result is None or not result.tracks:
            LOGGER.debug("No candidates found for %r, leaving it unchanged", query)
            return track

        candidate = self.select_candidate(track, result.tracks)
        LOGGER.trace("Resolved %r to %r", track, candidate)
        track.update_reference(encoded=candidate.encoded, identifier=candidate.identifier)
        return track

    @classmethod
    def select_candidate(cls, track: Track, candidates: Sequence[Track]) -> Track:
        """Picks the best replacement for ``track`` out of a non-empty list of candidates."""
        if track.author and (match := cls._match_author_or_title(track, candidates)) is not None:
            return match
        if track.duration is not None and (match := cls._match_duration(track.duration, candidates)) is not None:
            return match
        return candidates[0]

    @staticmethod
    def _match_author_or_title(track: Track, candidates: Sequence[Track]) -> Track | None:
        aliases = [
            re.compile(re.escape(alias), re.IGNORECASE)
            for alias in (track.author, f"{track.author}{TOPIC_CHANNEL_SUFFIX}")
        ]
        title = re.compile(re.escape(track.title), re.IGNORECASE) if track.title else None
        for candidate in candidates:
            if candidate.author and any(alias.fullmatch(candidate.author) for alias in aliases):
                return candidate
            if title is not None and candidate.title and title.fullmatch(candidate.title):
                return candidate
        return None

    @staticmethod
    def _match_duration(duration: int, candidates: Sequence[Track]) -> Track | None:
        low, high = duration - DURATION_MATCH_WINDOW, duration + DURATION_MATCH_WINDOW
        return next(
            (
                candidate
                for candidate in candidates
                if candidate.duration is not None and low <= candidate.duration <= high
            ),
            None,
        )
