from __future__ import annotations

import dataclasses
from typing import Any

from automata.logging import getLogger
from automata.nodes.api.responses.exceptions import LoadException
from automata.nodes.api.responses.playlists import Info as PlaylistInfo
from automata.nodes.api.responses.rest_api import (
    EmptyResponse,
    ErrorResponse,
    LoadTrackResponses,
    PlaylistData,
    PlaylistResponse,
    SearchResponse,
    TrackResponse,
    UnknownResponse,
    parse_loadtrack_response,
)
from automata.nodes.api.responses.track import Track as APITrack
from automata.players.tracks.obj import Track
from automata.type_hints.dict_typing import JSON_DICT_TYPE

LOGGER = getLogger("Automata.LoadResult")


@dataclasses.dataclass(repr=True, kw_only=True, slots=True)
class LoadResult:
    """The uniform shape every load or search response is turned into.

    ``load_type`` is whatever the node sent, known or not.
    ``playlist_info`` is only set for playlists and ``exception`` only for errors.
    """

    load_type: str | None
    tracks: list[Track] = dataclasses.field(default_factory=list)
    playlist_info: PlaylistInfo | None = None
    exception: LoadException | None = None

    @classmethod
    def from_response(cls, response: LoadTrackResponses, requester: Any = None) -> LoadResult:
        """Builds a load result from an already parsed node response."""
        match response:
            case PlaylistResponse(data=PlaylistData() as data):
                return cls(
                    load_type=response.loadType,
                    tracks=[Track.build(track, requester) for track in data.tracks],
                    playlist_info=data.playlist_info,
                )
            case SearchResponse(data=data):
                return cls(load_type=response.loadType, tracks=[Track.build(track, requester) for track in data])
            case TrackResponse(data=list() as data):
                return cls(load_type=response.loadType, tracks=[Track.build(track, requester) for track in data])
            case TrackResponse(data=APITrack() as data):
                return cls(load_type=response.loadType, tracks=[Track.build(data, requester)])
            case ErrorResponse(data=exception):
                LOGGER.debug("Node failed to load tracks: %s", exception)
                return cls(load_type=response.loadType, exception=exception)
            case UnknownResponse(data=data) if data is not None:
                LOGGER.verbose("Unknown load type %r, reading its data by shape", response.loadType)
                return cls(load_type=response.loadType, tracks=cls._tracks_by_shape(data, requester))
            case PlaylistResponse() | TrackResponse() | EmptyResponse() | UnknownResponse():
                return cls(load_type=response.loadType)

    @staticmethod
    def _tracks_by_shape(data: Any, requester: Any) -> list[Track]:
        if isinstance(data, list):
            return [Track.build(track, requester) for track in data if isinstance(track, dict)]
        if isinstance(data, dict) and ("encoded" in data or "info" in data):
            return [Track.build(data, requester)]
        return []


def normalize(raw: JSON_DICT_TYPE | None, requester: Any = None) -> LoadResult:
    """Turns a raw loadtracks payload into a :class:`LoadResult`.

    Missing or malformed data never raises; it simply yields no tracks.

    Parameters
    ----------
    raw: JSON_DICT_TYPE | None
        The payload as decoded from the node's JSON response.
    requester: Any
        Attached to every track built from the payload.
    """
    return LoadResult.from_response(parse_loadtrack_response(raw), requester)
