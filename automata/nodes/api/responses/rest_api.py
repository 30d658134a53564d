from __future__ import annotations

import dataclasses
from typing import Any, Literal, TypeAlias, Union

from dacite import from_dict

from automata.nodes.api.responses.exceptions import LoadException
from automata.nodes.api.responses.playlists import Info
from automata.nodes.api.responses.shared import DACITE_CONFIG
from automata.nodes.api.responses.track import Track
from automata.type_hints.dict_typing import JSON_DICT_TYPE


def as_track(data: Any) -> Track | None:
    """Builds a track from a raw track object, anything else gives ``None``."""
    if isinstance(data, Track):
        return data
    if isinstance(data, dict):
        return from_dict(data_class=Track, data=data, config=DACITE_CONFIG)
    return None


def _only_tracks(data: Any) -> list[Track]:
    if isinstance(data, (Track, dict)):
        data = [data]
    if not isinstance(data, list):
        return []
    return [track for s in data if (track := as_track(s)) is not None]


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class PlaylistData:
    info: Info | None = None
    playlistInfo: Info | None = None
    pluginInfo: Any = None
    tracks: list[Track] = dataclasses.field(default_factory=list)

    def __post_init__(self):
        object.__setattr__(self, "tracks", _only_tracks(self.tracks))
        for name in ("info", "playlistInfo"):
            if not isinstance(getattr(self, name), Info):
                object.__setattr__(self, name, None)

    @property
    def playlist_info(self) -> Info | None:
        """The playlist metadata, whichever key the node used to send it."""
        return self.playlistInfo or self.info


def parse_playlist_data(data: JSON_DICT_TYPE) -> PlaylistData:
    """Parses a raw playlist object; ``tracks`` may be a list or a single track object."""
    playlist = from_dict(
        data_class=PlaylistData, data={k: v for k, v in data.items() if k != "tracks"}, config=DACITE_CONFIG
    )
    return dataclasses.replace(playlist, tracks=data.get("tracks"))


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class BaseTrackResponse:
    loadType: str | None = None
    data: Any = None

    def __bool__(self):
        return True


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class TrackResponse(BaseTrackResponse):
    """A single track, or a list of tracks from nodes that send one under this load type."""

    loadType: Literal["track"] = "track"
    data: Track | list[Track] | None = None

    def __post_init__(self):
        if isinstance(self.data, list):
            object.__setattr__(self, "data", _only_tracks(self.data))
        else:
            object.__setattr__(self, "data", as_track(self.data))


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class PlaylistResponse(BaseTrackResponse):
    loadType: Literal["playlist"] = "playlist"
    data: PlaylistData | None = None

    def __post_init__(self):
        if not isinstance(self.data, PlaylistData):
            object.__setattr__(self, "data", None)


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class SearchResponse(BaseTrackResponse):
    loadType: Literal["search"] = "search"
    data: list[Track] = dataclasses.field(default_factory=list)

    def __post_init__(self):
        object.__setattr__(self, "data", _only_tracks(self.data))


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class EmptyResponse(BaseTrackResponse):
    loadType: Literal["empty"] = "empty"
    data: None = None

    def __bool__(self):
        return False


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class ErrorResponse(BaseTrackResponse):  # noqa
    loadType: Literal["error"] = "error"
    data: LoadException | None = None

    def __post_init__(self):
        if not isinstance(self.data, LoadException):
            object.__setattr__(self, "data", None)

    def __bool__(self):
        return False


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class UnknownResponse(BaseTrackResponse):
    """A load type this library does not know about, kept with its raw data."""

    loadType: str | None = None
    data: Any = None


LoadTrackResponses: TypeAlias = Union[
    TrackResponse, PlaylistResponse, EmptyResponse, ErrorResponse, SearchResponse, UnknownResponse
]


def parse_loadtrack_response(data: JSON_DICT_TYPE | None) -> LoadTrackResponses:
    """Parses a raw loadtracks payload into its tagged response object.

    Track collections are read by shape: a list maps every element
    and a single track object is treated as a list of one.

    Parameters
    ----------
    data: JSON_DICT_TYPE | None
        The data to parse.

    Returns
    -------
    LoadTrackResponses
        The response object matching the payload's ``loadType``.
        Unrecognised load types are returned as :class:`UnknownResponse`.
    """
    if not isinstance(data, dict):
        return UnknownResponse()
    payload = data.get("data")
    match data.get("loadType"):
        case "error":
            return from_dict(data_class=ErrorResponse, data=data, config=DACITE_CONFIG)
        case "empty":
            return EmptyResponse()
        case "playlist":
            return PlaylistResponse(data=parse_playlist_data(payload) if isinstance(payload, dict) else None)
        case "track":
            return TrackResponse(data=payload)
        case "search":
            return SearchResponse(data=payload)
        case load_type:
            return UnknownResponse(loadType=load_type, data=payload)
