from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from automata.exceptions.track import InvalidTrackException
from automata.nodes.api.responses.rest_api import PlaylistData, as_track, parse_playlist_data
from automata.nodes.api.responses.track import Track as APITrack
from automata.type_hints.dict_typing import JSON_DICT_TYPE


class Track:
    """A playable item as known to the node, plus who asked for it.

    Instances are immutable by convention: the only mutation is :meth:`update_reference`,
    which swaps the playable reference and its identifier together.
    """

    __slots__ = (
        "_encoded",
        "_identifier",
        "_title",
        "_author",
        "_uri",
        "_source_name",
        "_artwork_url",
        "_isrc",
        "_duration",
        "_is_seekable",
        "_is_stream",
        "_plugin_info",
        "_user_data",
        "_requester",
    )

    def __init__(
        self,
        *,
        encoded: str | None = None,
        identifier: str | None = None,
        title: str | None = None,
        author: str | None = None,
        uri: str | None = None,
        source_name: str | None = None,
        artwork_url: str | None = None,
        isrc: str | None = None,
        duration: int | None = None,
        is_seekable: bool | None = None,
        is_stream: bool | None = None,
        plugin_info: Any = None,
        user_data: Any = None,
        requester: Any = None,
    ) -> None:
        """This class should not usually be instantiated directly. Use :meth:`Track.build` instead."""
        self._encoded = encoded
        self._identifier = identifier
        self._title = title
        self._author = author
        self._uri = uri
        self._source_name = source_name
        self._artwork_url = artwork_url
        self._isrc = isrc
        self._duration = duration
        self._is_seekable = is_seekable
        self._is_stream = is_stream
        self._plugin_info = plugin_info
        self._user_data = user_data
        self._requester = requester

    def __repr__(self) -> str:
        return f"<Track identifier={self._identifier} encoded={self._encoded}>"

    @classmethod
    def build(
        cls,
        data: Track | APITrack | PlaylistData | Sequence[APITrack | JSON_DICT_TYPE] | JSON_DICT_TYPE,
        requester: Any = None,
    ) -> Track:
        """Builds a track object from the given data.

        Parameters
        ----------
        data: :class:`Track` | :class:`APITrack` | :class:`PlaylistData` | :class:`list` | :class:`dict`
            The data to build the track from.
            Anything carrying a ``tracks`` collection is treated as a playlist preview:
            only its first track is used and the rest are ignored.
            A sequence of tracks is treated the same way, only its first element is used.
        requester: Any
            Whoever requested the track, stored as-is.

        Raises
        ------
        InvalidTrackException
            If ``data`` is not one of the supported shapes.
        """
        if isinstance(data, cls):
            return data

        if isinstance(data, PlaylistData):
            return cls._from_playlist_preview(data, requester)

        if isinstance(data, dict):
            if "tracks" in data:
                return cls._from_playlist_preview(parse_playlist_data(data), requester)
            return cls._from_lavalink_track_object(as_track(data), requester)

        if isinstance(data, APITrack):
            return cls._from_lavalink_track_object(data, requester)

        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            if not data:
                return cls(requester=requester)
            return cls.build(data[0], requester)

        raise InvalidTrackException(f"Expected Track, LavalinkTrackObject, list, or dict, got {type(data).__name__}")

    @classmethod
    def _from_playlist_preview(cls, data: PlaylistData, requester: Any) -> Track:
        """The first track of a playlist stands in for the whole playlist.

        Besides the first track's info, its ``encoded`` handle, ``pluginInfo`` and ``userData`` are copied too,
        so the preview can be played and resolved like any other track. The remaining tracks are discarded.
        """
        if not data.tracks:
            return cls(requester=requester)
        return cls._from_lavalink_track_object(data.tracks[0], requester)

    @classmethod
    def _from_lavalink_track_object(cls, data: APITrack, requester: Any) -> Track:
        info = data.info
        return cls(
            encoded=data.encoded,
            identifier=info.identifier,
            title=info.title,
            author=info.author,
            uri=info.uri,
            source_name=info.sourceName,
            artwork_url=info.artworkUrl,
            isrc=info.isrc,
            duration=info.length,
            is_seekable=info.isSeekable,
            is_stream=info.isStream,
            plugin_info=data.pluginInfo,
            user_data=data.userData,
            requester=requester,
        )

    @property
    def encoded(self) -> str | None:
        """The opaque handle the node streams this track from."""
        return self._encoded

    @property
    def identifier(self) -> str | None:
        return self._identifier

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def author(self) -> str | None:
        return self._author

    @property
    def uri(self) -> str | None:
        return self._uri

    @property
    def source_name(self) -> str | None:
        return self._source_name

    @property
    def artwork_url(self) -> str | None:
        return self._artwork_url

    @property
    def isrc(self) -> str | None:
        return self._isrc

    @property
    def duration(self) -> int | None:
        """The length of the track in milliseconds"""
        return self._duration

    @property
    def is_seekable(self) -> bool | None:
        return self._is_seekable

    @property
    def is_stream(self) -> bool | None:
        return self._is_stream

    @property
    def plugin_info(self) -> Any:
        return self._plugin_info

    @property
    def user_data(self) -> Any:
        return self._user_data

    @property
    def requester(self) -> Any:
        return self._requester

    def update_reference(self, *, encoded: str | None, identifier: str | None) -> None:
        """Points this track at a different playable item.

        The reference and identifier always come from the same candidate;
        every other field, including what is shown to users, is left as it was.
        """
        self._encoded, self._identifier = encoded, identifier

    def to_dict(self) -> JSON_DICT_TYPE:
        """The track in the node's wire format, suitable for a player update."""
        return {
            "encoded": self._encoded,
            "info": {
                "identifier": self._identifier,
                "isSeekable": self._is_seekable,
                "author": self._author,
                "length": self._duration,
                "isStream": self._is_stream,
                "title": self._title,
                "uri": self._uri,
                "sourceName": self._source_name,
                "artworkUrl": self._artwork_url,
                "isrc": self._isrc,
            },
            "pluginInfo": self._plugin_info,
            "userData": self._user_data,
        }
