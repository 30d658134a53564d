from __future__ import annotations

from typing import Any

import aiohttp
from dacite import from_dict
from yarl import URL

from automata.__version__ import __version__
from automata.compat import json
from automata.constants.config import TRACE_REQUESTS
from automata.constants.node import GOOD_RESPONSE_RANGE, MAX_SUPPORTED_API_MAJOR_VERSION
from automata.exceptions.request import HTTPException, UnauthorizedException
from automata.logging import getLogger
from automata.nodes.api.responses import rest_api
from automata.nodes.api.responses.errors import LavalinkError
from automata.nodes.api.responses.shared import DACITE_CONFIG
from automata.players.tracks.response import LoadResult
from automata.type_hints.dict_typing import JSON_DICT_TYPE


class Node:
    """The REST side of a connection to a Lavalink node.

    Implements the search backend used by :class:`automata.players.tracks.resolver.TrackResolver`
    and the command channel used by :class:`automata.players.filters.chain.FilterChain`.

    The websocket session is handled elsewhere; set :attr:`session_id` once the node reports it.
    """

    __slots__ = (
        "_session",
        "_host",
        "_port",
        "_password",
        "_name",
        "_ssl",
        "_session_id",
        "_user_id",
        "_logger",
    )

    def __init__(
        self,
        session: aiohttp.ClientSession,
        host: str,
        password: str,
        port: int | None = None,
        name: str | None = None,
        ssl: bool = False,
        session_id: str | None = None,
        user_id: int | str | None = None,
    ) -> None:
        self._session = session
        self._host = host
        self._ssl = ssl
        if port is None:
            self._port = 443 if self._ssl else 80
        else:
            self._port = port
        self._password = password
        self._name = name or f"{self._host}-{self._port}"
        self._session_id = session_id
        self._user_id = user_id
        self._logger = getLogger(f"Automata.Node-{self._name}")

    def __repr__(self) -> str:
        return f"<Node name={self._name} ssl={self._ssl} host={self._host} port={self._port}>"

    @property
    def name(self) -> str:
        return self._name

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def ssl(self) -> bool:
        return self._ssl

    @property
    def password(self) -> str:
        return self._password

    @property
    def session_id(self) -> str | None:
        """The websocket session the players of this node belong to."""
        return self._session_id

    @session_id.setter
    def session_id(self, value: str | None) -> None:
        self._session_id = value

    @property
    def connection_protocol(self) -> str:
        return "https" if self.ssl else "http"

    @property
    def base_url(self) -> URL:
        """Returns the base URL of the target node."""
        return URL(f"{self.connection_protocol}://{self.host}:{self.port}")

    @property
    def base_api_url(self) -> URL:
        """Returns the base API URL of the target node."""
        return self.base_url / f"v{MAX_SUPPORTED_API_MAJOR_VERSION}"

    @property
    def headers(self) -> dict[str, str]:
        headers = {
            "Authorization": self.password,
            "Client-Name": f"Automata/{__version__}",
        }
        if self._user_id is not None:
            headers["User-Id"] = str(self._user_id)
        return headers

    # ENDPOINTS
    def get_endpoint_session(self) -> URL:
        """Returns the session endpoint of the target node."""
        if self.session_id is None:
            raise ValueError(f"{self!r} has no session id yet")
        return self.base_api_url / "sessions" / self.session_id

    def get_endpoint_session_player_by_guild_id(self, guild_id: int | str) -> URL:
        """Returns the session player endpoint of the target node for the given guild ID."""
        return self.get_endpoint_session() / "players" / f"{guild_id}"

    def get_endpoint_loadtracks(self) -> URL:
        """Returns the loadtracks endpoint of the target node."""
        return self.base_api_url / "loadtracks"

    async def _failure(self, res: aiohttp.ClientResponse, action: str) -> HTTPException:
        data = await res.json(loads=json.loads, content_type=None)
        if not isinstance(data, dict):
            data = {"status": res.status}
        failure = from_dict(data_class=LavalinkError, data=data, config=DACITE_CONFIG)
        if res.status in [401, 403]:
            raise UnauthorizedException(failure)
        self._logger.trace("Failed to %s: %d %s", action, failure.status, failure.message)
        return HTTPException(failure)

    async def fetch_loadtracks(self, identifier: str) -> rest_api.LoadTrackResponses | HTTPException:
        """|coro|
        Fetches the loadtracks response from the target node.

        Parameters
        ----------
        identifier: str
            A URL, or a search query prefixed with its source, e.g. ``ytmsearch:artist - title``.
        """
        async with self._session.get(
            self.get_endpoint_loadtracks(),
            headers=self.headers,
            params={"identifier": identifier, "trace": "true" if TRACE_REQUESTS else "false"},
        ) as res:
            if res.status in GOOD_RESPONSE_RANGE:
                result = await res.json(loads=json.loads)
                self._logger.trace("Loaded track: %s response: %s", identifier, result)
                return rest_api.parse_loadtrack_response(result)
            return await self._failure(res, "load tracks")

    async def patch_session_player(
        self, guild_id: int | str, no_replace: bool = False, payload: JSON_DICT_TYPE = None
    ) -> JSON_DICT_TYPE | HTTPException:
        """|coro|
        Updates the player associated with the target node and the given guild ID.
        """
        async with self._session.patch(
            self.get_endpoint_session_player_by_guild_id(guild_id=guild_id),
            headers=self.headers,
            params={"noReplace": "true" if no_replace else "false", "trace": "true" if TRACE_REQUESTS else "false"},
            json=payload,
        ) as res:
            if res.status in GOOD_RESPONSE_RANGE:
                return await res.json(loads=json.loads)
            return await self._failure(res, "patch session player")

    async def search(self, query: str, source: str, requester: Any = None) -> LoadResult:
        """|coro|
        Searches ``source`` for ``query``.

        Raises
        ------
        HTTPException
            If the node rejected the request.
        """
        response = await self.fetch_loadtracks(f"{source}:{query}")
        if isinstance(response, HTTPException):
            raise response
        return LoadResult.from_response(response, requester)

    async def update_player(self, guild_id: int | str, payload: JSON_DICT_TYPE) -> None:
        """|coro|
        Sends a player update to the node.

        Raises
        ------
        HTTPException
            If the node rejected the update.
        """
        response = await self.patch_session_player(guild_id=guild_id, payload=payload)
        if isinstance(response, HTTPException):
            raise response
