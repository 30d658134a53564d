from __future__ import annotations

import asyncio
import inspect
from collections.abc import Iterable
from typing import Any, Protocol

from automata.constants.filters import (
    BASS_BOOST_EQUALIZER,
    SOFT_EQUALIZER,
    TREBLE_BASS_EQUALIZER,
    TV_EQUALIZER,
    VAPORWAVE_EQUALIZER,
)
from automata.logging import getLogger
from automata.nodes.api.responses.filters import EqualizerBand, Karaoke, Rotation, Timescale, Vibrato
from automata.players.filters.configuration import FilterConfiguration
from automata.type_hints.dict_typing import JSON_DICT_TYPE
from automata.type_hints.generics import MaybeAwaitable

LOGGER = getLogger("Automata.Filters")


class SessionState(Protocol):
    """The parts of a playback session the filter chain reads when it syncs."""

    @property
    def guild_id(self) -> int | str:
        ...

    @property
    def volume(self) -> float | None:
        ...


class NodeCommandChannel(Protocol):
    def update_player(self, guild_id: int | str, payload: JSON_DICT_TYPE) -> MaybeAwaitable[Any]:
        ...


class FilterChain:
    """Holds the filters of one playback session and pushes all of them to the node on every change.

    Every mutator assigns the new value, sends the complete configuration and returns the chain,
    so calls can be chained: ``chain.set_karaoke(None).set_rotation(Rotation(rotationHz=0.2))``.

    When the command channel returns an awaitable it is scheduled on the running loop and not waited on;
    without a running loop the update is dropped with a warning and only the local configuration changes.
    Successive syncs are not serialized, so the node may receive them out of order.
    """

    __slots__ = ("_session", "_channel", "_configuration", "_pending")

    def __init__(
        self,
        session: SessionState,
        channel: NodeCommandChannel,
        configuration: FilterConfiguration | None = None,
    ) -> None:
        self._session = session
        self._channel = channel
        self._configuration = configuration or FilterConfiguration()
        self._pending: set[asyncio.Future] = set()

    def __repr__(self) -> str:
        return f"<FilterChain guild_id={self._session.guild_id} configuration={self._configuration!r}>"

    @property
    def configuration(self) -> FilterConfiguration:
        """The current configuration, replace it through the chain's methods only"""
        return self._configuration

    @property
    def volume(self) -> float | None:
        """The session volume that was sent with the last sync"""
        return self._configuration.volume

    @property
    def equalizer(self) -> list[EqualizerBand | dict]:
        return self._configuration.equalizer

    @property
    def karaoke(self) -> Karaoke | dict | None:
        return self._configuration.karaoke

    @property
    def timescale(self) -> Timescale | dict | None:
        return self._configuration.timescale

    @property
    def vibrato(self) -> Vibrato | dict | None:
        return self._configuration.vibrato

    @property
    def rotation(self) -> Rotation | dict | None:
        return self._configuration.rotation

    @property
    def pending_syncs(self) -> frozenset[asyncio.Future]:
        """Syncs that were dispatched and have not completed yet."""
        return frozenset(self._pending)

    def set_equalizer(self, bands: Iterable[EqualizerBand | dict] | None = None) -> FilterChain:
        """Sets the equalizer bands, ``None`` resets the equalizer to flat."""
        self._configuration.equalizer = list(bands) if bands is not None else []
        return self.sync()

    def set_karaoke(self, karaoke: Karaoke | dict | None = None) -> FilterChain:
        self._configuration.karaoke = karaoke
        return self.sync()

    def set_timescale(self, timescale: Timescale | dict | None = None) -> FilterChain:
        self._configuration.timescale = timescale
        return self.sync()

    def set_vibrato(self, vibrato: Vibrato | dict | None = None) -> FilterChain:
        self._configuration.vibrato = vibrato
        return self.sync()

    def set_rotation(self, rotation: Rotation | dict | None = None) -> FilterChain:
        self._configuration.rotation = rotation
        return self.sync()

    def clear_filters(self) -> FilterChain:
        """Disables every filter."""
        self._configuration = FilterConfiguration()
        return self.sync()

    def eight_d(self) -> FilterChain:
        return self.set_rotation(Rotation(rotationHz=0.2))

    def bass_boost(self) -> FilterChain:
        return self.set_equalizer(BASS_BOOST_EQUALIZER)

    def nightcore(self) -> FilterChain:
        return self.set_timescale(Timescale(speed=1.1, pitch=1.125, rate=1.05))

    def slowmo(self) -> FilterChain:
        return self.set_timescale(Timescale(speed=0.5, pitch=1.0, rate=0.8))

    def soft(self) -> FilterChain:
        return self.set_equalizer(SOFT_EQUALIZER)

    def tv(self) -> FilterChain:
        return self.set_equalizer(TV_EQUALIZER)

    def treble_bass(self) -> FilterChain:
        return self.set_equalizer(TREBLE_BASS_EQUALIZER)

    def vaporwave(self) -> FilterChain:
        self.set_equalizer(VAPORWAVE_EQUALIZER)
        return self.set_timescale(Timescale(pitch=0.55))

    def sync(self) -> FilterChain:
        """Sends the whole configuration, with the session's current volume, to the node."""
        self._configuration.volume = self._session.volume
        guild_id = self._session.guild_id
        payload = {"filters": self._configuration.to_dict()}
        LOGGER.trace("Syncing filters for %s: %s", guild_id, payload)
        result = self._channel.update_player(guild_id, payload)
        if inspect.isawaitable(result):
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                LOGGER.warning("No running event loop, filters for %s were not sent to the node", guild_id)
                if inspect.iscoroutine(result):
                    result.close()
                return self
            task = asyncio.ensure_future(result, loop=loop)
            self._pending.add(task)
            task.add_done_callback(self._on_sync_done)
        return self

    def _on_sync_done(self, task: asyncio.Future) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        if (exc := task.exception()) is not None:
            LOGGER.debug("Failed to sync filters for %s", self._session.guild_id, exc_info=exc)
