from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Info:
    identifier: str | None = None
    isSeekable: bool | None = None
    author: str | None = None
    length: int | None = None
    isStream: bool | None = None
    position: int | None = None
    title: str | None = None
    uri: str | None = None
    sourceName: str | None = None
    artworkUrl: str | None = None
    isrc: str | None = None


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class Track:
    info: Info = dataclasses.field(default_factory=Info)
    encoded: str | None = None
    pluginInfo: Any = None
    userData: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.info, Info):
            object.__setattr__(self, "info", Info())
