from __future__ import annotations

from typing import Any


def raw_track(
    identifier: str,
    *,
    author: str | None = "Artist",
    title: str | None = "Title",
    length: int | None = 200000,
    **info: Any,
) -> dict[str, Any]:
    return {
        "encoded": f"QAAA{identifier}",
        "info": {
            "identifier": identifier,
            "isSeekable": True,
            "author": author,
            "length": length,
            "isStream": False,
            "position": 0,
            "title": title,
            "uri": f"https://www.youtube.com/watch?v={identifier}",
            "sourceName": "youtube",
            **info,
        },
        "pluginInfo": {},
        "userData": {},
    }
