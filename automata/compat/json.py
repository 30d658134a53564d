"""The fastest JSON implementation available, for node request and response bodies.

Pass :func:`dumps` as ``json_serialize`` when creating the :class:`aiohttp.ClientSession` given to a node.
"""
import json
from json import JSONDecodeError as JSONDecodeError
from typing import Any

try:
    import orjson as _orjson
except ImportError:
    _orjson = None

try:
    import ujson as _ujson
except ImportError:
    _ujson = None

__all__ = ("dumps", "loads", "JSONDecodeError", "BACKEND")

BACKEND = "orjson" if _orjson else "ujson" if _ujson else "json"


def dumps(obj: Any, *, sort_keys: bool = False) -> str:
    """Serialize ``obj`` to a JSON ``str``, sorting dictionary keys when ``sort_keys`` is set."""
    if _orjson:
        return _orjson.dumps(obj, option=_orjson.OPT_SORT_KEYS if sort_keys else None).decode()
    if _ujson:
        return _ujson.dumps(obj, sort_keys=sort_keys, escape_forward_slashes=False)
    return json.dumps(obj, sort_keys=sort_keys)


def loads(obj: str | bytes | bytearray) -> Any:
    """Deserialize a JSON document.

    Raises
    ------
    ValueError
        If the input is not valid JSON; every backend's decode error subclasses it.
    """
    if _orjson:
        return _orjson.loads(obj)
    if _ujson:
        return _ujson.loads(obj)
    return json.loads(obj)
