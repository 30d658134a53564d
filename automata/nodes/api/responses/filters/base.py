from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(repr=True, frozen=True, kw_only=True, slots=True)
class FilterOptions:
    """An option group of the node's filter payload.

    Options left as ``None`` are not sent, so the node keeps its own default for them.
    """

    def to_dict(self) -> dict[str, Any]:
        return {
            field.name: value for field in dataclasses.fields(self) if (value := getattr(self, field.name)) is not None
        }
