"""Query parameters for commercetools query endpoints.

`QueryInput` models the filtering, sorting and paging knobs shared by every
``GET /{resource}`` query endpoint. Every field is optional and ``None`` means
"leave it out of the URL"; an explicit ``limit=0`` or ``with_total=False`` is
sent as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple
from urllib.parse import urlencode

QueryPairs = List[Tuple[str, str]]


@dataclass
class QueryInput:
    where: Optional[str] = None
    sort: List[str] = field(default_factory=list)
    expand: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    with_total: Optional[bool] = None

    def __post_init__(self) -> None:
        for name in ("limit", "offset"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    def to_params(self) -> QueryPairs:
        """Ordered ``(key, value)`` pairs; repeated keys for ``sort``."""
        params: QueryPairs = []
        if self.where:
            params.append(("where", self.where))
        for entry in self.sort:
            params.append(("sort", entry))
        if self.expand:
            params.append(("expand", self.expand))
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.offset is not None:
            params.append(("offset", str(self.offset)))
        if self.with_total is not None:
            params.append(("withTotal", "true" if self.with_total else "false"))
        return params

    @classmethod
    def from_params(cls, pairs: Iterable[Tuple[str, str]]) -> "QueryInput":
        """Inverse of `to_params`; unknown keys are ignored."""
        query = cls()
        for key, value in pairs:
            if key == "where":
                query.where = value
            elif key == "sort":
                query.sort.append(value)
            elif key == "expand":
                query.expand = value
            elif key == "limit":
                query.limit = int(value)
            elif key == "offset":
                query.offset = int(value)
            elif key == "withTotal":
                if value not in ("true", "false"):
                    raise ValueError(f"withTotal must be 'true' or 'false', got {value!r}")
                query.with_total = value == "true"
        query.__post_init__()
        return query


def encode_query(query: QueryInput | None) -> QueryPairs:
    if query is None:
        return []
    return query.to_params()


def urlencode_query(query: QueryInput | None) -> str:
    """Render as a URL query string (spaces become ``+``)."""
    return urlencode(encode_query(query))
