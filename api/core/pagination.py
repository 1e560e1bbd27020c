"""
Turn the raw `start` / `end` query parameters into an offset and a limit.

`start` is the number of rows to skip (default 0), `end` the maximum number
of rows to return (absent = no limit). Nothing here looks at the store: how
many rows actually come back is decided by LIMIT/OFFSET at query time.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import InvertedOrder, MissingParameters, ParseError

START_KEY = "start"
END_KEY = "end"

_DIGITS = re.compile(r"[0-9]+")

# LIMIT and OFFSET are bigint in Postgres.
MAX_INDEX = 2**63 - 1


@dataclass(frozen=True)
class Pagination:
    offset: int = 0
    limit: int | None = None


def _to_index(raw: str) -> int:
    # int() alone would also take "+1", " 1" and "1_000".
    if _DIGITS.fullmatch(raw) is None:
        raise ValueError(f"invalid digit found in string: {raw!r}")
    value = int(raw)
    if value > MAX_INDEX:
        raise ValueError(f"number too large to fit in target type: {raw!r}")
    return value


def _parse(params: Mapping[str, str], key: str) -> int | None:
    raw = params.get(key)
    if raw is None:
        return None
    try:
        return _to_index(raw)
    except ValueError as exc:
        raise ParseError(key, exc) from exc


def extract_pagination(params: Mapping[str, str], *, strict: bool = False) -> Pagination:
    """
    Validate `start` / `end` from a query-parameter map.

    `strict=True` is for callers that need the older contract where both
    keys are mandatory; the HTTP routes use the default, so over HTTP only
    `ParseError` and `InvertedOrder` occur. Raises `MissingParameters`,
    `ParseError` or `InvertedOrder`; never touches I/O.
    """
    if strict:
        for key in (START_KEY, END_KEY):
            if key not in params:
                raise MissingParameters(key)

    offset = _parse(params, START_KEY)
    if offset is None:
        offset = 0
    limit = _parse(params, END_KEY)

    if limit is not None and limit < offset:
        raise InvertedOrder(offset, limit)

    return Pagination(offset=offset, limit=limit)
