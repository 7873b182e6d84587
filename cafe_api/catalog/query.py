from __future__ import annotations

import re

from .errors import BadCountError, UnknownCityError
from .models import CafeQuery, Catalog

# ASCII digits only: no sign, no whitespace, no "_" separators
_COUNT_RE = re.compile(r"[0-9]+")

# Largest count accepted; anything above is out of range, like a 64-bit parse
MAX_COUNT = 2**63 - 1


def _parse_count(raw: str) -> int:
    if not _COUNT_RE.fullmatch(raw):
        raise BadCountError()
    # int() refuses strings past the interpreter's digit limit
    if len(raw.lstrip("0")) > len(str(MAX_COUNT)):
        raise BadCountError()
    try:
        value = int(raw)
    except ValueError:
        raise BadCountError() from None
    if value > MAX_COUNT:
        raise BadCountError()
    return value


def parse_query(
    catalog: Catalog,
    city: str | None,
    count: str | None = None,
    search: str | None = None,
) -> CafeQuery:
    """
    Validate raw ``/cafe`` parameters against ``catalog``.

    Checks run in order and stop at the first failure:
    the city must be a registered key, then ``count`` (when given)
    must be a non-negative integer. ``search`` is never rejected.
    """
    if not city or city not in catalog:
        raise UnknownCityError()

    parsed_count = _parse_count(count) if count is not None else None

    return CafeQuery(city=city, count=parsed_count, search=search or None)
