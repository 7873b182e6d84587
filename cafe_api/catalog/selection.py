from __future__ import annotations

from collections.abc import Sequence

from .models import CafeQuery, CafeSelection, Catalog


def _matches(name: str, search_lower: str) -> bool:
    return search_lower in name.lower()


def select_cafes(
    names: Sequence[str],
    search: str | None = None,
    count: int | None = None,
) -> CafeSelection:
    """Filter ``names`` by ``search``, then keep at most ``count`` of them, in order."""
    if search:
        search_lower = search.lower()
        matched = [name for name in names if _matches(name, search_lower)]
    else:
        matched = list(names)

    if count is not None:
        matched = matched[:count]

    return CafeSelection(names=tuple(matched))


def run_query(catalog: Catalog, query: CafeQuery) -> CafeSelection:
    return select_cafes(catalog[query.city], search=query.search, count=query.count)
