from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

Catalog = Mapping[str, tuple[str, ...]]

SEPARATOR = ","


def make_catalog(cafes_by_city: Mapping[str, Iterable[str]]) -> Catalog:
    """Freeze a city -> names mapping into a read-only catalog, keeping name order."""
    return MappingProxyType({city: tuple(names) for city, names in cafes_by_city.items()})


class CafeQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1)
    count: int | None = Field(default=None, ge=0, description="Max cafés to return; None means all")
    search: str | None = Field(default=None, description="Case-insensitive name substring")


class CafeSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...] = ()

    def render(self) -> str:
        return SEPARATOR.join(self.names)
