from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _catalog_path_from_env() -> Path | None:
    raw = os.getenv("CAFE_CATALOG_PATH", "").strip()
    return Path(raw) if raw else None


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for building the café catalog.

    ``catalog_path`` points at a CSV file with ``city`` and ``name`` columns.
    When it is ``None`` the built-in catalog is used.
    """

    catalog_path: Path | None = field(default_factory=_catalog_path_from_env)
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


DEFAULT_CATALOG_CONFIG = CatalogConfig()
