from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import CatalogLoadError
from .models import Catalog, make_catalog

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("city", "name")

DEFAULT_CAFES: dict[str, list[str]] = {
    "moscow": [
        "Мир кофе",
        "Сладкоежка",
        "Кофе и завтраки",
        "Сытый студент",
        "Ложка и вилка",
    ],
    "tula": [
        "Тульский пряник",
        "Самовар",
    ],
}


def _load_csv(path: Path) -> dict[str, list[str]]:
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise CatalogLoadError(f"cannot read catalog {path}: {exc}") from exc

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise CatalogLoadError(f"catalog {path} is missing columns: {', '.join(missing)}")

    # City keys are registered lowercase; names keep their original spelling
    df["city"] = df["city"].str.strip().str.lower()
    df["name"] = df["name"].str.strip()
    df = df[(df["city"] != "") & (df["name"] != "")]

    cafes: dict[str, list[str]] = {}
    for city, group in df.groupby("city", sort=False):
        cafes[str(city)] = group["name"].tolist()
    return cafes


def build_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """
    Build the immutable catalog once at startup.

    Reads ``config.catalog_path`` when set, otherwise uses ``DEFAULT_CAFES``.
    Row order within a city is preserved.
    """
    if config.catalog_path is None:
        cafes = DEFAULT_CAFES
        source = "built-in"
    else:
        cafes = _load_csv(config.catalog_path)
        source = str(config.catalog_path)

    catalog = make_catalog(cafes)
    logger.info(
        "Loaded %s catalog: %d cities, %d cafés",
        source,
        len(catalog),
        sum(len(names) for names in catalog.values()),
    )
    return catalog
