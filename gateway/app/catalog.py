"""
Static product catalog: product name -> {reviews, metadata}.
Read-only, loaded once per process.
"""
import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import ValidationError
from .models import CatalogEntry

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
PRODUCTS_PATH = os.getenv("PRODUCTS_PATH", str(BASE_DIR / "data" / "products.json"))


@lru_cache(maxsize=4)
def load_catalog(path: str = PRODUCTS_PATH) -> dict[str, CatalogEntry]:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error(f"[Catalog] Error loading product data from {path}: {e}")
        return {}

    catalog = {}
    for name, entry in raw.items():
        try:
            catalog[name] = CatalogEntry.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"[Catalog] Skipping malformed product '{name}': {e}")
    return catalog


def get_product(product_name: str) -> Optional[CatalogEntry]:
    return load_catalog().get(product_name)


def product_names() -> list[str]:
    return list(load_catalog().keys())
