"""
Topic catalog loading.

TOPIC_CATALOG_PATH may point at a JSON list of {"name", "category"} objects;
otherwise the built-in catalog below is used.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from generation.schemas import CatalogEntry

log = logging.getLogger(__name__)

TOPIC_CATALOG_PATH = os.getenv("TOPIC_CATALOG_PATH")

DEFAULT_CATALOG = [
    ("Java", "backend"),
    ("Python", "backend"),
    ("Node.js", "backend"),
    ("C#", "backend"),
    ("Go", "backend"),
    ("Rust", "backend"),
    ("PHP", "backend"),
    ("JavaScript", "frontend"),
    ("TypeScript", "frontend"),
    ("React", "frontend"),
    ("Vue", "frontend"),
    ("Angular", "frontend"),
    ("HTML", "frontend"),
    ("CSS", "frontend"),
    ("Svelte", "frontend"),
    ("Swift", "mobile"),
    ("Kotlin", "mobile"),
    ("React Native", "mobile"),
    ("Flutter", "mobile"),
]


def load_catalog(path: Optional[str] = None) -> List[CatalogEntry]:
    """Read the catalog file, or fall back to DEFAULT_CATALOG."""
    path = path or TOPIC_CATALOG_PATH
    if not path:
        return [CatalogEntry(name=n, category=c) for n, c in DEFAULT_CATALOG]

    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Topic catalog must be a JSON list: {path}")

    catalog = [CatalogEntry(**item) for item in raw]
    seen = set()
    for entry in catalog:
        key = entry.name.lower()
        if key in seen:
            raise ValueError(f"Duplicate topic name in catalog: '{entry.name}'")
        seen.add(key)
    log.info(f"[Catalog] Loaded {len(catalog)} topics from {path}")
    return catalog
