"""
Catalog Data Model

Immutable records for the answerable business facts (CatalogItem) and the
fallback page corpus (PageContentEntry), plus the JSON catalog loader.

The catalog ships as assistant/data/search_data.json, the same shape the
website search data uses:

    [
        {
            "title": "Paket VIP 12 Hari",
            "description": "...",
            "url": "/services#vip",
            "category": "Paket",
            "keywords": ["vip", "paket vip"],
            "price_numeric": 35500000,
            "is_recommended": true,
            "answer": "..."
        }
    ]
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "search_data.json"

# Categories the scorer and intent classifier recognize
CATEGORY_PAKET = "Paket"
CATEGORY_KONTAK = "Kontak"
CATEGORY_LAYANAN = "Layanan"
CATEGORY_MANASIK = "Manasik"
CATEGORY_PEMBAYARAN = "Pembayaran"
CATEGORY_SAPAAN = "Sapaan"
CATEGORY_INFORMASI = "Informasi"

KNOWN_CATEGORIES = frozenset({
    CATEGORY_PAKET, CATEGORY_KONTAK, CATEGORY_LAYANAN, CATEGORY_MANASIK,
    CATEGORY_PEMBAYARAN, CATEGORY_SAPAAN, CATEGORY_INFORMASI,
})


@dataclass(frozen=True)
class CatalogItem:
    """One answerable fact or offering."""
    title: str
    description: str
    url: str
    category: str
    keywords: Tuple[str, ...] = ()
    price_numeric: Optional[int] = None
    is_recommended: bool = False
    image_url: Optional[str] = None
    answer: Optional[str] = None
    # "catalog" for loaded entries, "page" for fallback items built from page text
    source: str = "catalog"

    @property
    def search_text(self) -> str:
        """Lower-cased title + keywords + description, the text overlap is scored on."""
        return " ".join([self.title, " ".join(self.keywords), self.description]).lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogItem":
        """
        Build an item from a raw JSON mapping.

        Raises KeyError/TypeError/ValueError for entries missing a required
        field; optional fields that are malformed are dropped instead.
        """
        keywords = data.get("keywords") or []
        if not isinstance(keywords, (list, tuple)):
            keywords = []

        price = data.get("price_numeric")
        try:
            price = int(price) if price is not None else None
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed price for catalog item {data.get('title')!r}: {price!r}")
            price = None

        return cls(
            title=str(data["title"]),
            description=str(data.get("description") or ""),
            url=str(data.get("url") or "/"),
            category=str(data["category"]),
            keywords=tuple(str(k) for k in keywords),
            price_numeric=price,
            is_recommended=bool(data.get("is_recommended", False)),
            image_url=data.get("image_url"),
            answer=data.get("answer"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["keywords"] = list(self.keywords)
        return data


@dataclass(frozen=True)
class PageContentEntry:
    """Unstructured text of one website page, searched when the catalog is weak."""
    url: str
    title: str
    headings: Tuple[str, ...] = field(default_factory=tuple)
    paragraphs: Tuple[str, ...] = field(default_factory=tuple)
    keywords: Tuple[str, ...] = field(default_factory=tuple)


def parse_catalog(entries: List[Dict[str, Any]]) -> List[CatalogItem]:
    """Convert raw entries, skipping (and logging) the ones that cannot be used."""
    items = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping catalog entry #{position}: expected an object, got {type(entry).__name__}")
            continue
        try:
            items.append(CatalogItem.from_dict(entry))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed catalog entry #{position} ({e!r})")
    return items


def load_catalog(path: Optional[str] = None) -> List[CatalogItem]:
    """
    Load the catalog from JSON.

    With no path the bundled file is used; if that file is missing or
    unreadable the assistant still works, just with an empty catalog (every
    query then goes through the page fallback). An explicitly configured path
    that cannot be read is a deployment mistake and raises ConfigurationError.
    """
    if path is None:
        try:
            with open(BUNDLED_CATALOG_PATH, encoding="utf-8") as f:
                raw = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            logger.warning(f"Bundled catalog missing or invalid ({e}), using an empty catalog")
            return []
    else:
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Cannot read assistant catalog at {path}: {e}",
                setting="ASSISTANT_CATALOG_PATH",
            )

    if not isinstance(raw, list):
        raise ConfigurationError(
            "Assistant catalog must be a JSON array of items",
            setting="ASSISTANT_CATALOG_PATH",
        )

    items = parse_catalog(raw)
    logger.info(f"Catalog loaded: {len(items)} items from {path or BUNDLED_CATALOG_PATH.name}")
    return items


def audit_catalog(items: List[CatalogItem]) -> List[str]:
    """
    Data-quality issues of a loaded catalog, prefixed with their severity.

    An empty catalog is CRITICAL: every answer would come from the page
    fallback. Problems that only weaken ranking are warnings or info.
    """
    if not items:
        return ["CRITICAL: Assistant catalog is empty"]

    issues = []
    seen = set()
    for item in items:
        if item.title in seen:
            issues.append(f"WARNING: Duplicate catalog title {item.title!r}")
        seen.add(item.title)

        if item.category not in KNOWN_CATEGORIES:
            issues.append(f"WARNING: {item.title!r} has unknown category {item.category!r}, no intent bonus applies")
        if not item.keywords:
            issues.append(f"INFO: {item.title!r} has no keywords")
        if item.category == CATEGORY_PAKET and item.price_numeric is None:
            issues.append(f"INFO: Package {item.title!r} has no price, listed last in comparisons")
    return issues
