"""
Comparison Synthesizer

Builds a side-by-side package table for "bandingkan paket" style questions by
sniffing features out of the catalog descriptions.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .catalog import CatalogItem, CATEGORY_PAKET

PACKAGE_TIERS = ("Reguler", "VIP", "Eksklusif")

_HOTEL_STARS = re.compile(r"bintang\s*(\d)", re.IGNORECASE)
_DURATION = re.compile(r"(\d+)\s*hari", re.IGNORECASE)

# substring -> bonus tour label
BONUS_TOURS = (
    ("thaif", "City Tour Thaif"),
    ("taif", "City Tour Thaif"),
    ("turki", "Tour Turki"),
    ("dubai", "Tour Dubai"),
)


@dataclass(frozen=True)
class ComparisonFeature:
    label: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class ComparisonEntry:
    name: str
    price: Optional[str]
    features: Tuple[ComparisonFeature, ...] = field(default_factory=tuple)
    description: str = ""
    url: str = ""
    is_recommended: bool = False

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "price": self.price,
            "features": [f.to_dict() for f in self.features],
            "description": self.description,
            "url": self.url,
            "is_recommended": self.is_recommended,
        }


@dataclass(frozen=True)
class ComparisonTable:
    packages: Tuple[ComparisonEntry, ...]

    def to_dict(self) -> Dict:
        return {"packages": [p.to_dict() for p in self.packages]}


def format_price(price: Optional[int]) -> Optional[str]:
    """
    Human-readable price in millions of rupiah.

    Examples:
        >>> format_price(28500000)
        "Rp 28.5 Juta"
    """
    if price is None or price <= 0:
        return None
    return f"Rp {price / 1_000_000:.1f} Juta"


def sniff_features(description: str) -> List[ComparisonFeature]:
    """Hotel rating, duration, meal plan and bonus tour, in that order."""
    text = description.lower()
    features = []

    stars = _HOTEL_STARS.search(text)
    if stars:
        features.append(ComparisonFeature("Hotel", f"Bintang {stars.group(1)}"))

    duration = _DURATION.search(text)
    if duration:
        features.append(ComparisonFeature("Durasi", f"{duration.group(1)} Hari"))

    if "makan 3x" in text:
        meal = "3x Sehari Prasmanan" if "prasmanan" in text else "3x Sehari"
        features.append(ComparisonFeature("Makan", meal))
    elif "prasmanan" in text:
        features.append(ComparisonFeature("Makan", "Prasmanan"))

    for fragment, label in BONUS_TOURS:
        if fragment in text:
            features.append(ComparisonFeature("Bonus", label))
            break

    return features


def package_tier(item: CatalogItem) -> Optional[str]:
    """The tier named in a package title, if any."""
    if item.category != CATEGORY_PAKET:
        return None
    title = item.title.lower()
    for tier in PACKAGE_TIERS:
        if re.search(rf"\b{tier.lower()}\b", title):
            return tier
    return None


class ComparisonSynthesizer:

    def build(self, catalog: Sequence[CatalogItem]) -> Optional[ComparisonTable]:
        """Tier packages ascending by price (unpriced last); None when there are none."""
        packages = [item for item in catalog if package_tier(item)]
        if not packages:
            return None

        packages.sort(key=lambda item: (item.price_numeric is None, item.price_numeric or 0))
        return ComparisonTable(packages=tuple(
            ComparisonEntry(
                name=item.title,
                price=format_price(item.price_numeric),
                features=tuple(sniff_features(item.description)),
                description=item.description,
                url=item.url,
                is_recommended=item.is_recommended,
            )
            for item in packages
        ))
