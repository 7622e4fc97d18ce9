"""Keyword heuristics over free text: bedroom labels and amenity tags."""

import re

AMENITY_KEYWORDS: tuple[str, ...] = (
    "gym", "fitness", "pool", "parking", "laundry", "wifi", "study", "rooftop",
)

AMENITY_FALLBACK = "Contact for details"
BEDROOM_FALLBACK = "1-4 BR"

_BEDROOM_RE = re.compile(r"(\d+)\s*br|\bstudio\b|(\d+)\s*bedroom", re.IGNORECASE)


def match_amenities(text: str) -> list[str]:
    """Capitalized keywords found in text, in keyword-table order."""
    lower = text.lower()
    return [kw.capitalize() for kw in AMENITY_KEYWORDS if kw in lower]


def extract_amenities(text: str) -> list[str]:
    return match_amenities(text) or [AMENITY_FALLBACK]


def extract_bedrooms(text: str) -> str:
    """'Studio', '<N> BR' or the generic fallback label.

    The first match in the text decides, so "2 BR or studio" is "2 BR".
    """
    match = _BEDROOM_RE.search(text)
    if not match:
        return BEDROOM_FALLBACK
    if "studio" in match.group(0).lower():
        return "Studio"
    return f"{match.group(1) or match.group(2)} BR"
