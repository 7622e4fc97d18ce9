"""Pure extraction over a rendered page's document tree.

The scrapers hand in a BeautifulSoup tree of the browser-rendered HTML, so
everything here is testable with a literal HTML string.
"""

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Comment, Tag

from app.mappers.field_extractors import match_amenities
from app.schemas.property import (
    MAX_AMENITIES,
    MAX_IMAGES,
    MAX_LISTINGS,
    MAX_PRICES,
    PageExtract,
    RawListing,
)

_IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "webp")
_IMAGE_SUBJECTS = ("apartment", "exterior", "interior")
_PRICE_RE = re.compile(r"\$[\d,]+")
_NON_TEXT_TAGS = frozenset({"script", "style", "noscript", "template"})

_CARD = '[data-testid="property-card"]'
_CARD_ADDRESS = '[data-testid="property-card-addr"]'
_CARD_PRICE = '[data-testid="property-card-price"]'
_CARD_DETAILS = '[data-testid="property-card-details"]'


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _text_nodes(root: Tag) -> list[str]:
    nodes = []
    for node in root.find_all(string=True):
        if isinstance(node, Comment) or node.parent.name in _NON_TEXT_TAGS:
            continue
        nodes.append(str(node))
    return nodes


def _element_text(element: Tag) -> str:
    """Concatenated text of an element and its descendants, like DOM textContent."""
    return "".join(_text_nodes(element))


def extract_images(soup: BeautifulSoup, base_url: str) -> list[str]:
    images: list[str] = []
    for img in soup.find_all("img", src=True):
        raw = img["src"]
        if not any(ext in raw for ext in _IMAGE_EXTENSIONS):
            continue
        src = urljoin(base_url, raw)
        if any(subject in src for subject in _IMAGE_SUBJECTS):
            images.append(src)
            if len(images) == MAX_IMAGES:
                break
    return images


def extract_prices(soup: BeautifulSoup) -> list[str]:
    # Every element is scanned, so a price split across inline tags is still whole
    found: list[str] = []
    for element in soup.find_all(True):
        if element.name in _NON_TEXT_TAGS:
            continue
        found.extend(_PRICE_RE.findall(_element_text(element)))
    return _unique(found)[:MAX_PRICES]


def extract_page_amenities(soup: BeautifulSoup) -> list[str]:
    body = soup.body or soup
    text = _element_text(body)
    return _unique(match_amenities(text))[:MAX_AMENITIES]


def extract_property_page(soup: BeautifulSoup, base_url: str) -> PageExtract:
    return PageExtract(
        images=extract_images(soup, base_url),
        prices=extract_prices(soup),
        amenities=extract_page_amenities(soup),
    )


def extract_listing_cards(
    soup: BeautifulSoup, base_url: str, limit: int = MAX_LISTINGS
) -> list[RawListing]:
    """Address/price/image/details for each listing card.

    Cards without both an address and a price are skipped.
    """
    listings: list[RawListing] = []
    for card in soup.select(_CARD):
        address_el = card.select_one(_CARD_ADDRESS)
        price_el = card.select_one(_CARD_PRICE)
        if address_el is None or price_el is None:
            continue

        img = card.find("img")
        src = img.get("src") if img else None
        details_el = card.select_one(_CARD_DETAILS)
        listings.append(
            RawListing(
                address=address_el.get_text().strip(),
                price=price_el.get_text().strip(),
                image=urljoin(base_url, src) if src else None,
                details=details_el.get_text().strip() if details_el else "",
            )
        )
        if len(listings) == limit:
            break
    return listings
