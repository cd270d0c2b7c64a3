import logging
import re
from urllib.parse import quote_plus

from bs4 import BeautifulSoup, Tag

from autoradar.models import Listing
from autoradar.scraper.cascade import Cascade, extract_image_url
from autoradar.scraper.errors import FieldExtractionError
from autoradar.scraper.normalizer import (
    ODOMETER_UNKNOWN,
    YEAR_UNKNOWN,
    clean_text,
    extract_odometer,
    extract_year,
    sanitize_title,
    split_year_from_query,
)
from autoradar.scraper.sources.base import SourceStrategy, extract_each


logger = logging.getLogger(__name__)

BASE_URL = "https://www.socarrao.com.br"
SOURCE_NAME = "SóCarrão"
PRICE_ON_REQUEST = "Sob consulta"

LD_JSON_SELECTOR = 'script[type="application/ld+json"]'
DETAIL_URL_RE = re.compile(r'"url"\s*:\s*"(https://www\.socarrao\.com\.br/[^"]+)"')
MODEL_PATH_RE = re.compile(r"[^a-z0-9 ]")

CARDS = Cascade(
    "div.vehicle-card",
    "article.vehicle-card",
    "[data-testid=vehicle-card]",
)
BRANDS = Cascade(".brand-model-formatter__brand")
MODELS = Cascade(".brand-model-formatter__model")
VERSIONS = Cascade(".vehicle-card__right--version", ".vehicle-card__version")
FALLBACK_TITLES = Cascade("h2", "h3")
PRICES = Cascade(
    ".vehicle-card__right--price .title-semibold",
    ".vehicle-card__priceSection--value .title-semibold",
    ".vehicle-card__price",
)
SPECS = Cascade(".vehicle-card__right--specs li", ".vehicle-card__specs li")
IMAGES = Cascade("img")
LOCATIONS = Cascade(
    ".vehicle-card__left--location span",
    ".vehicle-card__right--location span",
)


def extract_detail_links(soup: BeautifulSoup) -> list[str]:
    """Collect detail URLs from the JSON-LD ItemList, in document order.

    Result cards carry no anchors; the page lists the canonical detail URLs in a
    schema.org ItemList instead, in the same order as the cards.
    """
    links: list[str] = []
    for script in soup.select(LD_JSON_SELECTOR):
        payload = script.string or script.get_text()
        if "ItemList" not in payload or "itemListElement" not in payload:
            continue
        links.extend(match.group(1) for match in DETAIL_URL_RE.finditer(payload))
    return links


def pair_cards_with_links(cards: list[Tag], links: list[str]) -> list[tuple[Tag, str]]:
    # Positional only: card i is assumed to be the vehicle behind link i.
    if len(cards) != len(links):
        logger.warning(
            "%s: card/link count mismatch (cards=%s links=%s); pairing first %s by position",
            SOURCE_NAME,
            len(cards),
            len(links),
            min(len(cards), len(links)),
        )
    return list(zip(cards, links))


def _model_path(query: str) -> str:
    cleaned = MODEL_PATH_RE.sub("", query.lower())
    return "/".join(cleaned.split())


def _search_url(*terms: str | None) -> str:
    text = " ".join(term for term in terms if term)
    return f"{BASE_URL}/buscar?q={quote_plus(clean_text(text))}"


def _title(card: Tag) -> str:
    parts = [BRANDS.text(card), MODELS.text(card), VERSIONS.text(card)]
    title = " ".join(part for part in parts if part)
    return title or FALLBACK_TITLES.text(card)


def _price(card: Tag) -> str:
    price = PRICES.text(card)
    if not price:
        return PRICE_ON_REQUEST
    if "R$" not in price:
        return f"R$ {price}"
    return price


def _year_and_km(card: Tag) -> tuple[int, int]:
    specs = [clean_text(node.get_text(" ", strip=True)) for node in SPECS.select(card)]
    if not specs:
        return YEAR_UNKNOWN, ODOMETER_UNKNOWN

    # first spec reads "2023/2024" (manufacture/model year)
    year = extract_year(specs[0].split("/")[0])
    km_spec = next((spec for spec in specs if "km" in spec.lower()), "")
    return year, extract_odometer(km_spec)


class SoCarraoSource(SourceStrategy):
    containers = CARDS

    @property
    def name(self) -> str:
        return SOURCE_NAME

    def build_urls(self, query: str, location: str) -> list[str]:
        clean_query, year = split_year_from_query(query)

        if not self.is_generic_location(location):
            return [_search_url(clean_query, year, clean_text(location))]

        search = _search_url(clean_query, year)
        model_path = _model_path(clean_query)
        if not model_path:
            return [search]

        friendly = f"{BASE_URL}/{model_path}"
        if year:
            friendly = f"{friendly}/{year}"
        return [friendly, search]

    def extract_listings(self, soup: BeautifulSoup, items: list[Tag]) -> list[Listing]:
        links = extract_detail_links(soup)
        logger.info("%s: visual cards=%s json-ld links=%s", self.name, len(items), len(links))

        pairs = pair_cards_with_links(items, links)
        return extract_each(pairs, lambda pair: self._extract_card(*pair), self.name)

    def _extract_card(self, card: Tag, link: str) -> Listing | None:
        title = _title(card)
        if not title:
            raise FieldExtractionError("card has no title", url=link)

        year, km = _year_and_km(card)
        location = LOCATIONS.text(card)
        source = f"{self.name} ({location})" if location else self.name

        return Listing(
            title=sanitize_title(title),
            price=_price(card),
            year=year,
            km=km,
            link=link,
            source=source,
            image_url=extract_image_url(card, IMAGES),
        )
