from bs4 import BeautifulSoup, Tag

from autoradar.models import Listing
from autoradar.scraper.cascade import Cascade, extract_image_url
from autoradar.scraper.normalizer import (
    clean_text,
    extract_odometer,
    extract_year,
    sanitize_title,
)
from autoradar.scraper.sources.base import SourceStrategy, extract_each


BASE_URL = "https://carros.mercadolivre.com.br"
SEARCH_URL = "https://lista.mercadolivre.com.br"
SOURCE_NAME = "Mercado Livre"
PRICE_ON_REQUEST = "Sob consulta"

CONTAINERS = Cascade(
    "li.ui-search-layout__item",
    "div.ui-search-result__wrapper",
    "div.andes-card",
    "div.poly-card",
)
TITLES = Cascade(
    "a.poly-component__title",
    "h2.ui-search-item__title",
    "h3.poly-component__title-wrapper",
)
LINKS = Cascade(
    "a.poly-component__title",
    "a.ui-search-link",
    "a.ui-search-item__group__element",
)
PRICES = Cascade(
    "div.poly-price__current span.andes-money-amount__fraction",
    "span.andes-money-amount__fraction",
    "span.price-tag-fraction",
)
IMAGES = Cascade(
    "img.poly-component__picture",
    "img.ui-search-result-image__element",
)
ATTRIBUTES = Cascade(
    "li.poly-attributes_list__item",
    "li.poly-attributes-list__item",
    "li.ui-search-card-attributes__attribute",
)


def _slug(value: str) -> str:
    return "-".join(clean_text(value).lower().split(" "))


def _attributes_text(item: Tag) -> str:
    return " ".join(clean_text(node.get_text(" ", strip=True)) for node in ATTRIBUTES.select(item))


class MercadoLivreSource(SourceStrategy):
    generic_locations = frozenset({"", "sp", "brasil", "brazil"})
    containers = CONTAINERS

    @property
    def name(self) -> str:
        return SOURCE_NAME

    def build_urls(self, query: str, location: str) -> list[str]:
        term = _slug(query)
        if self.is_generic_location(location):
            friendly = f"{BASE_URL}/{term}"
        else:
            friendly = f"{BASE_URL}/{_slug(location)}/{term}"
        return [friendly, f"{SEARCH_URL}/{term}"]

    def extract_listings(self, soup: BeautifulSoup, items: list[Tag]) -> list[Listing]:
        return extract_each(items, self._extract_item, self.name)

    def _extract_item(self, item: Tag) -> Listing | None:
        title = TITLES.text(item)
        link = LINKS.attr(item, "href")
        if not title or not link:
            return None

        fraction = PRICES.text(item)
        attributes = _attributes_text(item)

        return Listing(
            title=sanitize_title(title),
            price=f"R$ {fraction}" if fraction else PRICE_ON_REQUEST,
            year=extract_year(attributes),
            km=extract_odometer(attributes),
            link=link,
            source=self.name,
            image_url=extract_image_url(item, IMAGES),
        )
