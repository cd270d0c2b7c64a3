import logging
from abc import ABC, abstractmethod
from typing import Callable, Sequence, TypeVar

from bs4 import BeautifulSoup, Tag

from autoradar.models import Listing
from autoradar.scraper.cascade import Cascade
from autoradar.scraper.client import FetchedPage, HttpClient
from autoradar.scraper.debug import save_debug_html
from autoradar.scraper.errors import (
    Blocked,
    LayoutMismatch,
    NetworkError,
    NotFound,
    ScrapeError,
)
from autoradar.scraper.headers import browser_headers
from autoradar.scraper.normalizer import clean_text


logger = logging.getLogger(__name__)

BLOCK_MARKERS = (
    "captcha",
    "segurança",
    "security check",
    "access denied",
    "just a moment",
    "attention required",
    "are you a robot",
    "robot check",
)

T = TypeVar("T")


def is_block_page(soup: BeautifulSoup) -> bool:
    title = clean_text(soup.title.get_text()).lower() if soup.title else ""
    if any(marker in title for marker in BLOCK_MARKERS):
        return True

    # only captcha wording counts in the description
    description_tag = soup.find("meta", attrs={"name": "description"})
    description = clean_text(description_tag.get("content")).lower() if description_tag else ""
    return "captcha" in description


def extract_each(items: Sequence[T], extract: Callable[[T], Listing | None], source: str) -> list[Listing]:
    out: list[Listing] = []
    skipped = 0
    for index, item in enumerate(items):
        try:
            listing = extract(item)
        except Exception as exc:
            skipped += 1
            logger.debug("%s: skipping item %s: %s", source, index, exc)
            continue
        if listing is None or not listing.title or not listing.link:
            skipped += 1
            continue
        out.append(listing)

    if skipped:
        logger.info("%s: skipped %s of %s items", source, skipped, len(items))
    return out


class SourceStrategy(ABC):
    generic_locations: frozenset[str] = frozenset({"", "brasil", "brazil"})
    # one node per listing on a result page
    containers: Cascade

    def __init__(self, client: HttpClient | None = None) -> None:
        self._client = client or HttpClient()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source label, e.g. 'Mercado Livre'."""

    @abstractmethod
    def build_urls(self, query: str, location: str) -> list[str]:
        """Return candidate URLs, most specific first."""

    @abstractmethod
    def extract_listings(self, soup: BeautifulSoup, items: list[Tag]) -> list[Listing]:
        """Turn the located item nodes into listings."""

    def is_generic_location(self, location: str | None) -> bool:
        return (location or "").strip().lower() in self.generic_locations

    def search(self, query: str, location: str) -> list[Listing]:
        try:
            return self._search(query, location)
        except NotFound as exc:
            logger.info("%s: nothing found at %s", self.name, exc.url)
        except Blocked as exc:
            logger.warning("%s: blocked at %s (%s)", self.name, exc.url, exc)
        except ScrapeError as exc:
            logger.warning("%s: %s at %s: %s", self.name, exc.error_type, exc.url, exc)
        except Exception:
            logger.exception("%s: unexpected scrape failure", self.name)
        return []

    def _search(self, query: str, location: str) -> list[Listing]:
        urls = self.build_urls(query, location)
        last_error: ScrapeError | None = None

        for attempt, url in enumerate(urls, start=1):
            logger.info("%s: target url (%s/%s) %s", self.name, attempt, len(urls), url)
            try:
                listings = self.scrape_url(url)
            except NetworkError as exc:
                if exc.is_transport:
                    raise
                last_error = exc
                logger.warning("%s: %s for %s, trying next url", self.name, exc, url)
                continue
            except LayoutMismatch as exc:
                last_error = exc
                logger.warning("%s: no item containers on %s, trying next url", self.name, url)
                continue

            if listings:
                logger.info("%s: extracted %s listings from %s", self.name, len(listings), url)
                return listings
            last_error = None
            logger.info("%s: zero listings extracted from %s", self.name, url)

        if last_error is not None:
            raise last_error
        return []

    def fetch(self, url: str) -> FetchedPage:
        try:
            page = self._client.get_page(url, headers=browser_headers())
        except ScrapeError as exc:
            if exc.html is not None and exc.status_code is not None:
                save_debug_html(self.name, exc.html, exc.status_code)
            raise
        save_debug_html(self.name, page.html, page.status_code)
        return page

    def scrape_url(self, url: str) -> list[Listing]:
        page = self.fetch(url)
        soup = BeautifulSoup(page.html, "html.parser")

        if is_block_page(soup):
            raise Blocked("block page detected", url=page.final_url)

        items = self.containers.select(soup)
        if not items:
            raise LayoutMismatch("no item containers matched", url=page.final_url)

        logger.info("%s: found %s item containers", self.name, len(items))
        return self.extract_listings(soup, items)
