import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Sequence

from autoradar.config import SEARCH_DEADLINE_SECONDS
from autoradar.models import Listing
from autoradar.scraper.normalizer import parse_price
from autoradar.scraper.sources.base import SourceStrategy


logger = logging.getLogger(__name__)


def filter_by_max_price(listings: Sequence[Listing], max_price: float | None) -> list[Listing]:
    if max_price is None:
        return list(listings)

    kept: list[Listing] = []
    for listing in listings:
        value = parse_price(listing.price)
        if value is not None and value <= max_price:
            kept.append(listing)
    return kept


def _price_sort_key(listing: Listing) -> tuple[bool, float]:
    value = parse_price(listing.price)
    return value is None, value if value is not None else 0.0


def sort_by_price(listings: Sequence[Listing]) -> list[Listing]:
    return sorted(listings, key=_price_sort_key)


class Aggregator:
    def __init__(
        self,
        sources: Sequence[SourceStrategy],
        *,
        deadline_seconds: float = SEARCH_DEADLINE_SECONDS,
    ) -> None:
        self._sources = list(sources)
        self._deadline_seconds = deadline_seconds

    def search_all(self, query: str, location: str, max_price: float | None = None) -> list[Listing]:
        started = time.monotonic()
        collected = self._collect(query, location)
        filtered = filter_by_max_price(collected, max_price)
        result = sort_by_price(filtered)

        logger.info(
            "Search summary: query=%r location=%r max_price=%s collected=%s returned=%s elapsed=%.2fs",
            query,
            location,
            max_price,
            len(collected),
            len(result),
            time.monotonic() - started,
        )
        return result

    def _collect(self, query: str, location: str) -> list[Listing]:
        if not self._sources:
            return []

        executor = ThreadPoolExecutor(max_workers=len(self._sources), thread_name_prefix="source")
        try:
            future_to_source = {
                executor.submit(source.search, query, location): source for source in self._sources
            }
            _done, pending = wait(future_to_source, timeout=self._deadline_seconds)
        finally:
            # a hung source must not hold the response past the deadline
            executor.shutdown(wait=False, cancel_futures=True)

        collected: list[Listing] = []
        for future, source in future_to_source.items():
            if future in pending:
                logger.warning("%s: no result within %.1fs deadline, ignoring", source.name, self._deadline_seconds)
                continue

            try:
                listings = list(future.result() or [])
            except Exception:
                logger.exception("%s: search failed", source.name)
                continue

            logger.info("%s: contributed %s listings", source.name, len(listings))
            collected.extend(listings)
        return collected
