from functools import lru_cache

from autoradar.aggregator import Aggregator
from autoradar.scraper.sources import default_sources


@lru_cache(maxsize=1)
def get_aggregator() -> Aggregator:
    return Aggregator(default_sources())
