from autoradar.scraper.cascade import Cascade, extract_image_url
from autoradar.scraper.client import FetchedPage, HttpClient
from autoradar.scraper.errors import (
    Blocked,
    FieldExtractionError,
    LayoutMismatch,
    NetworkError,
    NotFound,
    ScrapeError,
)
from autoradar.scraper.normalizer import (
    TITLE_PLACEHOLDER,
    YEAR_UNKNOWN,
    extract_odometer,
    extract_year,
    parse_price,
    sanitize_title,
)

__all__ = [
    "Blocked",
    "Cascade",
    "FetchedPage",
    "FieldExtractionError",
    "HttpClient",
    "LayoutMismatch",
    "NetworkError",
    "NotFound",
    "ScrapeError",
    "TITLE_PLACEHOLDER",
    "YEAR_UNKNOWN",
    "extract_image_url",
    "extract_odometer",
    "extract_year",
    "parse_price",
    "sanitize_title",
]
