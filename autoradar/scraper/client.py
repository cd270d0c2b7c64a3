import logging
from dataclasses import dataclass

import requests
from bs4 import UnicodeDammit

from autoradar.config import REQUEST_TIMEOUT_SECONDS
from autoradar.scraper.errors import Blocked, NetworkError, NotFound
from autoradar.scraper.headers import browser_headers


logger = logging.getLogger(__name__)

DNS_ERROR_MARKERS = (
    "nameresolutionerror",
    "failed to resolve",
    "temporary failure in name resolution",
    "no address associated with hostname",
)

BLOCKED_STATUS_CODES = {403, 429}


@dataclass(frozen=True)
class FetchedPage:
    url: str
    final_url: str
    status_code: int
    html: str


def _is_dns_error(exc: Exception) -> bool:
    text = str(exc).lower()
    return any(marker in text for marker in DNS_ERROR_MARKERS)


def _decode_html(response: requests.Response) -> str:
    current_encoding = (response.encoding or "").lower()
    if current_encoding in {"", "iso-8859-1", "latin-1", "cp1252"}:
        return UnicodeDammit(response.content, is_html=True).unicode_markup or response.text
    return response.text


class HttpClient:
    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def get_page(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ) -> FetchedPage:
        try:
            response = self._session.get(
                url,
                headers=headers or browser_headers(),
                timeout=timeout,
                allow_redirects=True,
            )
        except requests.Timeout as exc:
            raise NetworkError(str(exc), url=url, error_kind="timeout") from exc
        except requests.ConnectionError as exc:
            kind = "dns" if _is_dns_error(exc) else "connection"
            raise NetworkError(str(exc), url=url, error_kind=kind) from exc
        except requests.RequestException as exc:
            raise NetworkError(str(exc), url=url, error_kind="connection") from exc

        status_code = response.status_code
        html = _decode_html(response)
        message = f"HTTP {status_code}"

        if status_code == 404:
            raise NotFound(message, url=url, status_code=status_code, html=html)

        if status_code in BLOCKED_STATUS_CODES:
            raise Blocked(message, url=url, status_code=status_code, html=html)

        if status_code >= 500:
            raise NetworkError(message, url=url, status_code=status_code, html=html, error_kind="http_5xx")

        if status_code >= 400:
            raise NetworkError(message, url=url, status_code=status_code, html=html, error_kind="http_4xx")

        return FetchedPage(
            url=url,
            final_url=str(response.url or url),
            status_code=status_code,
            html=html,
        )
