from pathlib import Path
from typing import Callable

import pytest

from autoradar.scraper.client import FetchedPage
from autoradar.scraper.errors import NotFound


FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeClient:
    def __init__(self, pages: dict[str, FetchedPage | Exception]) -> None:
        self.pages = pages
        self.requested: list[str] = []
        self.headers: list[dict[str, str] | None] = []

    def get_page(self, url: str, *, headers: dict[str, str] | None = None, timeout: float = 15) -> FetchedPage:
        self.requested.append(url)
        self.headers.append(headers)
        outcome = self.pages.get(url)
        if outcome is None:
            raise NotFound("HTTP 404", url=url)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def load_page() -> Callable[[str, str], FetchedPage]:
    def _load(name: str, url: str) -> FetchedPage:
        html = (FIXTURES_DIR / name).read_text(encoding="utf-8")
        return FetchedPage(url=url, final_url=url, status_code=200, html=html)

    return _load


@pytest.fixture
def fake_client() -> Callable[[dict[str, FetchedPage | Exception]], FakeClient]:
    return FakeClient
