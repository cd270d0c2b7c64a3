import pytest
from fastapi.testclient import TestClient

from autoradar.aggregator import Aggregator
from autoradar.api.deps import get_aggregator
from autoradar.main import app
from autoradar.models import Listing


class RecordingSource:
    name = "Recording"

    def __init__(self, listings: list[Listing]) -> None:
        self.listings = listings
        self.calls: list[tuple[str, str]] = []

    def search(self, query: str, location: str) -> list[Listing]:
        self.calls.append((query, location))
        return list(self.listings)


LISTINGS = [
    Listing(
        title="Honda Civic EXL",
        price="R$ 98.900",
        year=2019,
        km=54_321,
        link="https://carro.mercadolivre.com.br/MLB-1111",
        source="Mercado Livre",
        image_url="https://http2.mlstatic.com/civic.webp",
    ),
    Listing(
        title="Honda Civic LXR",
        price="R$ 72.500",
        year=2015,
        km=110_000,
        link="https://www.socarrao.com.br/veiculo/civic-222",
        source="SóCarrão (Campinas - SP)",
    ),
]


@pytest.fixture
def source() -> RecordingSource:
    return RecordingSource(LISTINGS)


@pytest.fixture
def client(source: RecordingSource):
    app.dependency_overrides[get_aggregator] = lambda: Aggregator([source])
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_search_uses_defaults_and_sorts_by_price(client: TestClient, source: RecordingSource) -> None:
    response = client.get("/api/cars/search")

    assert response.status_code == 200
    assert source.calls == [("Civic", "SP")]
    body = response.json()
    assert [item["price"] for item in body] == ["R$ 72.500", "R$ 98.900"]
    assert body[0] == {
        "title": "Honda Civic LXR",
        "price": "R$ 72.500",
        "year": 2015,
        "km": 110_000,
        "link": "https://www.socarrao.com.br/veiculo/civic-222",
        "source": "SóCarrão (Campinas - SP)",
        "image_url": "",
    }


def test_search_applies_max_price(client: TestClient, source: RecordingSource) -> None:
    response = client.get("/api/cars/search", params={"query": "Honda Civic", "location": "Campinas", "maxPrice": 80000})

    assert response.status_code == 200
    assert source.calls == [("Honda Civic", "Campinas")]
    assert [item["title"] for item in response.json()] == ["Honda Civic LXR"]


def test_search_rejects_negative_max_price(client: TestClient) -> None:
    response = client.get("/api/cars/search", params={"maxPrice": -1})

    assert response.status_code == 422
