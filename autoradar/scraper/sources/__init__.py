from autoradar.scraper.client import HttpClient
from autoradar.scraper.sources.base import SourceStrategy
from autoradar.scraper.sources.mercadolivre import MercadoLivreSource
from autoradar.scraper.sources.socarrao import SoCarraoSource


def default_sources(client: HttpClient | None = None) -> list[SourceStrategy]:
    client = client or HttpClient()
    return [
        MercadoLivreSource(client),
        SoCarraoSource(client),
    ]


__all__ = [
    "MercadoLivreSource",
    "SoCarraoSource",
    "SourceStrategy",
    "default_sources",
]
