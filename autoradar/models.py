from dataclasses import dataclass

from autoradar.config import DEFAULT_LOCATION, DEFAULT_QUERY


@dataclass(frozen=True)
class Listing:
    title: str
    price: str               # as displayed by the source, e.g. "R$ 85.000"
    year: int                # 0 when unknown
    km: int                  # 0 when unknown
    link: str
    source: str              # e.g. "Mercado Livre", "SóCarrão (Campinas - SP)"
    image_url: str = ""


@dataclass(frozen=True)
class SearchRequest:
    query: str
    location: str
    max_price: float | None = None

    @classmethod
    def build(
        cls,
        query: str | None = None,
        location: str | None = None,
        max_price: float | None = None,
    ) -> "SearchRequest":
        query = (query or "").strip() or DEFAULT_QUERY
        location = (location or "").strip() or DEFAULT_LOCATION
        return cls(query=query, location=location, max_price=max_price)
