from typing import List

from fastapi import APIRouter, Depends, Query

from autoradar.aggregator import Aggregator
from autoradar.api.deps import get_aggregator
from autoradar.config import DEFAULT_LOCATION, DEFAULT_QUERY
from autoradar.models import SearchRequest
from autoradar.schemas.listing import ListingOut

router = APIRouter(prefix="/api/cars", tags=["cars"])


@router.get("/search", response_model=List[ListingOut])
def search_cars(
    query: str = Query(DEFAULT_QUERY, max_length=120),
    location: str = Query(DEFAULT_LOCATION, max_length=80),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    aggregator: Aggregator = Depends(get_aggregator),
) -> List[ListingOut]:
    request = SearchRequest.build(query, location, max_price)
    listings = aggregator.search_all(request.query, request.location, request.max_price)
    return [ListingOut.from_listing(item) for item in listings]
