from pydantic import BaseModel

from autoradar.models import Listing


class ListingOut(BaseModel):
    title: str
    price: str
    year: int
    km: int
    link: str
    source: str
    image_url: str

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingOut":
        return cls(
            title=listing.title,
            price=listing.price,
            year=listing.year,
            km=listing.km,
            link=listing.link,
            source=listing.source,
            image_url=listing.image_url,
        )
