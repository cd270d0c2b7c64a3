TRANSPORT_ERROR_KINDS = frozenset({"timeout", "connection", "dns"})


class ScrapeError(Exception):
    error_type = "scrape_error"

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        html: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        # body of the error response, when the server sent one
        self.html = html


class NotFound(ScrapeError):
    error_type = "not_found"


class Blocked(ScrapeError):
    error_type = "blocked"


class NetworkError(ScrapeError):
    error_type = "network_error"

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        html: str | None = None,
        error_kind: str | None = None,
    ) -> None:
        super().__init__(message, url=url, status_code=status_code, html=html)
        self.error_kind = error_kind

    @property
    def is_transport(self) -> bool:
        # no HTTP response was received
        return self.error_kind in TRANSPORT_ERROR_KINDS


class LayoutMismatch(ScrapeError):
    error_type = "layout_mismatch"


class FieldExtractionError(ScrapeError):
    error_type = "field_extraction_error"
