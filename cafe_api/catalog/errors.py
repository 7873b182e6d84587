from __future__ import annotations


class CafeQueryError(Exception):
    """Base class for rejected ``/cafe`` queries. ``message`` is shown to the client."""

    message: str = "bad request"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnknownCityError(CafeQueryError):
    message = "unknown city"


class BadCountError(CafeQueryError):
    message = "incorrect count"


class CatalogLoadError(Exception):
    """Raised at startup when a catalog source cannot be read."""
