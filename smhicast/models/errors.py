"""Exceptions raised outside the pure derivation/rendering core."""


class SmhiClientError(Exception):
    """Raised when the SMHI API returns an error or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FeedDecodeError(Exception):
    """Raised when a forecast payload does not have the expected shape."""


class EmptySeriesError(Exception):
    """Raised when a report is requested for a series with no instants."""
