"""Exception types raised while talking to the AnimeTosho feed."""


class FeedError(Exception):
    """Base exception for feed failures."""


class FeedTransportError(FeedError):
    """The request did not complete or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FeedDecodeError(FeedError):
    """The response body was not a JSON array of feed entries."""
