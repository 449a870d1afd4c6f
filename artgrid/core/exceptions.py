"""Custom exception hierarchy."""

from __future__ import annotations


class DataError(Exception):
    """Base exception for all library errors."""

    pass


class ProviderError(DataError):
    """Error from external data provider."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(ProviderError):
    """A page could not be fetched or parsed.

    Covers network failures, non-2xx responses, undecodable bodies and
    payloads that do not match the expected page shape.
    """

    pass


class RateLimitError(TransportError):
    """Provider rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class ValidationError(DataError):
    """Data validation failure."""

    pass


class SelectionInProgressError(DataError):
    """A selection walk is already running for this grid."""

    pass
