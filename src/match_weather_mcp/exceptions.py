"""Errors raised while talking to external geocoding and weather providers.

These never leave the public resolvers; they are caught there and turned into
a ``ProviderError`` outcome.
"""


class EnrichmentError(Exception):
    """Base exception for all provider failures"""


class ProviderConnectionError(EnrichmentError):
    """Raised when the provider cannot be reached"""


class ProviderTimeoutError(EnrichmentError):
    """Raised when a request to the provider times out"""


class ProviderAPIError(EnrichmentError):
    """Raised when the provider answers with a 4xx/5xx status"""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ProviderResponseError(EnrichmentError):
    """Raised when the provider body is not JSON of the expected shape"""


class ProviderRequestError(EnrichmentError):
    """Raised when a request cannot be built from the given input"""
