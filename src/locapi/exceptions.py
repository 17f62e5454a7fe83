"""Custom exception classes for the locapi library."""

import httpx


class LocApiError(Exception):
    """Base exception class for all locapi errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            # Prefer response info if available
            url_info = getattr(getattr(self.response, "request", None), "url", "N/A")
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class BuildError(LocApiError):
    """Raised when a request URL cannot be built from the given parameters.

    Only the search route can fail this way: a search without any query,
    filter, attribute selection, pagination or sort is rejected before any
    network call is attempted.
    """

    def __init__(self, message: str):
        super().__init__(message, response=None)


class ConfigInvariantError(LocApiError):
    """Raised when a built URL does not start with the default loc.gov authority.

    This indicates a defect in the URL builder rather than a runtime condition.
    """

    def __init__(self, message: str):
        super().__init__(message, response=None)


class DecodeError(LocApiError):
    """Represents a response body that is not JSON or does not fit the route's model."""


class TransportError(LocApiError):
    """Represents a failure while performing the HTTP request itself."""


class APIError(TransportError):
    """Represents a non-success (non-2xx) HTTP status returned by loc.gov."""


class NotFoundError(APIError):
    """Represents a resource not found error (404 Not Found)."""


class RateLimitError(APIError):
    """Represents hitting the API rate limit (429 Too Many Requests)."""


class TimeoutError(TransportError):
    """Represents a request timeout error.

    This error is raised when an HTTP request does not complete within the configured timeout.
    """

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class NetworkError(TransportError):
    """Represents a network connection error (e.g., DNS resolution failure, connection refused)."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)
