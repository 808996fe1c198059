"""Error kinds surfaced to relay callers as JSON bodies."""

from typing import Optional


class RelayError(Exception):
    """Base class for errors that map onto a fixed HTTP status and label."""

    status_code: int = 500
    error: str = "Internal Server Error"
    # Whether `details` is part of the response body
    expose_details: bool = False

    def __init__(self, details: Optional[str] = None):
        self.details = details
        super().__init__(details or self.error)


class InvalidUrlError(RelayError):
    """Raised when the proxy target is not an absolute http(s) URL."""

    status_code = 400
    error = "Invalid URL"


class InvalidFormatError(RelayError):
    """Raised when the requested format code is not in the format table."""

    status_code = 400
    error = "Invalid format"


class ProxyFailedError(RelayError):
    """Raised when the upstream of a proxied request cannot be reached."""

    status_code = 502
    error = "Proxy Failed"
    expose_details = True
