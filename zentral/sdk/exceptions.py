"""Exception classes for the Zentral SDK.

This module defines the errors raised by SDK operations. Every error
inherits from :class:`ZentralError`, so applications can catch all SDK
failures with a single except clause, or branch on the concrete class to
decide on a retry policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class ZentralError(Exception):
    """Base exception for all Zentral SDK errors."""

    pass


class ArgumentError(ZentralError, ValueError):
    """Raised when a method argument is invalid.

    Argument errors are raised locally, before any request is built, so an
    invalid identifier or a missing request never reaches the network.

    Attributes
    ----------
    argument : str
        Name of the offending argument
    reason : str
        Why the value was rejected
    """

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"{argument} is invalid because {reason}")


class URLError(ZentralError):
    """Raised when a URL cannot be parsed or resolved.

    Attributes
    ----------
    url : str
        The URL or path that was rejected
    reason : str
        Description of the problem
    """

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class ConnectionError(ZentralError):
    """Raised when the request fails before an HTTP response is received.

    This covers refused connections, DNS failures, protocol errors and
    timeouts, including the per-call deadline passed to
    :meth:`ZentralClient.do`.

    Attributes
    ----------
    url : str
        The URL that failed
    original_error : Exception
        The underlying transport exception
    """

    def __init__(self, url: str, original_error: Exception):
        self.url = url
        self.original_error = original_error
        super().__init__(f"Failed to connect to {url}: {original_error}")


class HTTPError(ZentralError):
    """Raised when the API answers with a status code outside 200-299.

    Attributes
    ----------
    response : httpx.Response
        The response that caused the error
    message : str
        The response body, if any. Empty when the body was empty or could
        not be read.
    """

    def __init__(self, response: httpx.Response, message: str = ""):
        self.response = response
        self.message = message
        request = response.request
        super().__init__(
            f"{request.method} {request.url}: {response.status_code} {message}".rstrip()
        )

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def body(self) -> str:
        return self.message


class DecodeError(ZentralError):
    """Raised when a successful response body cannot be decoded.

    Attributes
    ----------
    response : httpx.Response
        The response whose body could not be decoded
    original_error : Exception
        The JSON or validation error
    """

    def __init__(self, response: httpx.Response, original_error: Exception):
        self.response = response
        self.original_error = original_error
        request = response.request
        super().__init__(
            f"Could not decode response to {request.method} {request.url}: {original_error}"
        )
