"""Python client for the Zentral REST API."""

from ._http import TimeoutConfig
from ._version import __version__
from .client import Response, ZentralClient
from .config import ZentralConfig, get_config, load_dotenv_for_sdk
from .exceptions import (
    ArgumentError,
    ConnectionError,
    DecodeError,
    HTTPError,
    URLError,
    ZentralError,
)
from .query import ListOptions, QueryOptions, add_options
from .timestamp import Timestamp

__all__ = [
    "ArgumentError",
    "ConnectionError",
    "DecodeError",
    "HTTPError",
    "ListOptions",
    "QueryOptions",
    "Response",
    "TimeoutConfig",
    "Timestamp",
    "URLError",
    "ZentralClient",
    "ZentralConfig",
    "ZentralError",
    "__version__",
    "add_options",
    "get_config",
    "load_dotenv_for_sdk",
]
