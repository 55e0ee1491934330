"""Query string options for list endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import URLError


def is_empty(value: Any) -> bool:
    """Return True for the values an optional field is left at when unset."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


class QueryOptions(BaseModel):
    """Base class for options encoded in a request query string.

    Fields left at ``None``, zero or empty are not sent at all, so "not set"
    never reaches the API as a zero value.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def query_params(self) -> dict[str, str]:
        params = {}
        for key, value in self.model_dump(by_alias=True).items():
            if is_empty(value):
                continue
            if isinstance(value, bool):
                value = "true"
            params[key] = str(value)
        return params


class ListOptions(QueryOptions):
    """Pagination options accepted by every ``list`` method.

    Attributes
    ----------
    limit : int, optional
        Maximum number of items to return
    offset : int, optional
        Position of the first returned item in the complete result set
    """

    limit: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)


def add_options(path: str, *options: QueryOptions | None) -> str:
    """Merge query options into the query string of ``path``.

    Options are applied in order, so a key set by a later option replaces
    the value set by an earlier one, or already present in ``path``, without
    changing its position in the query string. Repeated keys of ``path``
    that no option sets are kept.

    Parameters
    ----------
    path : str
        Relative path, possibly with an existing query string
    *options : QueryOptions or None
        Options to merge. ``None`` entries are skipped.

    Returns
    -------
    str
        The path with the merged query string. Unchanged if no option
        contributes a parameter.

    Raises
    ------
    URLError
        If ``path`` cannot be parsed
    """
    try:
        parts = urlsplit(path)
        query = parse_qsl(parts.query, keep_blank_values=True)
    except ValueError as exc:
        raise URLError(path, str(exc)) from exc

    updated = False
    for opt in options:
        if opt is None:
            continue
        for key, value in opt.query_params().items():
            query = _set_param(query, key, value)
            updated = True

    if not updated:
        return path
    return urlunsplit(parts._replace(query=urlencode(query)))


def _set_param(query: list[tuple[str, str]], key: str, value: str) -> list[tuple[str, str]]:
    # The first pair of a repeated key takes the new value, the others are dropped.
    # Pairs of other keys, repeated or not, are kept as they are.
    result = []
    replaced = False
    for k, v in query:
        if k != key:
            result.append((k, v))
        elif not replaced:
            result.append((key, value))
            replaced = True
    if not replaced:
        result.append((key, value))
    return result
