import re
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Iterable, Union
from urllib.parse import quote

from httpx import URL, Headers, Request

from ..models.exceptions import InvalidArgumentError, UnresolvedPathParametersError
from ._optional_query import OptionalQuery
from .constants import NULL_LITERAL

_PLACEHOLDER = re.compile(r"\{([^{}/]+)\}")


def to_invariant_string(value: Any) -> str:
    """Render a parameter value independently of locale settings."""
    if isinstance(value, Enum):
        return to_invariant_string(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, float):
        return repr(value)
    return str(value)


def path_parameter_names(path_template: str) -> set[str]:
    """Lowercased names of the {name} placeholders in a path template."""
    return {name.lower() for name in _PLACEHOLDER.findall(path_template)}


def _escape(value: str) -> str:
    return quote(value, safe="")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(
        value, (str, bytes, bytearray, memoryview, dict)
    )


class RequestBuilder:
    """Assembles an ``httpx.Request`` from a path template and parameters.

    Path parameters fill ``{name}`` placeholders (names are case-insensitive),
    query parameters and headers are kept in insertion order and may repeat.

    Examples:
        ```python
        builder = RequestBuilder("GET", "/v0.1/checkouts/{id}", "https://api.sumup.com")
        builder.add_path("id", "space id")
        builder.add_query("status", ["open", "closed"])
        request = builder.build()
        # https://api.sumup.com/v0.1/checkouts/space%20id?status=open&status=closed
        ```
    """

    def __init__(
        self, method: str, path_template: str, base_url: Union[URL, str]
    ) -> None:
        self._method = method.upper()
        self._path_template = path_template
        self._base_url = URL(str(base_url))
        self._path_parameters: dict[str, str] = {}
        self._query: list[tuple[str, str]] = []
        self._headers: list[tuple[str, str]] = []

    @property
    def method(self) -> str:
        return self._method

    @property
    def path_template(self) -> str:
        return self._path_template

    def add_path(self, name: str, value: Any) -> "RequestBuilder":
        if value is None:
            raise InvalidArgumentError(name)
        self._path_parameters[name.lower()] = to_invariant_string(value)
        return self

    def add_query(self, name: str, value: Any) -> "RequestBuilder":
        if isinstance(value, OptionalQuery):
            if not value.is_set:
                return self
            if value.is_null:
                self._query.append((name, NULL_LITERAL))
                return self
            value = value.value

        self._query.extend((name, entry) for entry in self._expand(value))
        return self

    def add_header(self, name: str, value: Any) -> "RequestBuilder":
        if isinstance(value, OptionalQuery):
            raise InvalidArgumentError(
                name, f"Header '{name}' does not accept an OptionalQuery value."
            )
        self._headers.extend((name, entry) for entry in self._expand(value))
        return self

    def build(self) -> Request:
        url = self._base_url.join(self._render_path())
        if self._query:
            query = "&".join(
                f"{_escape(key)}={_escape(value)}" for key, value in self._query
            )
            url = url.copy_with(query=query.encode("ascii"))

        headers = Headers(
            [
                (key.encode("utf-8"), value.encode("utf-8"))
                for key, value in self._headers
            ]
        )
        return Request(self._method, url, headers=headers)

    def _render_path(self) -> str:
        missing: list[str] = []

        def substitute(match: "re.Match[str]") -> str:
            name = match.group(1)
            value = self._path_parameters.get(name.lower())
            if value is None:
                missing.append(name)
                return match.group(0)
            return _escape(value)

        path = _PLACEHOLDER.sub(substitute, self._path_template)
        if missing:
            raise UnresolvedPathParametersError(self._path_template, missing)
        return path

    @staticmethod
    def _expand(value: Any) -> list[str]:
        if value is None:
            return []
        if _is_sequence(value):
            return [to_invariant_string(entry) for entry in value if entry is not None]
        return [to_invariant_string(value)]
