from __future__ import annotations

import typing as t
from typing import MutableMapping, Optional

__all__ = ("MappingHeaders", "ResponseHeaders")


@t.runtime_checkable
class ResponseHeaders(t.Protocol):
    """
    Header capability a response must expose to receive a cache policy.

    Each integration wraps its response object in an adapter
    implementing this interface.
    """

    def set_header(self, name: str, value: str) -> None: ...

    def get_header(self, name: str) -> Optional[str]: ...

    def remove_header(self, name: str) -> None: ...


class MappingHeaders:
    """
    Adapt a mutable header mapping to `ResponseHeaders`.

    Works with a plain ``dict`` as well as with case-insensitive header
    containers such as Starlette's ``MutableHeaders``. Names are compared
    case-insensitively, and removing a missing header does nothing.

    Example:
        ```python
        headers: dict[str, str] = {"Pragma": "no-cache"}
        MappingHeaders(headers).remove_header("pragma")
        # headers == {}
        ```
    """

    def __init__(self, headers: MutableMapping[str, str]) -> None:
        self.headers = headers

    def _matching_keys(self, name: str) -> list[str]:
        return [key for key in self.headers if key.lower() == name.lower()]

    def set_header(self, name: str, value: str) -> None:
        self.remove_header(name)
        self.headers[name] = value

    def get_header(self, name: str) -> Optional[str]:
        for key in self._matching_keys(name):
            return self.headers[key]
        return None

    def remove_header(self, name: str) -> None:
        for key in self._matching_keys(name):
            del self.headers[key]

    def __repr__(self) -> str:
        return f"MappingHeaders({self.headers!r})"
