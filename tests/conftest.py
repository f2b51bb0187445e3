from __future__ import annotations

from typing import Optional, Union

import pytest


class MockResponse:
    """In-memory response exposing the `ResponseHeaders` capability."""

    def __init__(self, headers: dict[str, str] | None = None) -> None:
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.calls: list[tuple[str, str]] = []

    def set_header(self, name: str, value: str) -> None:
        self.calls.append(("set", name))
        self.headers[name.lower()] = value

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower())

    def remove_header(self, name: str) -> None:
        self.calls.append(("remove", name))
        self.headers.pop(name.lower(), None)


def parse_cache_control(value: str) -> dict[str, Union[int, str, bool]]:
    """Split a Cache-Control value into ``{directive: value}``, numbers as ints."""
    directives: dict[str, Union[int, str, bool]] = {}
    for part in value.split(","):
        key, sep, raw = part.strip().partition("=")
        if not sep:
            directives[key] = True
            continue
        raw = raw.strip()
        directives[key] = int(raw) if raw.lstrip("-").isdigit() else raw
    return directives


@pytest.fixture()
def response() -> MockResponse:
    return MockResponse()
