from __future__ import annotations

import logging
import typing as t
from typing import Optional

from cachepolicy._policies import CacheControl, private

HEADERS_ENCODING = "iso-8859-1"

# Configure logger for this module
logger = logging.getLogger(__name__)


class _ASGIScope(t.TypedDict, total=False):
    """ASGI HTTP scope type."""

    type: str
    asgi: dict[str, str]
    http_version: str
    method: str
    scheme: str
    path: str
    query_string: bytes
    root_path: str
    headers: list[tuple[bytes, bytes]]
    server: tuple[str, int | None] | None
    client: tuple[str, int] | None
    state: dict[str, t.Any]
    extensions: dict[str, t.Any]


_Scope = _ASGIScope
_Message = t.Dict[str, t.Any]
_Receive = t.Callable[[], t.Awaitable[_Message]]
_Send = t.Callable[[_Message], t.Awaitable[None]]
_ASGIApp = t.Callable[[_Scope, _Receive, _Send], t.Awaitable[None]]


class ASGIHeaders:
    """
    `ResponseHeaders` over the raw header list of an ASGI
    ``http.response.start`` message.
    """

    def __init__(self, raw: list[tuple[bytes, bytes]]) -> None:
        self.raw = raw

    def _is(self, key: bytes, name: str) -> bool:
        return key.decode(HEADERS_ENCODING).lower() == name.lower()

    def set_header(self, name: str, value: str) -> None:
        self.remove_header(name)
        self.raw.append((name.lower().encode(HEADERS_ENCODING), value.encode(HEADERS_ENCODING)))

    def get_header(self, name: str) -> Optional[str]:
        for key, value in self.raw:
            if self._is(key, name):
                return value.decode(HEADERS_ENCODING)
        return None

    def remove_header(self, name: str) -> None:
        self.raw[:] = [(key, value) for key, value in self.raw if not self._is(key, name)]


class CacheControlMiddleware:
    """
    ASGI middleware that writes a cache policy to every HTTP response.

    The policy is applied when the wrapped application starts its
    response, replacing any Cache-Control or Pragma header the application
    set itself. Lifespan and websocket scopes are passed through untouched.

    The middleware keeps no per-request state, so a single instance can
    serve concurrent requests.

    Args:
        app: The ASGI application to wrap.
        policy: The policy to apply. Defaults to `private()`, i.e.
            ``Cache-Control: private, max-age=3600``.

    Example:
        ```python
        from cachepolicy import public
        from cachepolicy.asgi import CacheControlMiddleware

        app = CacheControlMiddleware(app=my_asgi_app, policy=public("10m"))
        ```
    """

    def __init__(self, app: _ASGIApp, policy: CacheControl | None = None) -> None:
        self.app = app
        self.policy = policy if policy is not None else private()

        logger.info(
            "Initialized CacheControlMiddleware with cache_control=%r, pragma=%s",
            self.policy.header_value,
            self.policy.set_pragma,
        )

    async def __call__(self, scope: _Scope, receive: _Receive, send: _Send) -> None:
        """
        Handle an ASGI request.

        Args:
            scope: The ASGI scope dictionary.
            receive: The ASGI receive callable.
            send: The ASGI send callable.
        """
        if scope["type"] != "http":
            logger.debug("Skipping non-HTTP request: type=%s", scope["type"])
            await self.app(scope, receive, send)
            return

        async def send_with_policy(message: _Message) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                self.policy.apply(ASGIHeaders(headers))
                message = {**message, "headers": headers}
                logger.debug(
                    "Applied cache policy: method=%s path=%s status=%d",
                    scope.get("method", "UNKNOWN"),
                    scope.get("path", "/"),
                    message["status"],
                )
            await send(message)

        await self.app(scope, receive, send_with_policy)
