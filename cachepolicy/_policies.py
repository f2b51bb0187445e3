from __future__ import annotations

import logging
import typing as t
from dataclasses import replace

from ._directives import generate_header
from ._headers import ResponseHeaders
from ._options import PolicyOptions
from ._timespan import Duration, to_timespan

__all__ = ("CacheControl", "custom", "disable", "private", "public", "secure")

logger = logging.getLogger(__name__)


class CacheControl:
    """
    Middleware writing a fixed Cache-Control policy to every response.

    The header value is computed once, when the policy is built, so an
    unparseable duration fails here rather than on the first request.
    Every call afterwards only writes the precomputed strings.

    A policy is invoked with the ``(request, response, call_next)``
    signature used by Express-style pipelines. The request is ignored;
    the response must implement `ResponseHeaders`.

    Args:
        options: The policy configuration. Defaults to `PolicyOptions()`.

    Example:
        ```python
        from cachepolicy import MappingHeaders, public

        policy = public("10m")
        headers: dict[str, str] = {}
        policy.apply(MappingHeaders(headers))
        # headers == {"Cache-Control": "public, max-age=600, s-maxage=600"}
        ```
    """

    def __init__(self, options: PolicyOptions | None = None) -> None:
        self.options = options if options is not None else PolicyOptions()
        # fail on a bad default even when ttl makes it unused
        to_timespan(self.options.default_ttl)
        self.directives = tuple(generate_header(self.options))
        self.header_value = ", ".join(self.directives)
        self.set_pragma = self.options.no_cache

        logger.debug(
            "Built cache policy: cache_control=%r pragma=%s",
            self.header_value,
            self.set_pragma,
        )

    def apply(self, headers: ResponseHeaders) -> None:
        """Write Cache-Control and set or clear Pragma on `headers`."""
        headers.set_header("Cache-Control", self.header_value)
        if self.set_pragma:
            headers.set_header("Pragma", "no-cache")
        else:
            # drop a stale no-cache pragma
            headers.remove_header("Pragma")

    def __call__(self, request: t.Any, response: ResponseHeaders, call_next: t.Callable[[], t.Any]) -> None:
        self.apply(response)
        call_next()

    def __repr__(self) -> str:
        return f"CacheControl({self.header_value!r})"


def custom(options: PolicyOptions | None = None, **fields: t.Any) -> CacheControl:
    """
    Build a policy from explicit options.

    Keyword arguments override the matching fields of `options`, so
    ``custom(no_cache=True)`` is a shorthand for
    ``custom(PolicyOptions(no_cache=True))``.
    """
    options = options if options is not None else PolicyOptions()
    if fields:
        options = replace(options, **fields)
    return CacheControl(options)


def disable() -> CacheControl:
    """
    Forbid caching anywhere.

    ``Cache-Control: no-cache, no-store, must-revalidate, proxy-revalidate``
    and ``Pragma: no-cache``.
    """
    return custom(no_cache=True, must_revalidate=True, proxy_revalidate=True)


def secure() -> CacheControl:
    """
    Forbid caching and content transformation for sensitive responses.

    ``Cache-Control: private, no-cache, no-store, must-revalidate, no-transform``
    and ``Pragma: no-cache``.
    """
    return custom(scope="private", no_cache=True, must_revalidate=True, no_transform=True)


def public(ttl: Duration | None = None, options: PolicyOptions | None = None) -> CacheControl:
    """
    Allow any cache to store the response for `ttl`.

    Shared caches get the same lifetime through ``s-maxage``.

    Args:
        ttl: Lifetime of the response. Defaults to ``options.default_ttl``.
            Replaces any ``ttl`` or ``sttl`` set in `options`.
        options: Extra flags, such as ``must_revalidate``. Never modified.
    """
    options = options if options is not None else PolicyOptions()
    resolved = ttl if ttl is not None else options.default_ttl
    return custom(options, scope="public", ttl=resolved, sttl=resolved)


def private(ttl: Duration | None = None, options: PolicyOptions | None = None) -> CacheControl:
    """
    Allow only the client to store the response for `ttl`.

    Args:
        ttl: Lifetime of the response. Defaults to ``options.default_ttl``.
            Replaces any ``ttl`` set in `options`.
        options: Extra flags, such as ``must_revalidate``. Never modified.
    """
    options = options if options is not None else PolicyOptions()
    return custom(options, scope="private", ttl=ttl if ttl is not None else options.default_ttl)
