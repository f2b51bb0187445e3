from __future__ import annotations

import typing as t
from dataclasses import dataclass

from ._timespan import Duration

__all__ = ("DEFAULT_TTL", "PolicyOptions", "Scope")

Scope = t.Literal["public", "private"]

DEFAULT_TTL: Duration = "1h"
"""Freshness lifetime used when a policy does not name one (one hour)."""


@dataclass(frozen=True)
class PolicyOptions:
    """
    Configuration of a single cache policy.

    Every field is optional; an empty ``PolicyOptions()`` describes a
    privately cacheable response with a one hour lifetime.

    Durations can be given as seconds (``3600``, ``"3600"``), as a
    human-readable string (``"1h"``, ``"30 mins"``, ``"2 days"``) or as a
    `datetime.timedelta`.

    Examples:
    --------
    >>> # Cacheable by browsers and CDNs for ten minutes
    >>> options = PolicyOptions(scope="public", ttl="10m", sttl="10m")

    >>> # Never cache
    >>> options = PolicyOptions(no_cache=True, must_revalidate=True)

    >>> # Shorter default for everything built from these options
    >>> options = PolicyOptions(default_ttl=60)
    """

    scope: Scope | None = None
    """
    Who may store the response: ``"public"`` for any cache, ``"private"`` for the
    client only. When unset and caching is enabled, ``private`` is emitted.
    """

    no_cache: bool = False
    """When True, emits ``no-cache, no-store`` and ``Pragma: no-cache`` instead of a lifetime."""

    must_revalidate: bool = False
    """When True, emits ``must-revalidate``."""

    proxy_revalidate: bool = False
    """When True, emits ``proxy-revalidate``."""

    no_transform: bool = False
    """When True, emits ``no-transform``."""

    ttl: Duration | None = None
    """Lifetime for any cache (``max-age``). Falls back to `default_ttl`."""

    sttl: Duration | None = None
    """Lifetime for shared caches (``s-maxage``). Only emitted when set."""

    default_ttl: Duration = DEFAULT_TTL
    """Lifetime used when `ttl` is unset."""
