from __future__ import annotations

import logging

from ._options import PolicyOptions
from ._timespan import to_timespan

__all__ = ("generate_header",)

logger = logging.getLogger(__name__)

SCOPES = ("public", "private")


def generate_header(options: PolicyOptions) -> list[str]:
    """
    Build the ordered list of Cache-Control directives for `options`.

    The scope token, when present, always comes first. Caching is either
    disabled (``no-cache, no-store``) or enabled with a lifetime
    (``max-age`` and optionally ``s-maxage``), never both. Revalidation
    and transformation flags follow regardless of the branch.

    Raises:
        ParseError: if a duration used by the caching branch is an unparseable
            string (`ttl`, `sttl`, or `default_ttl` when `ttl` is unset).
        ValidationError: if one of those durations has an unsupported type or
            is not finite.

    Examples:
        >>> generate_header(PolicyOptions(scope="public", ttl=60, sttl=60))
        ['public', 'max-age=60', 's-maxage=60']
        >>> generate_header(PolicyOptions(no_cache=True, must_revalidate=True))
        ['no-cache', 'no-store', 'must-revalidate']
    """
    directives: list[str] = []

    if options.scope in SCOPES:
        directives.append(options.scope)
    elif options.scope is not None:
        logger.warning("Ignoring unknown cache scope: scope=%r", options.scope)

    if options.no_cache:
        directives.append("no-cache")
        directives.append("no-store")
    else:
        # Never let a response become publicly cacheable by omission
        if not directives:
            directives.append("private")

        ttl = options.ttl if options.ttl is not None else options.default_ttl
        directives.append(f"max-age={to_timespan(ttl)}")

        if options.sttl is not None:
            directives.append(f"s-maxage={to_timespan(options.sttl)}")

    if options.must_revalidate:
        directives.append("must-revalidate")

    if options.proxy_revalidate:
        directives.append("proxy-revalidate")

    if options.no_transform:
        directives.append("no-transform")

    return directives
