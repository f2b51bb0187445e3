from __future__ import annotations

import typing as t

from cachepolicy._headers import MappingHeaders
from cachepolicy._policies import CacheControl

try:
    import fastapi
except ImportError as e:
    raise ImportError(
        "fastapi is required to use cachepolicy.fastapi module. "
        "Please install cachepolicy with the 'fastapi' extra, "
        "e.g., 'pip install cachepolicy[fastapi]'."
    ) from e


def cache(policy: CacheControl) -> t.Any:
    """
    Apply a cache policy to the responses of a FastAPI route.

    Args:
        policy: The policy to apply, e.g. ``public("10m")`` or ``disable()``.

    Returns:
        A dependency that writes Cache-Control (and Pragma) to the response.

    Examples:
        >>> from fastapi import FastAPI
        >>> from cachepolicy import disable, public
        >>> from cachepolicy.fastapi import cache
        >>>
        >>> app = FastAPI()
        >>>
        >>> # Static assets - cacheable anywhere for a day
        >>> @app.get("/static/logo.png", dependencies=[cache(public("1d"))])
        >>> async def get_logo():
        ...     return {"image": "logo.png"}
        >>>
        >>> # Sensitive data - no caching
        >>> @app.get("/api/secrets", dependencies=[cache(disable())])
        >>> async def get_secrets():
        ...     return {"secret": "value"}
    """

    def add_cache_headers(response: fastapi.Response) -> None:
        """Add Cache-Control headers to the response."""
        policy.apply(MappingHeaders(response.headers))

    return fastapi.Depends(add_cache_headers)
