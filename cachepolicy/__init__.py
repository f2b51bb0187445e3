from cachepolicy._directives import generate_header as generate_header
from cachepolicy._exceptions import (
    CacheControlError as CacheControlError,
    ParseError as ParseError,
    ValidationError as ValidationError,
)
from cachepolicy._headers import MappingHeaders as MappingHeaders, ResponseHeaders as ResponseHeaders
from cachepolicy._options import DEFAULT_TTL as DEFAULT_TTL, PolicyOptions as PolicyOptions, Scope as Scope
from cachepolicy._policies import (
    CacheControl as CacheControl,
    custom as custom,
    disable as disable,
    private as private,
    public as public,
    secure as secure,
)
from cachepolicy._timespan import Duration as Duration, parse_duration as parse_duration, to_timespan as to_timespan

__all__ = (
    # Policies
    "CacheControl",
    "custom",
    "disable",
    "secure",
    "public",
    "private",
    ## Configuration
    "PolicyOptions",
    "Scope",
    "DEFAULT_TTL",
    ## Directives
    "generate_header",
    "Duration",
    "to_timespan",
    "parse_duration",
    # Headers
    "ResponseHeaders",
    "MappingHeaders",
    # Errors
    "CacheControlError",
    "ParseError",
    "ValidationError",
)
