__all__ = ("CacheControlError", "ParseError", "ValidationError")


class CacheControlError(Exception):
    """Base class for errors raised while building a cache policy."""


class ParseError(CacheControlError):
    """A duration string could not be parsed."""


class ValidationError(CacheControlError):
    """A duration has an unsupported type or value."""
