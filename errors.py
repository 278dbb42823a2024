"""
Error taxonomy for location routing.

Construction and usage errors are raised at the offending call. An
unreachable destination is not an error; see routing.Unreachable.
"""


class RoutingError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgument(RoutingError, ValueError):
    """Negative node count, negative or non-finite weight, wrong type."""


class OutOfRange(RoutingError, IndexError):
    """Node index outside [0, node_count)."""


class ConfigError(RoutingError, ValueError):
    """Map configuration file is missing keys or holds malformed rows."""
