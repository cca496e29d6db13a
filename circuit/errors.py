"""Error taxonomy for trace checking.

Every failure is fatal for the current run and nothing is retried. A
constraint violation is not an exception: it is reported through
evaluator.RelationCheck.
"""

from primitives.errors import DecodeError, TraceCheckError


class ConfigurationError(TraceCheckError, ValueError):
    """Column schema is inconsistent (missing marker column, unknown shift, ...)."""


class TraceIOError(TraceCheckError, OSError):
    """Trace input files could not be read."""


__all__ = [
    "TraceCheckError",
    "ConfigurationError",
    "TraceIOError",
    "DecodeError",
]
