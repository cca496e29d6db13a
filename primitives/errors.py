"""Base exception types shared by every layer."""


class TraceCheckError(Exception):
    """Base class for all trace checking failures."""


class DecodeError(TraceCheckError, ValueError):
    """A field element could not be decoded from its on-disk encoding."""
