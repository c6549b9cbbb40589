"""Typed exceptions for generators, line seeking and rule application.

Exhaustion of a generator is never an error; it is reported through the
``has_value`` flag of ``Generator.next``.  The classes below cover the
genuine failure modes.
"""


class FakenewsError(Exception):
    """Base class for all package errors."""


class GeneratorError(FakenewsError):
    """Base class for generator related errors."""


class EmptySourceError(GeneratorError):
    """Raised when a wrapped source yields nothing, even after a restart."""


class SourceReadError(GeneratorError, OSError):
    """Raised when the underlying source fails for reasons other than EOF."""


class LineSeekError(FakenewsError, ValueError):
    """Base class for line seeking errors."""


class NoLinesError(LineSeekError):
    """Raised when a source contains no lines."""


class LineOutOfRangeError(LineSeekError):
    """Raised when a requested line number exceeds the line count."""


class UnsupportedWhenceError(LineSeekError):
    """Raised when ``seek_line`` receives an unsupported ``whence``."""


class RuleError(FakenewsError):
    """Raised when a rule cannot be applied to a seed value."""


class BindError(RuleError):
    """Raised when a value cannot be bound onto a target field."""
