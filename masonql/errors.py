"""Custom exception hierarchy for masonQL.

All public errors inherit from MasonQLError so callers can catch the base
class for any masonQL-specific failure.  ``MustSqlError`` is the exception
raised by the ``must_sql`` convenience wrappers.
"""
from __future__ import annotations


class MasonQLError(Exception):
    """Base exception for all masonQL errors."""


class StructuralError(MasonQLError):
    """Raised when a fragment is missing a required constituent at render time.

    Construction is purely accumulative, so shape problems (a CASE with no
    WHEN clause, an UPDATE with no table) surface only when rendering.

    Args:
        message: Human-readable description.
        clause: The clause being rendered when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class PredicateError(StructuralError):
    """Raised when a predicate container holds a value its operator rejects.

    Args:
        message: Human-readable description.
        column: The offending column key.
    """

    def __init__(self, message: str, column: str | None = None) -> None:
        super().__init__(message, clause="WHERE")
        self.column = column


class PlaceholderCountError(MasonQLError):
    """Raised when the placeholders in a SQL string do not match its args.

    Args:
        placeholders: Number of placeholder tokens found.
        args: Number of bound argument values supplied.
    """

    def __init__(self, placeholders: int, args: int) -> None:
        super().__init__(
            f"{placeholders} placeholder(s) in SQL but {args} argument(s) supplied."
        )
        self.placeholder_count = placeholders
        self.arg_count = args


class ConfigurationError(MasonQLError):
    """Raised when builder configuration refers to something unknown.

    Args:
        message: Human-readable description.
        name: The unknown configuration key (e.g. a dialect name).
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class RunnerNotSetError(MasonQLError):
    """Raised when a statement is executed without a runner attached."""

    def __init__(self) -> None:
        super().__init__("cannot run; no runner set (call run_with first)")


class MustSqlError(RuntimeError):
    """Raised by ``must_sql`` when rendering fails.

    Not a :class:`MasonQLError`: it signals a programming mistake at a call
    site that promised the SQL was valid, and is not meant to be handled.
    The original render error is available as ``__cause__``.
    """
