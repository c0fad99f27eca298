"""Dialect registry: maps dialect names to placeholder formats.

Lets callers pick a format by the name of their database rather than by
format object, and lets new dialects be added without editing masonQL::

    from masonql.format.registry import PlaceholderRegistry
    from masonql.format.placeholder import NumberedFormat

    PlaceholderRegistry.register_format("duckdb", NumberedFormat(prefix="$"))

    builder = StatementBuilder().for_dialect("duckdb")
"""

from __future__ import annotations

from typing import ClassVar

from masonql.errors import ConfigurationError
from masonql.format.placeholder import AT_P, COLON, DOLLAR, QUESTION, PlaceholderFormat
from masonql.utils.logging import get_logger

logger = get_logger(__name__)


class PlaceholderRegistry:
    """Registry mapping dialect names to :class:`PlaceholderFormat` instances."""

    _formats: ClassVar[dict[str, PlaceholderFormat]] = {}

    @classmethod
    def register_format(cls, name: str, fmt: PlaceholderFormat) -> None:
        """Register ``fmt`` under ``name``, replacing any previous entry.

        Args:
            name: Dialect name (case-insensitive, e.g. ``"postgres"``).
            fmt: The placeholder format that dialect expects.
        """
        cls._formats[name.lower()] = fmt

    @classmethod
    def get(cls, name: str) -> PlaceholderFormat:
        """Return the format registered for ``name``.

        Raises:
            ConfigurationError: If no format is registered for ``name``.
        """
        fmt = cls._formats.get(name.lower())
        if fmt is None:
            registered = cls.registered_dialects()
            raise ConfigurationError(
                f"Unsupported dialect: '{name}'. Registered dialects: {registered}.",
                name=name,
            )
        logger.debug("placeholder_format_resolved", dialect=name, format=repr(fmt))
        return fmt

    @classmethod
    def registered_dialects(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(cls._formats)


PlaceholderRegistry.register_format("postgres", DOLLAR)
PlaceholderRegistry.register_format("sqlite", QUESTION)
PlaceholderRegistry.register_format("mysql", QUESTION)
PlaceholderRegistry.register_format("oracle", COLON)
PlaceholderRegistry.register_format("mssql", AT_P)
