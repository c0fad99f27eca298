"""Placeholder formats, the dialect registry and debug rendering."""
from masonql.format.debug import debug_sql
from masonql.format.placeholder import (
    AT_P,
    COLON,
    DOLLAR,
    QUESTION,
    NumberedFormat,
    PlaceholderFormat,
    QuestionFormat,
    count_placeholders,
)
from masonql.format.registry import PlaceholderRegistry

__all__ = [
    "PlaceholderFormat",
    "QuestionFormat",
    "NumberedFormat",
    "QUESTION",
    "DOLLAR",
    "COLON",
    "AT_P",
    "count_placeholders",
    "PlaceholderRegistry",
    "debug_sql",
]
