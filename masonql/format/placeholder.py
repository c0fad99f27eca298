"""Placeholder formats: the final rewrite pass over rendered SQL.

Every fragment renders ``?`` placeholders.  A statement's configured
:class:`PlaceholderFormat` rewrites them once, after the whole statement has
been rendered.

Token rule
----------
The rewriter scans left to right and recognises:

* a lone ``?`` outside quotes: a placeholder;
* ``??``: an escaped literal ``?`` (emitted as a single ``?`` by numbered
  formats), e.g. PostgreSQL's JSONB ``??|`` operator;
* ``'...'`` string literals and ``"..."`` quoted identifiers, with doubled
  quote escapes: copied verbatim, so ``'why?'`` is left alone.

SQL comments, dollar-quoted strings and backslash escapes are *not*
recognised.  A ``?`` inside one of those is treated as a placeholder; use
``??`` or bind the text as an argument instead.
"""
from __future__ import annotations

import itertools
import re
from abc import ABC, abstractmethod
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

TOKEN_PATTERN = re.compile(r"'(?:[^']|'')*'|\"(?:[^\"]|\"\")*\"|\?\??")

PLACEHOLDER = "?"
ESCAPED_PLACEHOLDER = "??"


def iter_placeholders(sql: str) -> Iterator[re.Match[str]]:
    """Yield a match for every real ``?`` placeholder in ``sql``."""
    for match in TOKEN_PATTERN.finditer(sql):
        if match.group(0) == PLACEHOLDER:
            yield match


def count_placeholders(sql: str) -> int:
    """Return the number of real placeholders in ``sql``."""
    return sum(1 for _ in iter_placeholders(sql))


class PlaceholderFormat(BaseModel, ABC):
    """Strategy for rewriting ``?`` placeholders to a dialect's syntax."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def replace_placeholders(self, sql: str) -> str:
        """Return ``sql`` with placeholders rewritten for this format."""


class QuestionFormat(PlaceholderFormat):
    """Passthrough: leaves ``?`` placeholders (and everything else) untouched.

    Used by SQLite, MySQL and most DB-API drivers with ``qmark`` style.
    """

    def replace_placeholders(self, sql: str) -> str:
        return sql


class NumberedFormat(PlaceholderFormat):
    """Rewrites placeholders to ``<prefix>1``, ``<prefix>2``, ...

    Attributes:
        prefix: Text placed before each number (``"$"`` for PostgreSQL).
    """

    prefix: str

    def replace_placeholders(self, sql: str) -> str:
        counter = itertools.count(1)

        def _rewrite(match: re.Match[str]) -> str:
            token = match.group(0)
            if token == PLACEHOLDER:
                return f"{self.prefix}{next(counter)}"
            if token == ESCAPED_PLACEHOLDER:
                return PLACEHOLDER
            return token

        return TOKEN_PATTERN.sub(_rewrite, sql)


#: ``?`` – passthrough.
QUESTION = QuestionFormat()

#: ``$1, $2`` – PostgreSQL.
DOLLAR = NumberedFormat(prefix="$")

#: ``:1, :2`` – Oracle.
COLON = NumberedFormat(prefix=":")

#: ``@p1, @p2`` – SQL Server.
AT_P = NumberedFormat(prefix="@p")
