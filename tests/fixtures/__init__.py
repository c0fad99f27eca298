"""Test fixtures: sample schema DDL and seed rows."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent

EMPLOYEES = [
    (1, "Ada", "Lovelace", "engineering", 120000, None),
    (2, "Alan", "Turing", "engineering", 115000, 1),
    (3, "Grace", "Hopper", "research", 130000, None),
    (4, "Edsger", "Dijkstra", "research", 99000, 3),
    (5, "Barbara", "Liskov", "sales", 87000, None),
]


def load_ddl() -> str:
    """Return the sample SQLite DDL."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
