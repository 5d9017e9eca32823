"""Shared utilities for momaclean tasks."""

from pathlib import Path

import duckdb

DEFAULT_DB_PATH = Path("output/moma.duckdb")


def open_db(path: Path = DEFAULT_DB_PATH) -> duckdb.DuckDBPyConnection:
    path.parent.mkdir(parents=True, exist_ok=True)
    return duckdb.connect(str(path))


def sql_literal(value: str) -> str:
    """Quote a Python string as a SQL string literal."""
    return "'" + value.replace("'", "''") + "'"
