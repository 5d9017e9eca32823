"""Export the cleaned tables as flat files for the dashboard."""

from pathlib import Path

import duckdb

from momaclean.common import sql_literal
from momaclean.schema import CLEAN_TABLES

EXPORT_DIR = Path("output/export")

COPY_OPTIONS = {
    "csv": "FORMAT CSV, HEADER",
    "parquet": "FORMAT PARQUET",
}


def export_tables(
    conn: duckdb.DuckDBPyConnection,
    out_dir: Path = EXPORT_DIR,
    fmt: str = "csv",
) -> list[Path]:
    if fmt not in COPY_OPTIONS:
        raise ValueError(f"unsupported export format {fmt!r} (expected one of {sorted(COPY_OPTIONS)})")
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for table in CLEAN_TABLES:
        dest = out_dir / f"{table}.{fmt}"
        conn.execute(f"COPY {table} TO {sql_literal(str(dest))} ({COPY_OPTIONS[fmt]})")
        print(f"Export: {table} -> {dest}")
        written.append(dest)
    return written
