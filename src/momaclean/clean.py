"""Record normalization pipeline for the MoMA collection tables.

Every stage reads one table and writes a new one; the raw tables are never
modified, so a run can be repeated from scratch at any time. Stages run in a
fixed order:

    raw_artworks
      -> _stage_trimmed     trim_text
      -> _stage_valid       drop_invalid
      -> _stage_nullified   nullify_empty
      -> artworks           dedupe
      -> _stage_fanout      expand_artists
    raw_artists
      -> artists            fill_artist_defaults
    _stage_fanout
      -> artworks_expanded  derive_acquisition
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import duckdb

from momaclean.common import sql_literal
from momaclean.schema import ARTWORK_COLUMNS, ARTWORK_TEXT_COLUMNS

UNKNOWN = "Unknown"

# Columns carried from artworks into each fan-out row.
EXPANDED_BASE_COLUMNS = [c for c in ARTWORK_COLUMNS if c != "constituent_ids"]

# trim() only removes spaces; exports also carry tabs, line breaks and NBSP.
STRIP_SQL = r"regexp_replace({c}, '^[\s\p{{Z}}\v]+|[\s\p{{Z}}\v]+$', '', 'g')"


def _strip(column: str) -> str:
    return STRIP_SQL.format(c=column)


@dataclass(slots=True)
class CleanConfig:
    unknown_sentinel: str = UNKNOWN
    # Emit one row with a null artist_id for artworks that list no artists.
    keep_unattributed: bool = False


def clean_config_from_env() -> CleanConfig:
    sentinel = os.getenv("MOMA_UNKNOWN_SENTINEL", "").strip() or UNKNOWN
    keep = os.getenv("MOMA_KEEP_UNATTRIBUTED", "").strip().lower()
    return CleanConfig(
        unknown_sentinel=sentinel,
        keep_unattributed=keep in ("1", "true", "yes"),
    )


def _select_list(columns: list[str], text_expr: str) -> str:
    """Build a SELECT list applying text_expr (a format string over {c}) to text columns."""
    parts = []
    for c in columns:
        if c in ARTWORK_TEXT_COLUMNS:
            parts.append(text_expr.format(c=c) + f" AS {c}")
        else:
            parts.append(c)
    return ",\n                ".join(parts)


class CollectionCleaner:
    """Turns raw_artworks/raw_artists into artworks, artists and artworks_expanded."""

    def __init__(self, conn: duckdb.DuckDBPyConnection, config: CleanConfig | None = None):
        self.conn = conn
        self.config = config or CleanConfig()

    def run(self):
        self.trim_text("raw_artworks", "_stage_trimmed")
        self.drop_invalid("_stage_trimmed", "_stage_valid")
        self.nullify_empty("_stage_valid", "_stage_nullified")
        self.dedupe("_stage_nullified", "artworks")
        self.expand_artists("artworks", "_stage_fanout")
        self.fill_artist_defaults("raw_artists", "artists")
        self.derive_acquisition("_stage_fanout", "artworks_expanded")

    def _count(self, table: str) -> int:
        return self.conn.execute(f"SELECT count(*) FROM {table}").fetchone()[0]

    def _report(self, stage: str, table: str, noun: str = "artworks"):
        print(f"Clean [{stage}]: {self._count(table):,} {noun} in {table}")

    def _create(self, target: str, select_sql: str):
        # Underscore-prefixed tables are per-connection scratch space.
        kind = "TEMP TABLE" if target.startswith("_") else "TABLE"
        self.conn.execute(f"CREATE OR REPLACE {kind} {target} AS {select_sql}")

    def trim_text(self, source: str, target: str):
        cols = _select_list(ARTWORK_COLUMNS, STRIP_SQL)
        self._create(target, f"""
            SELECT
                {cols}
            FROM {source}
        """)
        self._report("trim_text", target)

    def drop_invalid(self, source: str, target: str):
        """Remove rows with no title and no artist, and rows with a blank identifier."""
        self._create(target, f"""
            SELECT *
            FROM {source}
            WHERE NOT (NULLIF(title, '') IS NULL AND NULLIF(artist_display_name, '') IS NULL)
              AND COALESCE(object_id, '') != ''
        """)
        dropped = self._count(source) - self._count(target)
        print(f"Clean [drop_invalid]: dropped {dropped:,} rows")
        self._report("drop_invalid", target)

    def nullify_empty(self, source: str, target: str):
        cols = _select_list(ARTWORK_COLUMNS, "NULLIF({c}, '')")
        self._create(target, f"""
            SELECT
                {cols}
            FROM {source}
        """)
        self._report("nullify_empty", target)

    def dedupe(self, source: str, target: str):
        """Keep the first row per object_id by ingestion order."""
        self._create(target, f"""
            SELECT *
            FROM {source}
            QUALIFY row_number() OVER (
                PARTITION BY object_id
                ORDER BY ingest_order
            ) = 1
            ORDER BY ingest_order
        """)
        self._report("dedupe", target)

    def expand_artists(self, source: str, target: str):
        """One row per comma-separated constituent id; unparseable pieces become null."""
        base = ", ".join(EXPANDED_BASE_COLUMNS)
        unattributed = ""
        if self.config.keep_unattributed:
            unattributed = f"""
            UNION ALL
            SELECT
                {base},
                CAST(NULL AS INTEGER) AS artist_id,
                CAST(NULL AS INTEGER) AS artist_position
            FROM {source}
            WHERE constituent_ids IS NULL
            """
        self._create(target, f"""
            WITH split AS (
                SELECT {base}, string_split(constituent_ids, ',') AS parts
                FROM {source}
                WHERE constituent_ids IS NOT NULL
            ),
            pieces AS (
                SELECT
                    {base},
                    unnest(parts)                       AS piece,
                    unnest(range(1, len(parts) + 1))    AS pos
                FROM split
            )
            SELECT
                {base},
                TRY_CAST({_strip('piece')} AS INTEGER)  AS artist_id,
                CAST(pos AS INTEGER)                    AS artist_position
            FROM pieces
            {unattributed}
        """)

        missing = self.conn.execute(
            f"SELECT count(*) FROM {source} WHERE constituent_ids IS NULL"
        ).fetchone()[0]
        if missing:
            action = "kept with null artist_id" if self.config.keep_unattributed else "excluded"
            print(f"Clean [expand_artists]: {missing:,} artworks list no artists ({action})")
        self._report("expand_artists", target, noun="rows")

    def fill_artist_defaults(self, source: str, target: str):
        sentinel = sql_literal(self.config.unknown_sentinel)
        self._create(target, f"""
            SELECT
                constituent_id,
                NULLIF({_strip('display_name')}, '') AS display_name,
                COALESCE(NULLIF({_strip('nationality')}, ''), {sentinel}) AS nationality,
                COALESCE(NULLIF({_strip('gender')}, ''), {sentinel}) AS gender,
                NULLIF({_strip('begin_date')}, '') AS begin_date,
                NULLIF({_strip('end_date')}, '') AS end_date
            FROM {source}
        """)
        self._report("fill_artist_defaults", target, noun="artists")

    def derive_acquisition(self, source: str, target: str):
        self._create(target, f"""
            SELECT
                *,
                CAST(year(date_acquired) AS INTEGER)    AS acquisition_year,
                monthname(date_acquired)                AS acquisition_month
            FROM {source}
            ORDER BY ingest_order, artist_position NULLS FIRST
        """)
        self._report("derive_acquisition", target, noun="rows")
