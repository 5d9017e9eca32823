"""Collection summary statistics over the cleaned tables."""

import duckdb

from momaclean.schema import CLEAN_TABLES


class CollectionStats:
    """Aggregations behind the collection dashboard.

    Each query method returns plain rows; run() prints them all.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self.conn = conn

    def run(self):
        self._print("Record Counts", self.counts())
        self._print("Top Artists", self.top_artists())
        self._print("Top Classifications", self.top_classifications())
        self._print("Acquisitions by Decade", self.acquisition_periods())
        print("=== Department Leaders ===")
        for department, artist, cnt in self.department_leaders():
            print(f"  {department}: {artist} ({cnt:,})")
        print()
        self._print("Top Artist Nationalities", self.nationalities())

    def _print(self, heading: str, rows: list[tuple]):
        print(f"=== {heading} ===")
        for label, cnt in rows:
            print(f"  {label}: {cnt:,}")
        print()

    def counts(self) -> list[tuple[str, int]]:
        return [
            (table, self.conn.execute(f"SELECT count(*) FROM {table}").fetchone()[0])
            for table in CLEAN_TABLES
        ]

    def top_artists(self, limit: int = 10) -> list[tuple[str, int]]:
        return self.conn.execute(f"""
            SELECT a.display_name, count(DISTINCT e.object_id) AS cnt
            FROM artworks_expanded e
            JOIN artists a ON e.artist_id = a.constituent_id
            GROUP BY a.constituent_id, a.display_name
            ORDER BY cnt DESC, a.display_name
            LIMIT {int(limit)}
        """).fetchall()

    def top_classifications(self, limit: int = 15) -> list[tuple[str, int]]:
        return self.conn.execute(f"""
            SELECT classification, count(*) AS cnt
            FROM artworks
            WHERE classification IS NOT NULL
            GROUP BY classification
            ORDER BY cnt DESC, classification
            LIMIT {int(limit)}
        """).fetchall()

    def acquisition_periods(self) -> list[tuple[str, int]]:
        rows = self.conn.execute("""
            SELECT (acquisition_year // 10) * 10 AS decade,
                   count(DISTINCT object_id) AS cnt
            FROM artworks_expanded
            WHERE acquisition_year IS NOT NULL
            GROUP BY decade
            ORDER BY decade
        """).fetchall()
        return [(f"{decade}s", cnt) for decade, cnt in rows]

    def department_leaders(self) -> list[tuple[str, str, int]]:
        """The artist with the most works in each department, ties broken by name."""
        return self.conn.execute("""
            WITH per_artist AS (
                SELECT e.department, a.display_name,
                       count(DISTINCT e.object_id) AS cnt
                FROM artworks_expanded e
                JOIN artists a ON e.artist_id = a.constituent_id
                WHERE e.department IS NOT NULL
                GROUP BY e.department, a.constituent_id, a.display_name
            )
            SELECT department, display_name, cnt
            FROM per_artist
            QUALIFY row_number() OVER (
                PARTITION BY department
                ORDER BY cnt DESC, display_name
            ) = 1
            ORDER BY department
        """).fetchall()

    def nationalities(self, limit: int = 10) -> list[tuple[str, int]]:
        return self.conn.execute(f"""
            SELECT a.nationality, count(DISTINCT e.object_id) AS cnt
            FROM artworks_expanded e
            JOIN artists a ON e.artist_id = a.constituent_id
            GROUP BY a.nationality
            ORDER BY cnt DESC, a.nationality
            LIMIT {int(limit)}
        """).fetchall()
