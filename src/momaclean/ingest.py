"""MoMA collection CSV ingestion into the raw tables."""

from pathlib import Path

import duckdb

from momaclean.common import sql_literal
from momaclean.schema import CREATE_RAW_ARTISTS, CREATE_RAW_ARTWORKS

MOMA_DATA = Path("data/moma")

ARTWORKS_CSV_COLUMNS = [
    "ObjectID",
    "Title",
    "Artist",
    "ConstituentID",
    "Medium",
    "Dimensions",
    "Classification",
    "Department",
    "CreditLine",
    "OnView",
    "DateAcquired",
    "Height (cm)",
    "Width (cm)",
]

ARTISTS_CSV_COLUMNS = [
    "ConstituentID",
    "DisplayName",
    "Nationality",
    "Gender",
    "BeginDate",
    "EndDate",
]


class MomaIngester:
    """Loads MoMA Artworks.csv and Artists.csv into raw_artworks and raw_artists.

    Values are copied as exported; whitespace and blanks are left for the
    cleaning stages. Each run replaces the previous raw snapshot.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection, data_dir: Path = MOMA_DATA):
        self.conn = conn
        self.artworks = data_dir / "Artworks.csv"
        self.artists = data_dir / "Artists.csv"
        self._ensure_schema()

    def _ensure_schema(self):
        self.conn.execute(CREATE_RAW_ARTWORKS)
        self.conn.execute(CREATE_RAW_ARTISTS)

    def run(self):
        self.ingest_artworks()
        self.ingest_artists()

    def _check_columns(self, path: Path, required: list[str]):
        if not path.exists():
            raise FileNotFoundError(f"MoMA export not found: {path}")
        rows = self.conn.execute(
            f"DESCRIBE SELECT * FROM read_csv_auto({sql_literal(str(path))}, header=true, all_varchar=true)"
        ).fetchall()
        present = {row[0] for row in rows}
        missing = [c for c in required if c not in present]
        if missing:
            raise ValueError(f"{path.name} is missing columns: {', '.join(missing)}")

    def ingest_artworks(self):
        self._check_columns(self.artworks, ARTWORKS_CSV_COLUMNS)
        self.conn.execute("DELETE FROM raw_artworks")
        self.conn.execute(f"""
            INSERT INTO raw_artworks
            SELECT
                row_number() OVER ()                        AS ingest_order,
                "ObjectID"                                  AS object_id,
                "Title"                                     AS title,
                "Artist"                                    AS artist_display_name,
                "ConstituentID"                             AS constituent_ids,
                "Medium"                                    AS medium,
                "Dimensions"                                AS dimensions,
                "Classification"                            AS classification,
                "Department"                                AS department,
                "CreditLine"                                AS credit_line,
                "OnView"                                    AS on_view,
                TRY_CAST(trim("DateAcquired") AS DATE)      AS date_acquired,
                TRY_CAST(trim("Height (cm)") AS DOUBLE)     AS height_cm,
                TRY_CAST(trim("Width (cm)") AS DOUBLE)      AS width_cm
            FROM read_csv_auto({sql_literal(str(self.artworks))}, header=true, all_varchar=true)
        """)
        count = self.conn.execute("SELECT count(*) FROM raw_artworks").fetchone()[0]
        print(f"MoMA: ingested {count:,} artworks into raw_artworks")

    def ingest_artists(self):
        self._check_columns(self.artists, ARTISTS_CSV_COLUMNS)
        self.conn.execute("DELETE FROM raw_artists")
        self.conn.execute(f"""
            INSERT INTO raw_artists
            SELECT
                TRY_CAST(trim("ConstituentID") AS INTEGER)  AS constituent_id,
                "DisplayName"                               AS display_name,
                "Nationality"                               AS nationality,
                "Gender"                                    AS gender,
                "BeginDate"                                 AS begin_date,
                "EndDate"                                   AS end_date
            FROM read_csv_auto({sql_literal(str(self.artists))}, header=true, all_varchar=true)
        """)
        count = self.conn.execute("SELECT count(*) FROM raw_artists").fetchone()[0]
        print(f"MoMA: ingested {count:,} artists into raw_artists")
