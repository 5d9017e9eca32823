"""Data pipeline for momaclean — MoMA collection cleaning.

Run with: pymake
List tasks: pymake list
"""

from pathlib import Path

from pymake import task

OUTPUT_DIR = Path("output")
TOUCH_DIR = OUTPUT_DIR / ".touch"
MOMA_DATABASE = OUTPUT_DIR / "moma.duckdb"
EXPORT_DIR = OUTPUT_DIR / "export"

MOMA_DATA = Path("data/moma")
MOMA_ARTWORKS = MOMA_DATA / "Artworks.csv"
MOMA_ARTISTS = MOMA_DATA / "Artists.csv"


@task(
    inputs=[MOMA_ARTWORKS, MOMA_ARTISTS],
    touch=TOUCH_DIR / "ingest",
)
def ingest(db: str = str(MOMA_DATABASE), data_dir: str = str(MOMA_DATA)):
    """Load MoMA Artworks.csv and Artists.csv into the raw tables of db."""
    TOUCH_DIR.mkdir(parents=True, exist_ok=True)
    from momaclean.common import open_db
    from momaclean.ingest import MomaIngester

    conn = open_db(Path(db))
    try:
        MomaIngester(conn, Path(data_dir)).run()
    finally:
        conn.close()


@task(inputs=[ingest], touch=TOUCH_DIR / "clean")
def clean(db: str = str(MOMA_DATABASE)):
    """Run the normalization pipeline: artworks, artists, artworks_expanded.

    MOMA_UNKNOWN_SENTINEL and MOMA_KEEP_UNATTRIBUTED override the defaults.
    """
    TOUCH_DIR.mkdir(parents=True, exist_ok=True)
    from momaclean.clean import CollectionCleaner, clean_config_from_env
    from momaclean.common import open_db

    conn = open_db(Path(db))
    try:
        CollectionCleaner(conn, clean_config_from_env()).run()
    finally:
        conn.close()


@task(inputs=[clean])
def export(db: str = str(MOMA_DATABASE), out_dir: str = str(EXPORT_DIR), fmt: str = "csv"):
    """Write the cleaned tables to out_dir as csv or parquet."""
    from momaclean.common import open_db
    from momaclean.export import export_tables

    conn = open_db(Path(db))
    try:
        export_tables(conn, Path(out_dir), fmt=fmt)
    finally:
        conn.close()


@task(inputs=[clean])
def stats(db: str = str(MOMA_DATABASE)):
    """Print collection summary statistics."""
    from momaclean.common import open_db
    from momaclean.stats import CollectionStats

    conn = open_db(Path(db))
    try:
        CollectionStats(conn).run()
    finally:
        conn.close()


task.default("export")
