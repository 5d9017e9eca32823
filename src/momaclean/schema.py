"""DDL constants and column layouts for the momaclean database."""

# Column order is shared by raw_artworks, the stage tables and artworks.
ARTWORK_COLUMNS = [
    "ingest_order",
    "object_id",
    "title",
    "artist_display_name",
    "constituent_ids",
    "medium",
    "dimensions",
    "classification",
    "department",
    "credit_line",
    "on_view",
    "date_acquired",
    "height_cm",
    "width_cm",
]

ARTWORK_TEXT_COLUMNS = [
    "object_id",
    "title",
    "artist_display_name",
    "constituent_ids",
    "medium",
    "dimensions",
    "classification",
    "department",
    "credit_line",
    "on_view",
]

ARTIST_COLUMNS = [
    "constituent_id",
    "display_name",
    "nationality",
    "gender",
    "begin_date",
    "end_date",
]

CREATE_RAW_ARTWORKS = """
CREATE TABLE IF NOT EXISTS raw_artworks (
    ingest_order        BIGINT NOT NULL,
    object_id           VARCHAR,
    title               VARCHAR,
    artist_display_name VARCHAR,
    constituent_ids     VARCHAR,
    medium              VARCHAR,
    dimensions          VARCHAR,
    classification      VARCHAR,
    department          VARCHAR,
    credit_line         VARCHAR,
    on_view             VARCHAR,
    date_acquired       DATE,
    height_cm           DOUBLE,
    width_cm            DOUBLE
);
"""

CREATE_RAW_ARTISTS = """
CREATE TABLE IF NOT EXISTS raw_artists (
    constituent_id      INTEGER,
    display_name        VARCHAR,
    nationality         VARCHAR,
    gender              VARCHAR,
    begin_date          VARCHAR,
    end_date            VARCHAR
);
"""

# Tables written by CollectionCleaner; export and stats read these.
CLEAN_TABLES = ["artworks", "artists", "artworks_expanded"]
