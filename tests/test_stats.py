"""Tests for collection summary statistics."""

from __future__ import annotations

import duckdb
import pytest

from momaclean.clean import CollectionCleaner
from momaclean.schema import CREATE_RAW_ARTISTS, CREATE_RAW_ARTWORKS
from momaclean.stats import CollectionStats


@pytest.fixture
def stats():
    conn = duckdb.connect()
    conn.execute(CREATE_RAW_ARTWORKS)
    conn.execute(CREATE_RAW_ARTISTS)
    conn.execute("""
        INSERT INTO raw_artworks
            (ingest_order, object_id, title, constituent_ids, classification,
             department, date_acquired)
        VALUES
            (1, '1', 'A', '1',    'Painting', 'Painting & Sculpture', DATE '1934-05-01'),
            (2, '2', 'B', '1, 2', 'Painting', 'Painting & Sculpture', DATE '1938-01-15'),
            (3, '3', 'C', '2',    'Print',    'Drawings & Prints',    DATE '1975-03-10'),
            (4, '4', 'D', '3',    'Print',    'Drawings & Prints',    DATE '1979-11-30'),
            (5, '5', 'E', '3',    'Photograph', 'Photography',        NULL),
            (6, '6', 'F', NULL,   'Print',    'Drawings & Prints',    DATE '2001-02-02')
    """)
    conn.execute("""
        INSERT INTO raw_artists (constituent_id, display_name, nationality, gender)
        VALUES (1, 'Ada', 'French', 'Female'),
               (2, 'Bert', 'American', 'Male'),
               (3, 'Cleo', NULL, NULL)
    """)
    CollectionCleaner(conn).run()
    yield CollectionStats(conn)
    conn.close()


def test_counts(stats: CollectionStats):
    assert stats.counts() == [("artworks", 6), ("artists", 3), ("artworks_expanded", 6)]


def test_top_artists(stats: CollectionStats):
    assert stats.top_artists() == [("Ada", 2), ("Bert", 2), ("Cleo", 2)]
    assert stats.top_artists(limit=1) == [("Ada", 2)]


def test_top_classifications(stats: CollectionStats):
    assert stats.top_classifications() == [("Print", 3), ("Painting", 2), ("Photograph", 1)]


def test_acquisition_periods(stats: CollectionStats):
    # Artwork 6 has no artist rows and so no acquisition feature.
    assert stats.acquisition_periods() == [("1930s", 2), ("1970s", 2)]


def test_department_leaders(stats: CollectionStats):
    assert stats.department_leaders() == [
        ("Drawings & Prints", "Bert", 1),
        ("Painting & Sculpture", "Ada", 2),
        ("Photography", "Cleo", 1),
    ]


def test_nationalities(stats: CollectionStats):
    assert stats.nationalities() == [("American", 2), ("French", 2), ("Unknown", 2)]


def test_run_prints_sections(stats: CollectionStats, capsys):
    stats.run()
    out = capsys.readouterr().out
    assert "=== Top Artists ===" in out
    assert "  1930s: 2" in out
    assert "  Painting & Sculpture: Ada (2)" in out
