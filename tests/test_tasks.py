"""Tests for the pymake task signatures in Makefile.py."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

MAKEFILE = Path(__file__).resolve().parent.parent / "Makefile.py"


def _task_params() -> dict[str, list[str]]:
    tree = ast.parse(MAKEFILE.read_text())
    return {
        node.name: [a.arg for a in node.args.args]
        for node in tree.body
        if isinstance(node, ast.FunctionDef)
    }


@pytest.mark.parametrize("name", ["ingest", "clean", "export", "stats"])
def test_every_task_takes_db(name: str):
    assert "db" in _task_params()[name]


def test_ingest_takes_data_dir():
    assert _task_params()["ingest"] == ["db", "data_dir"]


def test_export_takes_out_dir_and_format():
    assert _task_params()["export"] == ["db", "out_dir", "fmt"]
