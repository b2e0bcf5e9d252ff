"""Integration tests for the full load, average, flip, and write flow."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from ingest.pixel_reader import read_pixel_file


def test_flip_flow_round_trips_output_file(
    write_pixel_source, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    """Output should re-load with rows flipped and other fields unchanged."""
    source_path = write_pixel_source(
        "0,0,0.5,0.5,0.5\n\n0,3,1.0,0.0,0.0\n1,2,3\n", name="image.dat"
    )
    monkeypatch.chdir(tmp_path)

    exit_code = main([str(source_path)])
    report = capsys.readouterr().out.splitlines()
    flipped = read_pixel_file(tmp_path / "flipped.dat")

    assert exit_code == 0
    assert report[:4] == [
        "Loaded 2 pixels (1 malformed line(s) skipped).",
        "Average R: 0.750000",
        "Average G: 0.250000",
        "Average B: 0.250000",
    ]
    assert [(p.x, p.y, p.r, p.g, p.b) for p in flipped.pixels] == [
        (0, 3, 0.5, 0.5, 0.5),
        (0, 0, 1.0, 0.0, 0.0),
    ]


def test_flip_flow_all_malformed_writes_nothing(
    write_pixel_source, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    """An input with no valid pixels should exit 1 and leave no output."""
    source_path = write_pixel_source("x,y\n1,2,3\n", name="broken.dat")
    monkeypatch.chdir(tmp_path)

    exit_code = main([str(source_path)])
    error_output = capsys.readouterr().err

    assert exit_code == 1
    assert "No valid pixels were read. Aborting." in error_output
    assert not (tmp_path / "flipped.dat").exists()
