# tests/test_diagnostics.py

import pytest

from calnep.diagnostics import new_years_table, pretty_month, round_trip


def test_pretty_month_grid():
    text = pretty_month.bs_month_calendar(2082, 4)
    lines = text.splitlines()
    assert lines[0].startswith("BS 2082 Shrawn")
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    # Shrawn 2082 starts on a Wednesday: three blank cells, then day 1
    first_row = lines[3]
    assert first_row.split()[0] == "1"
    assert first_row.index("1") == 3 * 7 + 1


def test_pretty_month_offset_and_nepali():
    text = pretty_month.bs_month_calendar(2082, 3, offset=1, nepali=True)
    assert "साउन" in text
    assert "२०८२" in text


def test_pretty_month_weeks_cover_month():
    s, weeks = pretty_month.month_weeks(2082, 4)
    cells = [c for wk in weeks for c in wk]
    assert len(cells) % 7 == 0
    assert sum(1 for c in cells if c[0].strip()) == s.days_in_month == 32


def test_new_years_table(capsys):
    assert new_years_table.main(["--from-year", "2079", "--to-year", "2082"]) == 0
    out = capsys.readouterr().out
    assert "2022-04-14" in out
    assert "2025-04-14" in out
    assert "Thu" in out


def test_new_year_row():
    year, d, wd, n = new_years_table.new_year_row(2081)
    assert (year, d.isoformat(), n) == (2081, "2024-04-13", 366)
    assert wd == "Sat"


def test_round_trip_tool(capsys):
    assert round_trip.main(["--N", "15", "--seed", "1"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_year_lengths_plot(tmp_path, capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    from calnep.diagnostics import year_lengths

    outbase = str(tmp_path / "lengths")
    assert year_lengths.main(["--from-year", "2075", "--to-year", "2085", "--outbase", outbase]) == 0
    assert (tmp_path / "lengths.png").exists()
    assert "Saved:" in capsys.readouterr().out
