# tests/test_cli.py

from calnep.cli import format_date, main
import calnep


def test_to_bs(capsys):
    assert main(["to-bs", "2025-06-15"]) == 0
    out = capsys.readouterr().out
    assert "BS 2082-03-01" in out
    assert "Sunday, Asar 1 2082" in out


def test_bare_date_is_to_bs(capsys):
    assert main(["2025-06-15"]) == 0
    assert "BS 2082-03-01" in capsys.readouterr().out


def test_to_ad(capsys):
    assert main(["to-ad", "2082-03-01"]) == 0
    out = capsys.readouterr().out
    assert "AD 2025-06-15" in out
    assert "June" in out


def test_to_ad_accepts_devanagari_digits(capsys):
    assert main(["to-ad", "२०८२-०३-०१"]) == 0
    assert "AD 2025-06-15" in capsys.readouterr().out


def test_nepali_output(capsys):
    assert main(["to-bs", "2025-06-15", "--nepali"]) == 0
    out = capsys.readouterr().out
    assert "२०८२" in out
    assert "असार" in out
    assert "आईतबार" in out


def test_out_of_range_exits_with_2(capsys):
    assert main(["to-bs", "1900-01-01"]) == 2
    assert "error" in capsys.readouterr().err


def test_verbose_flag(capsys):
    assert main(["-v", "to-bs", "2025-06-15"]) == 0
    assert "BS 2082-03-01" in capsys.readouterr().out


def test_month_grid(capsys):
    assert main(["month", "2082", "3"]) == 0
    out = capsys.readouterr().out
    assert "BS 2082 Asar" in out
    assert "2025-06-15 .. 2025-07-15" in out


def test_today(capsys):
    assert main(["today"]) == 0
    assert "BS " in capsys.readouterr().out


def test_format_date_fields():
    text = format_date(calnep.convert_to_bs(2024, 3, 3))
    assert "week_of_year=48" in text
    assert "day_of_year=325" in text
