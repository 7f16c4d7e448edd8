from __future__ import annotations

import pytest

from moontool.cli import main, phoon_main

NEW_MOON_UNIX = "@947182440"   # 2000-01-06 18:14 UTC
FULL_MOON_UNIX = "@948427260"  # 2000-01-21 04:41 UTC
MID_LUNATION_UNIX = "@947500000"


def test_default_is_show(capsys):
    assert main(["-t", NEW_MOON_UNIX, "%p"]) == 0
    assert capsys.readouterr().out == "New\n"


def test_show_default_format(capsys):
    assert main(["show", "-t", FULL_MOON_UNIX]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Full 🌕 (")
    assert out.endswith("%)\n")


def test_bad_date_is_reported(capsys):
    assert main(["-t", "not a date at all"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("moontool: ")


def test_bad_format_is_reported(capsys):
    assert main(["show", "-t", NEW_MOON_UNIX, "%"]) == 2
    assert "moontool:" in capsys.readouterr().err


def test_hunt(capsys):
    assert main(["hunt", "-t", MID_LUNATION_UNIX]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Last New Moon:")
    assert lines[1].startswith("Next First Quarter:")
    assert "2000-01-06" in lines[0]


def test_lunation(capsys):
    assert main(["lunation", "-t", MID_LUNATION_UNIX]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Lunation 953"
    assert out.count("New Moon") == 2


def test_details(capsys):
    assert main(["details", "-t", FULL_MOON_UNIX]) == 0
    out = capsys.readouterr().out
    assert "Age of moon:" in out
    assert "Earth radii" in out
    assert "astronomical units" in out
    assert "Lunation:           953" in out


def test_jd(capsys):
    assert main(["jd", "-t", "@946684800"]) == 0
    assert capsys.readouterr().out == "JD  = 2451544.500000\nUTC = 2000-01-01 00:00:00\n"

    assert main(["jd", "--from-jd", "2451545.0"]) == 0
    assert "UTC = 2000-01-01 12:00:00" in capsys.readouterr().out


def test_phoon(capsys):
    assert main(["phoon", "-l", "20", "--no-text", FULL_MOON_UNIX]) == 0
    out = capsys.readouterr().out
    assert len(out.rstrip("\n").split("\n")) == 20
    assert "@" in out


def test_phoon_script_joins_date_words(capsys):
    assert phoon_main(["6", "Jan", "2000", "18:14"]) == 0
    out = capsys.readouterr().out
    assert "New Moon +" in out or "New Moon -" in out


def test_phoon_rejects_bad_lines():
    with pytest.raises(SystemExit):
        phoon_main(["-l", "0"])


def test_table(capsys):
    assert main(["table", "--year", "2000"]) == 0
    out = capsys.readouterr().out
    assert "Moon phases 2000" in out
    assert any(line.startswith("2000-01-06") and "New Moon" in line for line in out.splitlines())


def test_verbose_flag(capsys):
    assert main(["-vv", "jd", "--from-jd", "2451545.0"]) == 0
    assert "UTC = 2000-01-01 12:00:00" in capsys.readouterr().out


def test_negative_offset_with_equals(capsys):
    assert main(["jd", "--time=-01:00"]) == 0
    assert capsys.readouterr().out.startswith("JD  = ")
    assert main(["--time=-00:30", "%p"]) == 0
    assert capsys.readouterr().out.strip() in {
        "New", "Waxing Crescent", "First Quarter", "Waxing Gibbous",
        "Full", "Waning Gibbous", "Last Quarter", "Waning Crescent",
    }


def test_missing_plot_extra_is_reported(monkeypatch, capsys):
    import sys

    monkeypatch.setitem(sys.modules, "matplotlib", None)
    monkeypatch.setitem(sys.modules, "matplotlib.pyplot", None)
    assert main(["ephem", "validate", "--out-png", "residuals.png"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("moontool: ")
    assert "matplotlib" in err
