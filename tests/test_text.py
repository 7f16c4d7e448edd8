from __future__ import annotations

import logging

import pytest

from moontool.core.errors import FormatError
from moontool.core.types import PhaseName, PhaseResult
from moontool.render.text import DEFAULT_FORMAT, EMOJIS, EMOJIS_SOUTH, emoji_of, format_phase, name_of

JD = 2451564.695139
FULL = PhaseResult(phase_fraction=0.5, illuminated_fraction=1.0, moon_age_days=14.77)
CRESCENT = PhaseResult(phase_fraction=0.1, illuminated_fraction=0.1, moon_age_days=2.95)


def test_default_format():
    assert format_phase(DEFAULT_FORMAT, JD, FULL) == "Full 🌕 (100.0%)"


def test_flags():
    assert format_phase("%a", JD, FULL) == "14.8"
    assert format_phase("%J", JD, FULL) == "2451564.695139"
    assert format_phase("%p", JD, CRESCENT) == "Waxing Crescent"
    assert format_phase("%P", JD, CRESCENT) == "10.0"
    assert format_phase("%N", JD, CRESCENT) == "1"
    assert format_phase("%e|%s", JD, CRESCENT) == "🌒|🌘"
    assert format_phase("a%nb%tc%%", JD, FULL) == "a\nb\tc%"


def test_plain_text_passes_through():
    assert format_phase("moon", JD, FULL) == "moon"
    assert format_phase("", JD, FULL) == ""


def test_unknown_flag_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="moontool.render.text"):
        out = format_phase("[%q]", JD, FULL)
    assert out == "[]"
    assert any("%q" in r.getMessage() for r in caplog.records)


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_phase("%p %", JD, FULL)
    with pytest.raises(ValueError):
        format_phase("%", JD, FULL)


def test_tables():
    assert len(EMOJIS) == len(EMOJIS_SOUTH) == len(PhaseName)
    assert name_of(PhaseName.NEW) == "New"
    assert name_of(PhaseName.WANING_GIBBOUS) == "Waning Gibbous"
    for index in (PhaseName.NEW, PhaseName.FULL):
        assert emoji_of(index) == emoji_of(index, south=True)
    assert emoji_of(PhaseName.FIRST_QUARTER, south=True) == emoji_of(PhaseName.LAST_QUARTER)
