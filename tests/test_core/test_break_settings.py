"""Tests for BreakSettings coercion on construction and assignment."""

import pytest

from autobreak.core.contracts import BreakStyle
from autobreak.steps.auto_break.config import BreakSettings


class TestDefaults:
    def test_defaults(self):
        cfg = BreakSettings()
        assert cfg.style == BreakStyle.RECTANGULAR
        assert cfg.gap == 0.6
        assert cfg.symbols == 1
        assert cfg.range_percent == 90


class TestStyle:
    @pytest.mark.parametrize("value, expected", [
        (0, BreakStyle.RECTANGULAR),
        (1, BreakStyle.STRUCTURAL),
        (BreakStyle.STRUCTURAL, BreakStyle.STRUCTURAL),
        ("structural", BreakStyle.STRUCTURAL),
        ("Rectangular", BreakStyle.RECTANGULAR),
        (2, BreakStyle.RECTANGULAR),
        (-1, BreakStyle.RECTANGULAR),
        ("wavy", BreakStyle.RECTANGULAR),
    ])
    def test_construct(self, value, expected):
        assert BreakSettings(style=value).style == expected

    def test_assignment_resets_invalid(self):
        cfg = BreakSettings(style=1)
        cfg.style = 7
        assert cfg.style == BreakStyle.RECTANGULAR


class TestGap:
    def test_not_clamped(self):
        cfg = BreakSettings(gap=12.5)
        assert cfg.gap == 12.5
        cfg.gap = -1.0
        assert cfg.gap == -1.0


class TestSymbols:
    @pytest.mark.parametrize("value", [1, 2, 3])
    def test_in_range_kept(self, value):
        assert BreakSettings(symbols=value).symbols == value

    @pytest.mark.parametrize("value", [0, -2, 4, 10])
    def test_out_of_range_resets_to_one(self, value):
        assert BreakSettings(symbols=value).symbols == 1

    def test_assignment(self):
        cfg = BreakSettings(symbols=3)
        cfg.symbols = 5
        assert cfg.symbols == 1


class TestRangePercent:
    @pytest.mark.parametrize("value, expected", [
        (5, 10), (10, 10), (45.5, 45.5), (90, 90), (150, 90), (-20, 10),
    ])
    def test_clamped(self, value, expected):
        assert BreakSettings(range_percent=value).range_percent == expected

    def test_assignment_clamps(self):
        cfg = BreakSettings()
        cfg.range_percent = 3
        assert cfg.range_percent == 10
        cfg.range_percent = 99
        assert cfg.range_percent == 90


class TestNonNumericWrites:
    @pytest.mark.parametrize("value", [2.5, "many", None, True, [2]])
    def test_symbols_reset_instead_of_raising(self, value):
        cfg = BreakSettings(symbols=3)
        cfg.symbols = value
        assert cfg.symbols == 1

    def test_symbols_numeric_text_accepted(self):
        assert BreakSettings(symbols="2").symbols == 2

    @pytest.mark.parametrize("value", [float("nan"), "lots", None, [40]])
    def test_range_falls_back_to_default(self, value):
        cfg = BreakSettings(range_percent=40)
        cfg.range_percent = value
        assert cfg.range_percent == 90

    def test_range_nan_on_construction(self):
        assert BreakSettings(range_percent=float("nan")).range_percent == 90

    def test_range_numeric_text_clamped(self):
        assert BreakSettings(range_percent="5").range_percent == 10
