"""Tests for the single-key choice reader."""

from enum import Enum

import pytest
from readchar import key

from tallyfile.core.exceptions import ConfigError
from tallyfile.ui.keys import build_choice_map, parse_key_name, read_choice


class Color(Enum):
    RED = "red"
    BLUE = "blue"


class TestParseKeyName:
    """Tests for configured key names."""

    def test_single_character(self):
        assert parse_key_name("+") == ("+",)

    def test_space(self):
        assert parse_key_name("space") == (" ",)

    def test_backspace_covers_both_codes(self):
        codes = parse_key_name("backspace")
        assert "\x7f" in codes
        assert "\x08" in codes
        assert len(codes) == len(set(codes))

    def test_ctrl_c(self):
        assert parse_key_name("CTRL-C") == (key.CTRL_C,)

    def test_unknown_name(self):
        with pytest.raises(ConfigError, match="Unknown key name"):
            parse_key_name("hyper")


class TestBuildChoiceMap:
    """Tests for turning key groups into a lookup table."""

    def test_maps_every_key(self):
        choices = build_choice_map({Color.RED: ["r", "R"], Color.BLUE: ["b", "space"]})
        assert choices == {"r": Color.RED, "R": Color.RED, "b": Color.BLUE, " ": Color.BLUE}

    def test_clash_raises(self):
        with pytest.raises(ConfigError, match="bound to both"):
            build_choice_map({Color.RED: ["x"], Color.BLUE: [" ", "x"]})

    def test_repeated_key_same_outcome_is_fine(self):
        assert build_choice_map({Color.RED: ["r", "r"]}) == {"r": Color.RED}


class TestReadChoice:
    """Tests for the blocking reader loop."""

    def test_returns_mapped_value(self, keys, test_console):
        choices = {"r": Color.RED, "b": Color.BLUE}
        assert read_choice("Pick", choices, read_key=keys("b"), console=test_console) is Color.BLUE

    def test_ignores_unmapped_keys_and_redraws(self, keys, test_console):
        choices = {"r": Color.RED}
        result = read_choice("Pick [r]", choices, read_key=keys("x", "?", key.UP, "r"), console=test_console)
        assert result is Color.RED
        # prompt drawn once per key read; square brackets are not markup
        assert test_console.file.getvalue().count("Pick [r]") == 4

    def test_ctrl_c_interrupt_maps_when_bound(self, keys, test_console):
        choices = {key.CTRL_C: Color.RED}
        assert read_choice("Pick", choices, read_key=keys(KeyboardInterrupt), console=test_console) is Color.RED

    def test_ctrl_c_interrupt_propagates_when_unbound(self, keys, test_console):
        with pytest.raises(KeyboardInterrupt):
            read_choice("Pick", {"r": Color.RED}, read_key=keys(KeyboardInterrupt), console=test_console)

    def test_default_reader_is_readchar(self, monkeypatch, keys, test_console):
        monkeypatch.setattr("readchar.readkey", keys("r"))
        assert read_choice("Pick", {"r": Color.RED}, console=test_console) is Color.RED
