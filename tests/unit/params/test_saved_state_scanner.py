"""Tests for the local avatar data (saved-state) scanner."""

from __future__ import annotations

import math

import pytest

from avatarmenu.core.params.models import SavedEntry
from avatarmenu.core.params.scanners import SavedStateScanner, parse_f32, scan_saved_state


def _pairs(entries: list[SavedEntry]) -> list[tuple[str, float]]:
    return [(e.name, e.raw_value) for e in entries]


def test_scan_pairs_in_file_order(jump_speed_saved_state):
    entries = scan_saved_state(jump_speed_saved_state)

    assert [e.name for e in entries] == ["Jump", "Speed"]
    assert entries[0].raw_value == 1.0
    assert entries[1].raw_value == pytest.approx(0.42)


def test_values_have_single_precision():
    entries = scan_saved_state('{"name":"Speed","value":0.1}')

    assert entries[0].raw_value != 0.1
    assert entries[0].raw_value == pytest.approx(0.1, rel=1e-7)


def test_names_are_normalized():
    entries = scan_saved_state('{"name":"Left Hand Grip","value":0.5}')

    assert entries[0].name == "Left_Hand_Grip"


def test_last_value_before_closing_bracket():
    text = '[{"name":"A","value":0.0},{"name":"B","value":1.0}],"eyeHeight":1.6}'

    assert _pairs(scan_saved_state(text)) == [("A", 0.0), ("B", 1.0)]


def test_malformed_value_is_skipped_without_blocking_later_records():
    text = '{"name":"Bad","value":abc},{"name":"Good","value":0.5}'

    assert _pairs(scan_saved_state(text)) == [("Good", 0.5)]


def test_nan_value_is_dropped():
    text = '{"name":"Weird","value":NaN},{"name":"Fine","value":1}'

    assert _pairs(scan_saved_state(text)) == [("Fine", 1.0)]


def test_value_without_name_is_ignored():
    text = '"value":1.0},{"name":"Jump","value":0.0}'

    assert _pairs(scan_saved_state(text)) == [("Jump", 0.0)]


def test_name_without_value_is_dropped_at_end():
    assert scan_saved_state('{"name":"Dangling"') == []


def test_record_directly_before_closing_brackets_is_dropped():
    """The greedy value pattern swallows the trailing ``}]``, so the token fails to parse."""
    text = '{"animationParameters":[{"name":"A","value":0.5},{"name":"B","value":1.0}]}'

    assert _pairs(scan_saved_state(text)) == [("A", 0.5)]


def test_value_requires_closing_brace():
    assert scan_saved_state('{"name":"Jump","value":1.0') == []


def test_newer_name_replaces_unpaired_name():
    text = '{"name":"First"},{"name":"Second","value":0.25}'

    assert _pairs(scan_saved_state(text)) == [("Second", 0.25)]


def test_empty_input():
    assert scan_saved_state("") == []


def test_sample_saved_state(saved_state_file):
    entries = SavedStateScanner().scan(saved_state_file.read_text(encoding="utf-8"))

    assert [e.name for e in entries] == [
        "VRCEmote",
        "Left_Hand_Grip",
        "Jump",
        "Hat_Toggle",
        "Unknown_Param",
        "Nickname",
    ]
    assert entries[0].raw_value == 3.0


class TestParseF32:
    """Numeric token parsing."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("1", 1.0),
            ("0.5", 0.5),
            ("-2.25", -2.25),
            ("+3", 3.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e2", 100.0),
            ("2.5E-1", 0.25),
        ],
    )
    def test_valid_tokens(self, token, expected):
        assert parse_f32(token) == expected

    @pytest.mark.parametrize("token", ["abc", "", " 1.0", "1.0 ", "1_000", "0x10", "nan", "NaN", "1.0.0"])
    def test_invalid_tokens(self, token):
        assert parse_f32(token) is None

    def test_infinity_is_accepted(self):
        assert parse_f32("inf") == math.inf
        assert parse_f32("-Infinity") == -math.inf

    def test_overflow_becomes_infinity(self):
        assert parse_f32("1e40") == math.inf
