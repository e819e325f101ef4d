"""Tests for loading parameter maps from files."""

from __future__ import annotations

from pathlib import Path

import pytest

from avatarmenu.core.params import (
    BoolValue,
    FloatValue,
    IntValue,
    load_definitions,
    load_parameter_map,
    load_saved_state,
    read_source_text,
)


def test_read_source_text_strips_bom(tmp_path: Path):
    path = tmp_path / "avtr.json"
    path.write_bytes(b"\xef\xbb\xbf" + b'  "name": "Jump",\n')

    assert read_source_text(path).startswith("  ")


def test_read_source_text_replaces_undecodable_bytes(tmp_path: Path):
    path = tmp_path / "avtr.json"
    path.write_bytes(b'  "name": "J\xffump",\n  "type": "Bool"\n')

    defs = load_definitions(path)

    assert len(defs) == 1
    assert defs[0].name == "J\ufffdump"


def test_missing_definition_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_parameter_map(tmp_path / "missing.json")


def test_missing_saved_state_file_raises(avatar_config_path: Path, tmp_path: Path):
    """An explicit saved-state path must be readable; no partial result."""
    with pytest.raises(FileNotFoundError):
        load_parameter_map(avatar_config_path, tmp_path / "missing")


def test_unreadable_path_raises(tmp_path: Path):
    """A directory exists but cannot be read as a file."""
    with pytest.raises(OSError):
        read_source_text(tmp_path)


def test_load_definitions_and_saved_state(avatar_config_path: Path, saved_state_file: Path):
    assert len(load_definitions(avatar_config_path)) == 6
    assert len(load_saved_state(saved_state_file)) == 6


def test_load_parameter_map_with_saved_state(avatar_config_path: Path, saved_state_file: Path):
    pmap = load_parameter_map(avatar_config_path, saved_state_file)

    assert pmap == {
        "VRCEmote": IntValue(value=3),
        "Left_Hand_Grip": FloatValue(value=0.75),
        "Jump": BoolValue(value=True),
        "Hat_Toggle": BoolValue(value=False),
        "VelocityZ": FloatValue(value=0.0),
    }


def test_load_parameter_map_defaults_only(avatar_config_path: Path):
    pmap = load_parameter_map(avatar_config_path)

    assert len(pmap) == 5
    assert pmap["VRCEmote"] == IntValue(value=0)
    assert pmap["Jump"] == BoolValue(value=False)


def test_malformed_files_load_without_error(tmp_path: Path):
    config = tmp_path / "avtr.json"
    config.write_text("{ this is : not [ json\n", encoding="utf-8")
    saved = tmp_path / "saved"
    saved.write_text("}}},,,{{{", encoding="utf-8")

    assert len(load_parameter_map(config, saved)) == 0
