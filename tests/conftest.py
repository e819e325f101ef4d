"""Shared pytest fixtures for avatarmenu tests."""

from __future__ import annotations

from pathlib import Path
import shutil

import pytest

from avatarmenu.core.config.loader import clear_app_config_cache
from avatarmenu.core.osc import RecordingTransport

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def vrchat_root(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copy of the sample VRChat data directory in a temp location."""
    root = tmp_path / "VRChat"
    shutil.copytree(fixtures_dir / "vrchat", root)
    return root


@pytest.fixture
def avatar_config_path(vrchat_root: Path) -> Path:
    """Sample avatar OSC config inside the VRChat layout."""
    return vrchat_root / "OSC" / "usr_test" / "Avatars" / "avtr_test.json"


@pytest.fixture
def saved_state_file(vrchat_root: Path) -> Path:
    """Sample local avatar data matching avatar_config_path."""
    return vrchat_root / "LocalAvatarData" / "usr_test" / "avtr_test"


# ============================================================================
# Text Fixtures
# ============================================================================


@pytest.fixture
def jump_speed_definitions() -> str:
    """Definition text with one Bool and one Float parameter."""
    return (
        "{\n"
        '  "id": "avtr_jump",\n'
        '  "name": "Jumper",\n'
        '  "parameters": [\n'
        "    {\n"
        '      "name": "Jump",\n'
        '      "input": {\n'
        '        "address": "/avatar/parameters/Jump",\n'
        '        "type": "Bool"\n'
        "      }\n"
        "    },\n"
        "    {\n"
        '      "name": "Speed",\n'
        '      "input": {\n'
        '        "address": "/avatar/parameters/Speed",\n'
        '        "type": "Float"\n'
        "      }\n"
        "    }\n"
        "  ]\n"
        "}\n"
    )


@pytest.fixture
def jump_speed_saved_state() -> str:
    """Saved-state text for jump_speed_definitions."""
    return '{"animationParameters":[{"name":"Jump","value":1.0},{"name":"Speed","value":0.42}],"eyeHeight":1.6}'


# ============================================================================
# Transport / Config Fixtures
# ============================================================================


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Transport that records sends."""
    return RecordingTransport()


@pytest.fixture(autouse=True)
def _isolate_app_config(monkeypatch: pytest.MonkeyPatch):
    """Keep cached config and OSC env overrides from leaking between tests."""
    monkeypatch.delenv("AVATARMENU_OSC_TARGET", raising=False)
    clear_app_config_cache()
    yield
    clear_app_config_cache()
