"""Locate avatar files inside a VRChat data directory.

VRChat writes one OSC config per avatar and keeps the last parameter values
in a sibling tree:

    <root>/OSC/<user_id>/Avatars/<avatar_id>.json
    <root>/LocalAvatarData/<user_id>/<avatar_id>
"""

from __future__ import annotations

from pathlib import Path

LOCAL_AVATAR_DATA_DIR = "LocalAvatarData"


def avatar_id(config_path: Path | str) -> str:
    """Avatar id of an OSC config file (its file stem)."""
    return Path(config_path).stem


def user_id(config_path: Path | str) -> str | None:
    """User id directory two levels above the config file, if any."""
    parents = Path(config_path).parents
    if len(parents) < 2:
        return None
    return parents[1].stem or None


def vrchat_root(config_path: Path | str) -> Path | None:
    """VRChat data root four levels above the config file, if any."""
    parents = Path(config_path).parents
    if len(parents) < 4:
        return None
    return parents[3]


def saved_state_path(
    config_path: Path | str,
    root: Path | str | None = None,
) -> Path | None:
    """Derive the local avatar data file for an OSC config.

    Args:
        config_path: Path to the avatar OSC config
        root: VRChat data root; derived from ``config_path`` when None

    Returns:
        Path to the saved-state file, or None when the config path is too
        shallow to carry a user id. The file may not exist.

    Example:
        >>> saved_state_path("/vrc/OSC/usr_1/Avatars/avtr_2.json")
        PosixPath('/vrc/LocalAvatarData/usr_1/avtr_2')
    """
    user = user_id(config_path)
    base = Path(root) if root is not None else vrchat_root(config_path)
    if user is None or base is None:
        return None
    return base / LOCAL_AVATAR_DATA_DIR / user / avatar_id(config_path)
