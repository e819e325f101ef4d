"""Read avatar parameter files from disk and build parameter maps.

Only I/O problems are reported. Anything wrong with the file contents is
absorbed by the scanners and shows up as fewer records.
"""

from __future__ import annotations

from pathlib import Path

from avatarmenu.core.params.models import ParameterDefinition, ParameterMap, SavedEntry
from avatarmenu.core.params.reconcile import reconcile
from avatarmenu.core.params.scanners import scan_definitions, scan_saved_state
from avatarmenu.core.utils.logging import get_logger

logger = get_logger(__name__)


def read_source_text(path: Path | str) -> str:
    """Read a source file as text.

    Decodes UTF-8 with an optional BOM; undecodable bytes are replaced.

    Args:
        path: File to read

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Parameter file does not exist: {path}")

    logger.debug(f"Reading parameter file: {path}")
    return path.read_bytes().decode("utf-8-sig", errors="replace")


def load_definitions(path: Path | str) -> list[ParameterDefinition]:
    """Read and scan a definition (avatar OSC config) file."""
    return scan_definitions(read_source_text(path))


def load_saved_state(path: Path | str) -> list[SavedEntry]:
    """Read and scan a saved-state (local avatar data) file."""
    return scan_saved_state(read_source_text(path))


def load_parameter_map(
    definition_path: Path | str,
    saved_state_path: Path | str | None = None,
) -> ParameterMap:
    """Load a complete parameter map.

    Both files are read before reconciling, so a failure on either leaves
    no partial result.

    Args:
        definition_path: Avatar OSC config file
        saved_state_path: Local avatar data file, or None for defaults only

    Returns:
        Parameter map for this load

    Raises:
        FileNotFoundError: If either file does not exist
        OSError: If either file cannot be read

    Example:
        >>> pmap = load_parameter_map("avtr_1234.json", "LocalAvatarData/usr_1/avtr_1234")
        >>> pmap["VRCEmote"]
        IntValue(kind='int', value=3)
    """
    definitions = load_definitions(definition_path)
    saved_entries = load_saved_state(saved_state_path) if saved_state_path is not None else []

    parameter_map = reconcile(definitions, saved_entries)
    logger.info(
        f"Loaded {len(parameter_map)} parameter(s) from {Path(definition_path).name}"
        + (f" with {len(saved_entries)} saved value(s)" if saved_state_path is not None else "")
    )
    return parameter_map
