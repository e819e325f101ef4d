"""JSON file helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: Path | str) -> Any:
    """Read and decode a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        Decoded JSON content

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the content is not valid JSON
    """
    with Path(path).open("r", encoding="utf-8-sig") as f:
        return json.load(f)
