"""Avatar session - the editable view over one loaded parameter map.

The session keeps two things apart:
- the immutable ParameterMap snapshot produced by the last load
- a mutable working copy that user edits are applied to

A value is sent to the transport only when an edit actually changes the
working copy, one message per change.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

from avatarmenu.core.avatar.paths import avatar_id as _avatar_id
from avatarmenu.core.avatar.paths import saved_state_path as _saved_state_path
from avatarmenu.core.osc.protocols import ParameterTransport
from avatarmenu.core.params.loader import load_parameter_map
from avatarmenu.core.params.models import (
    BoolValue,
    FloatValue,
    IntValue,
    ParameterMap,
    ParameterValue,
)
from avatarmenu.core.utils.logging import get_logger
from avatarmenu.core.utils.math import clamp

logger = get_logger(__name__)

FLOAT_RANGE = (0.0, 1.0)
INT_RANGE = (0, 255)


def coerce_value(current: ParameterValue, value: Any) -> ParameterValue:
    """Build a value of the same variant as ``current`` from user input.

    Floats are clamped to [0, 1] and ints to [0, 255], matching the ranges
    exposed to the user. Strings are accepted for command-line input.

    Raises:
        ValueError: If ``value`` cannot be interpreted for the variant
    """
    if isinstance(current, BoolValue):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"true", "1", "on", "yes"}:
                return BoolValue(value=True)
            if lowered in {"false", "0", "off", "no"}:
                return BoolValue(value=False)
            raise ValueError(f"Not a boolean value: {value!r}")
        return BoolValue(value=bool(value))

    number = float(value)
    if math.isnan(number):
        raise ValueError(f"Not a number: {value!r}")

    if isinstance(current, IntValue):
        return IntValue(value=int(clamp(number, *INT_RANGE)))

    return FloatValue(value=clamp(number, *FLOAT_RANGE))


class AvatarSession:
    """Editable parameter state for the currently loaded avatar.

    Example:
        >>> session = AvatarSession(RecordingTransport())
        >>> session.load("OSC/usr_1/Avatars/avtr_2.json")
        >>> session.set_value("Jump", True)
        True
    """

    def __init__(self, transport: ParameterTransport, vrchat_root: Path | str | None = None):
        """Initialize an empty session.

        Args:
            transport: Where value changes are sent
            vrchat_root: VRChat data root used to find saved state; derived
                         from the config path when None
        """
        self.transport = transport
        self.vrchat_root = vrchat_root
        self.config_path: Path | None = None
        self._snapshot = ParameterMap()
        self._working: dict[str, ParameterValue] = {}

    @property
    def snapshot(self) -> ParameterMap:
        """Parameter map produced by the last load."""
        return self._snapshot

    @property
    def avatar_id(self) -> str | None:
        if self.config_path is None:
            return None
        return _avatar_id(self.config_path)

    @property
    def parameter_count(self) -> int:
        return len(self._snapshot)

    def load(
        self,
        config_path: Path | str,
        saved_state_path: Path | str | None = None,
    ) -> ParameterMap:
        """Load an avatar config, replacing all previous state.

        When ``saved_state_path`` is None it is derived from the config path;
        a derived file that does not exist yet is skipped. An explicit path
        must be readable.

        Raises:
            FileNotFoundError: If the config or an explicit saved-state file is missing
            OSError: If either file cannot be read
        """
        config_path = Path(config_path)
        log = get_logger(__name__, avatar_id=_avatar_id(config_path))

        if saved_state_path is None:
            derived = _saved_state_path(config_path, self.vrchat_root)
            if derived is not None and derived.exists():
                saved_state_path = derived
            else:
                log.info(f"No saved state for avatar {_avatar_id(config_path)}")

        snapshot = load_parameter_map(config_path, saved_state_path)

        self.config_path = config_path
        self._snapshot = snapshot
        self._working = snapshot.to_dict()
        log.info(f"Avatar {self.avatar_id}: found {len(snapshot)} params")
        return snapshot

    def value(self, name: str) -> ParameterValue:
        """Current working value of a parameter.

        Raises:
            KeyError: If the parameter is not defined for this avatar
        """
        return self._working[name]

    def visible_parameters(self, prefix: str = "") -> list[tuple[str, ParameterValue]]:
        """Name-sorted working values whose name starts with ``prefix``."""
        return ParameterMap(self._working).sorted_items(prefix)

    def set_value(self, name: str, value: Any) -> bool:
        """Apply an edit and send it if it changed the working copy.

        Args:
            name: Parameter name
            value: New value (coerced to the parameter's type)

        Returns:
            True if a message was sent successfully, False if the value was
            unchanged or the transport reported a failure

        Raises:
            KeyError: If the parameter is not defined for this avatar
            ValueError: If the value cannot be coerced
        """
        if name not in self._working:
            raise KeyError(f"Unknown parameter: {name}")

        new_value = coerce_value(self._working[name], value)
        if new_value == self._working[name]:
            return False

        self._working[name] = new_value
        sent = self.transport.send(name, new_value)
        if not sent:
            logger.warning(f"Transport rejected {name} = {new_value.value!r}")
        return sent

    def changed(self) -> dict[str, ParameterValue]:
        """Working values that differ from the loaded snapshot."""
        return {
            name: value
            for name, value in self._working.items()
            if self._snapshot.get(name) != value
        }
