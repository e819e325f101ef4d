"""Merge scanned definitions and saved values into a typed parameter map."""

from __future__ import annotations

from collections.abc import Iterable

from avatarmenu.core.params.models import (
    BoolValue,
    FloatValue,
    IntValue,
    ParameterDefinition,
    ParameterMap,
    ParameterValue,
    SavedEntry,
    default_value,
)
from avatarmenu.core.utils.logging import get_logger
from avatarmenu.core.utils.math import saturating_u8

logger = get_logger(__name__)

BOOL_THRESHOLD = 0.5


def apply_raw_value(current: ParameterValue, raw_value: float) -> ParameterValue:
    """Convert a raw saved number into the variant of ``current``.

    Float values are taken verbatim, ints are truncated toward zero and
    saturated to 0..=255, bools are true at or above 0.5.
    """
    if isinstance(current, FloatValue):
        return FloatValue(value=raw_value)
    if isinstance(current, IntValue):
        return IntValue(value=saturating_u8(raw_value))
    return BoolValue(value=raw_value >= BOOL_THRESHOLD)


def reconcile(
    definitions: Iterable[ParameterDefinition],
    saved_entries: Iterable[SavedEntry] = (),
) -> ParameterMap:
    """Build the parameter map for one load.

    Every definition with a recognized type gets its default value; saved
    entries then overwrite values by name. Unknown types and saved entries
    without a definition are dropped.

    Args:
        definitions: Scanned parameter definitions, in file order
        saved_entries: Scanned saved values, in file order

    Returns:
        Immutable ParameterMap

    Example:
        >>> defs = [ParameterDefinition(name="Jump", declared_type="Bool")]
        >>> saved = [SavedEntry(name="Jump", raw_value=1.0)]
        >>> reconcile(defs, saved)["Jump"]
        BoolValue(kind='bool', value=True)
    """
    values: dict[str, ParameterValue] = {}
    skipped_types = 0
    for definition in definitions:
        ptype = definition.type
        if ptype is None:
            skipped_types += 1
            continue
        values[definition.name] = default_value(ptype)

    applied = 0
    orphans = 0
    for entry in saved_entries:
        current = values.get(entry.name)
        if current is None:
            orphans += 1
            continue
        values[entry.name] = apply_raw_value(current, entry.raw_value)
        applied += 1

    logger.debug(
        f"Reconciled {len(values)} parameter(s): {applied} saved value(s) applied, "
        f"{skipped_types} unknown type(s), {orphans} orphan saved value(s)"
    )
    return ParameterMap(values)
