"""Scanner for avatar OSC config files (parameter definitions).

The config is pretty-printed JSON, but it is read line by line: a record is a
``"name": "..."`` line followed later by a ``"type": "..."`` line. The avatar's
own name and the output-side duplicate of each type line are absorbed by the
overwrite and discard rules of the two-slot scanner.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from avatarmenu.core.params.models.records import ParameterDefinition, normalize_name
from avatarmenu.core.params.scanners.base import TwoSlotScanner

_NAME_PATTERN = re.compile(r'^\s+"name": "(.+)",')
_TYPE_PATTERN = re.compile(r'^\s+"type": "(\S+)"')


class DefinitionScanner(TwoSlotScanner[str, ParameterDefinition]):
    """Extract (name, declared type) pairs from definition text.

    Example:
        >>> text = '  "name": "Left Hand Grip",\\n    "type": "Float"\\n'
        >>> DefinitionScanner().scan(text)
        [ParameterDefinition(name='Left_Hand_Grip', declared_type='Float')]
    """

    record_kind = "definition"

    def split(self, text: str) -> Iterator[str]:
        for line in text.split("\n"):
            yield line.removesuffix("\r")

    def match_name(self, fragment: str) -> str | None:
        match = _NAME_PATTERN.match(fragment)
        if match is None:
            return None
        return normalize_name(match.group(1))

    def match_second(self, fragment: str) -> str | None:
        match = _TYPE_PATTERN.match(fragment)
        if match is None:
            return None
        return match.group(1)

    def build(self, name: str, second: str) -> ParameterDefinition:
        return ParameterDefinition(name=name, declared_type=second)


def scan_definitions(text: str) -> list[ParameterDefinition]:
    """Scan definition text with a fresh DefinitionScanner."""
    return DefinitionScanner().scan(text)
