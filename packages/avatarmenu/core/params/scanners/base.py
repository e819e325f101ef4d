"""Two-slot record scanner shared by the definition and saved-state formats.

Both source formats are approximations of JSON that are consumed one
fragment at a time. A record is a "name" fragment followed (not necessarily
immediately) by a second fragment carrying the type or the value. The
scanner keeps a pending name and pairs it with the next second fragment.

Transitions are explicit so the leniency rules can be tested in isolation:

    state           event              next state
    AWAITING_NAME   NONE               AWAITING_NAME
    AWAITING_NAME   NAME               HAVE_NAME
    AWAITING_NAME   SECOND             AWAITING_NAME   (second is discarded)
    AWAITING_NAME   NAME_AND_SECOND    EMIT_READY
    HAVE_NAME       NONE               HAVE_NAME
    HAVE_NAME       NAME               HAVE_NAME       (name is overwritten)
    HAVE_NAME       SECOND             EMIT_READY
    HAVE_NAME       NAME_AND_SECOND    EMIT_READY      (name is overwritten)

EMIT_READY emits one record, clears both slots and returns to AWAITING_NAME.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import ClassVar, Generic, TypeVar

from avatarmenu.core.params.models.enums import ScanEvent, ScanState
from avatarmenu.core.utils.logging import get_logger

logger = get_logger(__name__)

SecondT = TypeVar("SecondT")
RecordT = TypeVar("RecordT")

TRANSITIONS: dict[tuple[ScanState, ScanEvent], ScanState] = {
    (ScanState.AWAITING_NAME, ScanEvent.NONE): ScanState.AWAITING_NAME,
    (ScanState.AWAITING_NAME, ScanEvent.NAME): ScanState.HAVE_NAME,
    (ScanState.AWAITING_NAME, ScanEvent.SECOND): ScanState.AWAITING_NAME,
    (ScanState.AWAITING_NAME, ScanEvent.NAME_AND_SECOND): ScanState.EMIT_READY,
    (ScanState.HAVE_NAME, ScanEvent.NONE): ScanState.HAVE_NAME,
    (ScanState.HAVE_NAME, ScanEvent.NAME): ScanState.HAVE_NAME,
    (ScanState.HAVE_NAME, ScanEvent.SECOND): ScanState.EMIT_READY,
    (ScanState.HAVE_NAME, ScanEvent.NAME_AND_SECOND): ScanState.EMIT_READY,
}


def next_state(state: ScanState, event: ScanEvent) -> ScanState:
    """Look up the transition for ``event`` in ``state``.

    Raises:
        KeyError: If called with EMIT_READY, which is never a resting state.
    """
    return TRANSITIONS[(state, event)]


class TwoSlotScanner(ABC, Generic[SecondT, RecordT]):
    """Base class for lenient name/second-fragment scanners.

    Subclasses define how text is split into fragments, how each fragment is
    matched and how a record is built. Matching never raises: a fragment that
    does not match is a no-op and partial records are dropped at end of input.
    """

    record_kind: ClassVar[str] = "record"

    def scan(self, text: str) -> list[RecordT]:
        """Scan ``text`` and return every complete record in order of appearance."""
        records: list[RecordT] = []
        state = ScanState.AWAITING_NAME
        pending_name: str | None = None

        for fragment in self.split(text):
            name = self.match_name(fragment)
            # The second slot only lives for one fragment: with a pending name
            # it emits immediately, without one it is discarded.
            second = self.match_second(fragment)

            state = next_state(state, ScanEvent.classify(name is not None, second is not None))
            if name is not None:
                pending_name = name

            if state is ScanState.EMIT_READY:
                # EMIT_READY is only reached with both slots filled
                if pending_name is not None and second is not None:
                    records.append(self.build(pending_name, second))
                pending_name = None
                state = ScanState.AWAITING_NAME

        if pending_name is not None:
            logger.debug(f"Discarding unpaired {self.record_kind} name at end of input: {pending_name}")

        logger.debug(f"Scanned {len(records)} {self.record_kind}(s)")
        return records

    @abstractmethod
    def split(self, text: str) -> Iterable[str]:
        """Split source text into fragments."""

    @abstractmethod
    def match_name(self, fragment: str) -> str | None:
        """Return the normalized name carried by ``fragment``, if any."""

    @abstractmethod
    def match_second(self, fragment: str) -> SecondT | None:
        """Return the type/value carried by ``fragment``, if any."""

    @abstractmethod
    def build(self, name: str, second: SecondT) -> RecordT:
        """Build a record from a paired name and second value."""
