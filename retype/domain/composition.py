"""Per-line composition tracking (domain layer).

This module is intentionally Qt-free.

Responsibilities:
- Follow the IME composition lifecycle of one editable line (Idle / Composing).
- Keep the "settled" watermark: how many non-space characters can no longer be
  changed by the IME and are therefore safe to grade.
- Report where the next-input hint should render, and suppress it mid-composition.

Inputs and outputs are plain data so any front end (Qt, a browser bridge, tests)
can drive it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Events
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CompositionStart:
    """The IME opened a composition (first jamo of a block)."""


@dataclass(frozen=True)
class CompositionEnd:
    """The IME committed the block it was composing."""


@dataclass(frozen=True)
class Edit:
    """The buffer changed. `cursor` is a flat offset into `buffer` (None = end)."""

    buffer: str
    cursor: int | None = None


CompositionEvent = Union[CompositionStart, CompositionEnd, Edit]


@dataclass(frozen=True)
class TrackerUpdate:
    settled_length: int
    hint_position: tuple[int, int] | None


# -----------------------------------------------------------------------------
# Text helpers
# -----------------------------------------------------------------------------

def normalize(text: str) -> str:
    """Drop literal spaces; index i then means the i-th non-space character."""
    return (text or "").replace(" ", "")


def cursor_position(text: str, offset: int) -> tuple[int, int]:
    """Map a flat cursor offset to (line_index, column_within_line).

    Offsets past the end are clamped to the end of `text`.
    """
    line = 0
    column = 0
    for ch in (text or "")[: max(0, int(offset))]:
        if ch == "\n":
            line += 1
            column = 0
        else:
            column += 1
    return line, column


# -----------------------------------------------------------------------------
# State machine
# -----------------------------------------------------------------------------

class CompositionTracker:
    """Composition state for one editable line.

    States:
      Idle       edits settle immediately (deletions lower the watermark)
      Composing  edits only update the raw buffer; the watermark and the hint
                 are frozen until the composition ends

    Events are serialised with a per-tracker lock so a start/end pair delivered
    from another thread cannot interleave with an edit.
    """

    def __init__(self, line_index: int = 0, buffer: str = "") -> None:
        self.line_index = int(line_index)
        self._raw_buffer = buffer or ""
        self._cursor = len(self._raw_buffer)
        self._composing = False
        self._settled_length = len(normalize(self._raw_buffer))
        self._lock = threading.RLock()

    # --- Read-only state ---

    @property
    def raw_buffer(self) -> str:
        return self._raw_buffer

    @property
    def normalized(self) -> str:
        return normalize(self._raw_buffer)

    @property
    def is_composing(self) -> bool:
        return self._composing

    @property
    def settled_length(self) -> int:
        return self._settled_length

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def hint_position(self) -> tuple[int, int] | None:
        if self._composing:
            return None
        return self.line_index, self._settled_length

    def is_settled(self, index: int) -> bool:
        """Grading gate: only settled positions may be classified."""
        return 0 <= index < min(self._settled_length, len(self.normalized))

    def snapshot(self) -> TrackerUpdate:
        return TrackerUpdate(settled_length=self._settled_length, hint_position=self.hint_position)

    # --- Events ---

    def on_event(self, event: CompositionEvent) -> TrackerUpdate:
        with self._lock:
            if isinstance(event, CompositionStart):
                self._start()
            elif isinstance(event, CompositionEnd):
                self._end()
            elif isinstance(event, Edit):
                self._edit(event.buffer, event.cursor)
            else:
                raise TypeError("Unsupported composition event: %r" % (event,))
            return self.snapshot()

    def composition_start(self) -> TrackerUpdate:
        return self.on_event(CompositionStart())

    def composition_end(self) -> TrackerUpdate:
        return self.on_event(CompositionEnd())

    def edit(self, buffer: str, cursor: int | None = None) -> TrackerUpdate:
        return self.on_event(Edit(buffer, cursor))

    def _start(self) -> None:
        if self._composing:
            logger.debug("line %d: composition start while composing; ignored", self.line_index)
            return
        self._composing = True
        logger.debug("line %d: composing (settled=%d)", self.line_index, self._settled_length)

    def _end(self) -> None:
        if not self._composing:
            logger.debug("line %d: composition end while idle; resettling", self.line_index)
        self._composing = False
        self._settle()

    def _edit(self, buffer: str, cursor: int | None) -> None:
        self._raw_buffer = buffer or ""
        if cursor is None:
            self._cursor = len(self._raw_buffer)
        else:
            self._cursor = max(0, min(int(cursor), len(self._raw_buffer)))

        if not self._composing:
            self._settle()

    def _settle(self) -> None:
        previous = self._settled_length
        self._settled_length = len(self.normalized)
        if self._settled_length != previous:
            logger.debug(
                "line %d: settled %d -> %d", self.line_index, previous, self._settled_length
            )
