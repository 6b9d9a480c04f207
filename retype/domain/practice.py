from __future__ import annotations

"""Multi-line practice sheet (domain layer).

Owns one CompositionTracker per line of the answer text and routes whole-textarea
events to them:
- `Edit(full_text, cursor)` is split on line breaks; the cursor line gets the
  cursor column, other lines are updated only when their text changed.
- Composition start goes to the cursor line; composition end goes to the line
  that started composing, even if the cursor has moved since.

The sheet is the seam a front end renders from: `grade()` returns marks for every
target line and `hint_position` says where the next-input underline goes.
"""

import logging
import threading

from retype.domain.composition import (
    CompositionEnd,
    CompositionEvent,
    CompositionStart,
    CompositionTracker,
    Edit,
    TrackerUpdate,
    cursor_position,
    normalize,
)
from retype.domain.grading import CharMark, grade_line
from retype.domain.scoring import TypingMetrics, typing_metrics

logger = logging.getLogger(__name__)


def _fold_ascii(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


class PracticeSheet:
    def __init__(self, target_text: str, *, fold_case: bool = True, show_hint: bool = True) -> None:
        self.target_text = target_text or ""
        self.target_lines: list[str] = self.target_text.split("\n")
        self.fold_case = bool(fold_case)
        self.show_hint = bool(show_hint)

        self._trackers: list[CompositionTracker] = [
            CompositionTracker(i) for i in range(len(self.target_lines))
        ]
        self._text = ""
        self._cursor = 0
        self._composing_line: int | None = None
        self._lock = threading.RLock()

    # --- State ---

    @property
    def typed_text(self) -> str:
        return self._text

    @property
    def current_line(self) -> int:
        return cursor_position(self._text, self._cursor)[0]

    @property
    def is_composing(self) -> bool:
        return self._composing_line is not None

    @property
    def hint_position(self) -> tuple[int, int] | None:
        if self._composing_line is not None:
            return None
        return self.tracker(self.current_line).hint_position

    def tracker(self, line_index: int) -> CompositionTracker:
        """Return the tracker for `line_index`, creating trackers for extra typed lines."""
        while len(self._trackers) <= line_index:
            self._trackers.append(CompositionTracker(len(self._trackers)))
        return self._trackers[line_index]

    def snapshot(self) -> TrackerUpdate:
        line = self._composing_line if self._composing_line is not None else self.current_line
        return TrackerUpdate(
            settled_length=self.tracker(line).settled_length,
            hint_position=self.hint_position,
        )

    # --- Events ---

    def on_event(self, event: CompositionEvent) -> TrackerUpdate:
        with self._lock:
            if isinstance(event, CompositionStart):
                if self._composing_line is None:
                    self._composing_line = self.current_line
                self.tracker(self._composing_line).on_event(event)
            elif isinstance(event, CompositionEnd):
                line = self._composing_line if self._composing_line is not None else self.current_line
                self._composing_line = None
                self.tracker(line).on_event(event)
            elif isinstance(event, Edit):
                self._apply_edit(event)
            else:
                raise TypeError("Unsupported composition event: %r" % (event,))
            return self.snapshot()

    def _apply_edit(self, event: Edit) -> None:
        text = event.buffer or ""
        cursor = len(text) if event.cursor is None else max(0, min(int(event.cursor), len(text)))
        self._text = text
        self._cursor = cursor

        lines = text.split("\n")
        cursor_line, cursor_column = cursor_position(text, cursor)
        for i in range(max(len(lines), len(self._trackers))):
            line_text = lines[i] if i < len(lines) else ""
            tr = self.tracker(i)
            if i == cursor_line:
                tr.edit(line_text, cursor_column)
            elif line_text != tr.raw_buffer:
                tr.edit(line_text)

    # --- Rendering / results ---

    def grade(self) -> list[list[CharMark]]:
        """Marks for every target line; the hint is placed on the cursor line only."""
        hint = self.hint_position if self.show_hint else None
        out: list[list[CharMark]] = []
        for i, target_line in enumerate(self.target_lines):
            tr = self.tracker(i)
            hint_column = hint[1] if hint is not None and hint[0] == i else None
            out.append(
                grade_line(
                    target_line,
                    tr.raw_buffer,
                    tr.settled_length,
                    hint_column=hint_column,
                    fold_case=self.fold_case,
                )
            )
        return out

    def line_progress(self) -> float:
        """Percentage of target characters that are settled, across all lines."""
        total = sum(len(normalize(line)) for line in self.target_lines)
        if total == 0:
            return 0.0
        done = 0
        for i, line in enumerate(self.target_lines):
            done += min(self.tracker(i).settled_length, len(normalize(line)))
        return done / total * 100.0

    def is_complete(self) -> bool:
        """True once every target line is settled and literally matches."""
        if self.is_composing:
            return False
        typed_lines = self._text.split("\n")
        if len(typed_lines) != len(self.target_lines):
            return False
        for i, target_line in enumerate(self.target_lines):
            tr = self.tracker(i)
            typed = normalize(tr.raw_buffer)
            target = normalize(target_line)
            if tr.settled_length < len(target):
                return False
            if self.fold_case:
                typed, target = _fold_ascii(typed), _fold_ascii(target)
            if typed != target:
                return False
        return True

    def settled_text(self) -> str:
        """Typed text cut at each line's watermark (spaces dropped).

        A character still under composition is not part of it.
        """
        lines = []
        for i in range(len(self._text.split("\n"))):
            tr = self.tracker(i)
            lines.append(tr.normalized[: tr.settled_length])
        return "\n".join(lines)

    def metrics(self, elapsed_seconds: float) -> TypingMetrics:
        return typing_metrics(self.settled_text(), self.target_text, elapsed_seconds, fold_case=self.fold_case)

    def reset(self) -> None:
        with self._lock:
            logger.debug("practice sheet reset")
            self._trackers = [CompositionTracker(i) for i in range(len(self.target_lines))]
            self._text = ""
            self._cursor = 0
            self._composing_line = None
