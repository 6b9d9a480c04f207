from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from retype.domain.composition import CompositionEnd, CompositionStart, Edit
from retype.domain.grading import CharMark
from retype.domain.practice import PracticeSheet
from retype.domain.scoring import TypingMetrics
from retype.ui.widgets.practice_edit import PracticeEdit

logger = logging.getLogger(__name__)


@dataclass
class PracticeController:
    """Owns the editor <-> PracticeSheet wiring.

    Responsibilities:
    - translate editor signals into composition events, in causal order
    - re-grade after every event and hand marks to an injected renderer
    - time the run and report completion once

    This class does not render anything itself.
    """

    editor: PracticeEdit
    sheet: PracticeSheet
    on_render: Callable[[list[list[CharMark]], TypingMetrics], None]
    on_complete: Callable[[TypingMetrics], None] | None = None
    clock: Callable[[], float] = time.monotonic

    _started_at: float | None = field(default=None, init=False)
    _completed: bool = field(default=False, init=False)

    def wire(self) -> None:
        """Attach Qt signal handlers (idempotent best-effort)."""
        signals = (
            (self.editor.textChanged, self._on_text_changed),
            (self.editor.cursorPositionChanged, self._on_cursor_moved),
            (self.editor.compositionStarted, self._on_composition_started),
            (self.editor.compositionEnded, self._on_composition_ended),
        )
        for signal, slot in signals:
            try:
                try:
                    signal.disconnect(slot)
                except (TypeError, RuntimeError):
                    # Not connected yet
                    pass
                signal.connect(slot)
            except (AttributeError, RuntimeError):
                return
        self.refresh()

    # --- Timing ---

    @property
    def completed(self) -> bool:
        return self._completed

    def elapsed_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        return max(0.0, self.clock() - self._started_at)

    def reset(self) -> None:
        self._started_at = None
        self._completed = False
        self.sheet.reset()
        self.editor.blockSignals(True)
        try:
            self.editor.clear()
        finally:
            self.editor.blockSignals(False)
        self.refresh()

    # --- Signal handlers ---

    def _sync(self, *, include_preedit: bool) -> None:
        text = self.editor.live_text() if include_preedit else self.editor.toPlainText()
        cursor = self.editor.textCursor().position()
        if include_preedit:
            cursor += len(self.editor.preedit_text())
        if self._started_at is None and text:
            self._started_at = self.clock()
        self.sheet.on_event(Edit(text, cursor))

    def _on_text_changed(self) -> None:
        self._sync(include_preedit=self.sheet.is_composing)
        self.refresh()

    def _on_cursor_moved(self) -> None:
        if self.sheet.is_composing:
            return
        self._sync(include_preedit=False)
        self.refresh()

    def _on_composition_started(self) -> None:
        self.sheet.on_event(CompositionStart())
        self._sync(include_preedit=True)
        self.refresh()

    def _on_composition_ended(self) -> None:
        # Buffer first, then settle: the watermark must see the committed text.
        self._sync(include_preedit=False)
        self.sheet.on_event(CompositionEnd())
        self.refresh()

    # --- Output ---

    def refresh(self) -> None:
        metrics = self.sheet.metrics(self.elapsed_seconds())
        try:
            self.on_render(self.sheet.grade(), metrics)
        except (AttributeError, RuntimeError, TypeError):
            # Renderer is injected; keep input handling resilient.
            logger.exception("PracticeController render handler failed")

        if not self._completed and self.sheet.is_complete():
            self._completed = True
            logger.info(
                "Practice complete: accuracy=%d%% errors=%d speed=%d cpm",
                metrics.accuracy,
                metrics.error_count,
                metrics.speed,
            )
            if self.on_complete is not None:
                try:
                    self.on_complete(metrics)
                except (AttributeError, RuntimeError, TypeError):
                    logger.exception("PracticeController completion handler failed")
