"""Practice input widget.

A QPlainTextEdit that reports IME composition as signals. Qt has no separate
composition-start/end events; it delivers QInputMethodEvents carrying a preedit
string (the block being assembled) and/or a commit string. We translate:

- preedit appears                  -> compositionStarted
- commit arrives / preedit cleared -> compositionEnded

Both signals are emitted *after* Qt applied the event, so a listener always sees
the committed buffer.
"""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QInputMethodEvent
from PyQt6.QtWidgets import QPlainTextEdit, QWidget


class PracticeEdit(QPlainTextEdit):
    compositionStarted = pyqtSignal()
    compositionEnded = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("practiceEdit")
        self._composing = False
        self._preedit = ""

    @property
    def is_composing(self) -> bool:
        return self._composing

    def preedit_text(self) -> str:
        return self._preedit

    def live_text(self) -> str:
        """Committed text with the in-progress preedit spliced in at the cursor."""
        text = self.toPlainText()
        if not self._preedit:
            return text
        pos = self.textCursor().position()
        return text[:pos] + self._preedit + text[pos:]

    def inputMethodEvent(self, event: QInputMethodEvent) -> None:  # noqa: N802 (Qt override)
        # Set before super() so textChanged listeners see the new preedit.
        preedit = event.preeditString()
        commit = event.commitString()
        self._preedit = preedit

        super().inputMethodEvent(event)

        if self._composing and (commit or not preedit):
            self._composing = False
            self.compositionEnded.emit()
        if preedit and not self._composing:
            self._composing = True
            self.compositionStarted.emit()
