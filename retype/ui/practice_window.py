"""Practice window factory.

Public API:
- create_practice_window(...): builds and returns the window without starting the
  Qt event loop, so tests can instantiate it headlessly.

The window stores its controller on `window.controller` so tests can reach it.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QCheckBox, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from retype.controllers.practice_controller import PracticeController
from retype.domain.grading import CharMark
from retype.domain.practice import PracticeSheet
from retype.domain.scoring import TypingMetrics
from retype.services.settings_store import SettingsStore
from retype.ui.render import render_marks_html
from retype.ui.widgets.practice_edit import PracticeEdit


def format_elapsed(seconds: float) -> str:
    total = max(0, int(seconds or 0))
    return "%d:%02d" % (total // 60, total % 60)


def format_metrics(
    metrics: TypingMetrics,
    *,
    elapsed_seconds: float = 0.0,
    progress: float = 0.0,
    complete: bool = False,
) -> str:
    text = "Accuracy %d%% · Errors %d · %d chars/min · Time %s · Progress %d%%" % (
        metrics.accuracy,
        metrics.error_count,
        metrics.speed,
        format_elapsed(elapsed_seconds),
        int(progress),
    )
    if complete:
        text += " · Done"
    return text


class PracticeWindow(QWidget):
    def __init__(self, target_text: str, *, settings_path: str | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("PracticeWindow")
        self.setWindowTitle("Retype")

        self.settings_store = SettingsStore(settings_path=settings_path)
        settings = self.settings_store.get_practice_settings()
        font = QFont()
        font.setPointSize(int(settings.font_point_size))

        self.label_target = QLabel(self)
        self.label_target.setObjectName("labelTarget")
        self.label_target.setTextFormat(Qt.TextFormat.RichText)
        self.label_target.setWordWrap(True)
        self.label_target.setFont(font)

        self.editor = PracticeEdit(self)
        self.editor.setFont(font)

        self.label_metrics = QLabel(self)
        self.label_metrics.setObjectName("labelMetrics")

        self.chk_show_hint = QCheckBox("Show next-input hint", self)
        self.chk_show_hint.setObjectName("chkShowHint")
        self.chk_show_hint.setChecked(settings.show_hint)

        self.chk_fold_case = QCheckBox("Ignore letter case", self)
        self.chk_fold_case.setObjectName("chkFoldCase")
        self.chk_fold_case.setChecked(settings.fold_ascii_case)

        self.btn_reset = QPushButton("Restart", self)
        self.btn_reset.setObjectName("btnReset")

        controls = QHBoxLayout()
        controls.addWidget(self.chk_show_hint)
        controls.addWidget(self.chk_fold_case)
        controls.addStretch(1)
        controls.addWidget(self.btn_reset)

        layout = QVBoxLayout(self)
        layout.addWidget(self.label_target)
        layout.addWidget(self.editor, 1)
        layout.addWidget(self.label_metrics)
        layout.addLayout(controls)

        self.sheet = PracticeSheet(
            target_text,
            fold_case=settings.fold_ascii_case,
            show_hint=settings.show_hint,
        )
        self.controller = PracticeController(
            editor=self.editor,
            sheet=self.sheet,
            on_render=self._render,
        )
        self.controller.wire()
        self.btn_reset.clicked.connect(self._on_reset)
        self.chk_show_hint.toggled.connect(self._on_show_hint_toggled)
        self.chk_fold_case.toggled.connect(self._on_fold_case_toggled)

    def _render(self, lines: list[list[CharMark]], metrics: TypingMetrics) -> None:
        self.label_target.setText(render_marks_html(lines))
        self.label_metrics.setText(
            format_metrics(
                metrics,
                elapsed_seconds=self.controller.elapsed_seconds(),
                progress=self.sheet.line_progress(),
                complete=self.sheet.is_complete(),
            )
        )

    def _on_reset(self) -> None:
        self.controller.reset()
        self.editor.setFocus()

    def _on_show_hint_toggled(self, checked: bool) -> None:
        self.sheet.show_hint = bool(checked)
        self.settings_store.set_show_hint(checked)
        self.controller.refresh()

    def _on_fold_case_toggled(self, checked: bool) -> None:
        self.sheet.fold_case = bool(checked)
        self.settings_store.set_fold_ascii_case(checked)
        self.controller.refresh()


def create_practice_window(target_text: str, *, settings_path: str | None = None) -> PracticeWindow:
    """Create and return the practice window.

    This function must NOT call app.exec(). It assumes a QApplication exists.
    """
    return PracticeWindow(target_text, settings_path=settings_path)
