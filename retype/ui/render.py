"""Rich-text rendering of practice marks.

Keep this purely presentational: it turns CharMark rows into HTML for a QLabel and
does not touch trackers or settings.
"""

from __future__ import annotations

import html
from typing import Final, Sequence

from retype.domain.enums import MarkState
from retype.domain.grading import CharMark

STATE_STYLES: Final[dict[MarkState, str]] = {
    MarkState.CORRECT: "color:#16a34a;background-color:#f0fdf4;",
    MarkState.PARTIAL: "color:#b45309;",
    MarkState.WRONG: "color:#dc2626;background-color:#fef2f2;font-weight:bold;",
    MarkState.UNTYPED: "color:#9ca3af;",
    MarkState.SPACE: "",
}

HINT_STYLE: Final[str] = "text-decoration:underline;background-color:#dbeafe;"


def _span(mark: CharMark) -> str:
    text = "&nbsp;" if mark.state is MarkState.SPACE else html.escape(mark.char)
    style = STATE_STYLES.get(mark.state, "")
    if mark.is_hint:
        style += HINT_STYLE
    if not style:
        return text
    return '<span style="%s">%s</span>' % (style, text)


def render_line_html(marks: Sequence[CharMark]) -> str:
    return "".join(_span(m) for m in marks)


def render_marks_html(lines: Sequence[Sequence[CharMark]]) -> str:
    """Render all lines; an empty line keeps its height with a non-breaking space."""
    rows = [render_line_html(line) or "&nbsp;" for line in lines]
    return "<br/>".join(rows)
