from retype.domain.enums import MarkState
from retype.domain.grading import CharMark
from retype.ui.render import HINT_STYLE, STATE_STYLES, render_line_html, render_marks_html


def test_render_line_uses_state_styles():
    html = render_line_html([CharMark("가", MarkState.CORRECT), CharMark("나", MarkState.WRONG)])
    assert STATE_STYLES[MarkState.CORRECT] in html
    assert STATE_STYLES[MarkState.WRONG] in html
    assert ">가<" in html and ">나<" in html


def test_render_escapes_and_spaces():
    html = render_line_html([CharMark("<", MarkState.UNTYPED), CharMark(" ", MarkState.SPACE)])
    assert "&lt;" in html
    assert html.endswith("&nbsp;")


def test_render_hint_is_underlined():
    html = render_line_html([CharMark("다", MarkState.UNTYPED, is_hint=True)])
    assert HINT_STYLE in html


def test_render_lines_joined_with_breaks():
    html = render_marks_html([[CharMark("가", MarkState.CORRECT)], []])
    assert html.count("<br/>") == 1
    assert html.endswith("&nbsp;")
