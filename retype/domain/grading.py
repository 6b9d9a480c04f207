"""Per-line grading into render marks.

Turns (target line, typed line, settled watermark) into one `CharMark` per target
character. Spaces in the target are rendered but never classified; index i always
refers to the i-th non-space character of both texts.
"""

from __future__ import annotations

from dataclasses import dataclass

from retype.domain.composition import normalize
from retype.domain.enums import MarkState, Verdict
from retype.domain.jamo_classifier import classify


_STATE_FOR_VERDICT: dict[Verdict, MarkState] = {
    Verdict.COMPLETE: MarkState.CORRECT,
    Verdict.PARTIAL_COMPLETE: MarkState.CORRECT,
    Verdict.PARTIAL: MarkState.PARTIAL,
    Verdict.WRONG: MarkState.WRONG,
}


@dataclass(frozen=True)
class CharMark:
    char: str
    state: MarkState
    verdict: Verdict | None = None
    is_hint: bool = False


def line_verdicts(
    target_line: str,
    typed_line: str,
    settled_length: int,
    *,
    fold_case: bool = True,
) -> list[Verdict]:
    """Classify every settled position of a line, in order."""
    target = normalize(target_line)
    typed = normalize(typed_line)
    limit = min(max(0, int(settled_length)), len(typed), len(target))

    verdicts: list[Verdict] = []
    for i in range(limit):
        nxt = target[i + 1] if i + 1 < len(target) else None
        verdicts.append(classify(typed[i], target[i], nxt, fold_case=fold_case))
    return verdicts


def grade_line(
    target_line: str,
    typed_line: str,
    settled_length: int,
    *,
    hint_column: int | None = None,
    fold_case: bool = True,
) -> list[CharMark]:
    """Return render marks for `target_line`.

    Args:
        target_line: the expected text of this line (spaces allowed).
        typed_line: the user's raw text for this line.
        settled_length: positions below this watermark are classified; the rest
            render as untyped regardless of the buffer contents.
        hint_column: normalized index that should carry the next-input hint, or
            None to render no hint on this line.
    """
    verdicts = line_verdicts(target_line, typed_line, settled_length, fold_case=fold_case)

    marks: list[CharMark] = []
    index = 0
    for ch in target_line or "":
        if ch == " ":
            marks.append(CharMark(ch, MarkState.SPACE))
            continue

        is_hint = hint_column is not None and index == hint_column
        if index < len(verdicts):
            verdict = verdicts[index]
            marks.append(CharMark(ch, _STATE_FOR_VERDICT[verdict], verdict, is_hint))
        else:
            marks.append(CharMark(ch, MarkState.UNTYPED, None, is_hint))
        index += 1
    return marks
