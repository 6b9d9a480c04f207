"""Answer scoring helpers.

- `answers_match` / `similarity_score`: whole-answer checks used when a typed answer
  is submitted (line-by-line, whitespace and case insensitive).
- `typing_metrics`: accuracy / error count / speed for a practice run, using the
  jamo classifier so a reserved trailing consonant is not counted as an error.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from retype.domain.composition import normalize
from retype.domain.jamo_classifier import classify

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TypingMetrics:
    accuracy: int = 0
    error_count: int = 0
    speed: int = 0  # characters per minute


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize_line(text: str) -> str:
    """Trim, lowercase and drop every whitespace run."""
    return _WHITESPACE_RE.sub("", (text or "").strip().lower())


def answers_match(user_answer: str, correct_answer: str) -> bool:
    """True when every line matches after normalisation and line counts agree."""
    user_lines = [normalize_line(line) for line in (user_answer or "").split("\n")]
    correct_lines = [normalize_line(line) for line in (correct_answer or "").split("\n")]
    if len(user_lines) != len(correct_lines):
        return False
    return all(u == c for u, c in zip(user_lines, correct_lines))


def similarity_score(user_answer: str, correct_answer: str) -> int:
    """Percentage of positional character matches over the longer normalised text."""
    user = normalize_line(user_answer)
    correct = normalize_line(correct_answer)
    longest = max(len(user), len(correct))
    if longest == 0:
        return 0
    matches = sum(1 for u, c in zip(user, correct) if u == c)
    return _round_half_up(matches / longest * 100)


def typing_metrics(
    typed_text: str,
    target_text: str,
    elapsed_seconds: float,
    *,
    fold_case: bool = True,
) -> TypingMetrics:
    """Score a practice run line by line.

    Characters typed past the end of their target line count as errors.
    """
    typed_lines = (typed_text or "").split("\n")
    target_lines = (target_text or "").split("\n")

    typed_total = 0
    correct = 0
    for i, line in enumerate(typed_lines):
        typed = normalize(line)
        target = normalize(target_lines[i]) if i < len(target_lines) else ""
        typed_total += len(typed)
        for j, ch in enumerate(typed):
            if j >= len(target):
                break
            nxt = target[j + 1] if j + 1 < len(target) else None
            if classify(ch, target[j], nxt, fold_case=fold_case).is_correct:
                correct += 1

    if typed_total == 0:
        return TypingMetrics()

    minutes = float(elapsed_seconds or 0) / 60.0
    speed = _round_half_up(typed_total / minutes) if minutes > 0 else 0
    return TypingMetrics(
        accuracy=_round_half_up(correct / typed_total * 100),
        error_count=typed_total - correct,
        speed=speed,
    )
