from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Verdict(str, Enum):
    """Relationship between a typed character and its target character."""

    COMPLETE = "complete"
    PARTIAL = "partial"
    PARTIAL_COMPLETE = "partial_complete"
    WRONG = "wrong"

    @property
    def is_correct(self) -> bool:
        """Complete, or complete under the next-syllable reading."""
        return self in (Verdict.COMPLETE, Verdict.PARTIAL_COMPLETE)


class MarkState(Enum):
    """How a single target character is rendered."""

    CORRECT = "correct"
    PARTIAL = "partial"
    WRONG = "wrong"
    UNTYPED = "untyped"
    SPACE = "space"


class SettingKey(str, Enum):
    FOLD_ASCII_CASE = "fold_ascii_case"
    SHOW_HINT = "show_hint"
    FONT_POINT_SIZE = "font_point_size"
    LOG_LEVEL = "log_level"


@dataclass(frozen=True)
class PracticeSettings:
    fold_ascii_case: bool = True
    show_hint: bool = True
    font_point_size: int = 18
    log_level: str = "INFO"
