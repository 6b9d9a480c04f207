"""
Domain package exports.

Qt-free Hangul typing-feedback engine: decomposition, classification and
composition tracking.
"""

from .composition import (  # noqa: F401
    CompositionEnd,
    CompositionStart,
    CompositionTracker,
    Edit,
    TrackerUpdate,
    cursor_position,
)
from .enums import MarkState, Verdict  # noqa: F401
from .hangul_unicode import Syllable, compose, decompose, is_hangul, is_jamo  # noqa: F401
from .jamo_classifier import classify  # noqa: F401
from .practice import PracticeSheet  # noqa: F401

__all__ = [
    "CompositionEnd",
    "CompositionStart",
    "CompositionTracker",
    "Edit",
    "MarkState",
    "PracticeSheet",
    "Syllable",
    "TrackerUpdate",
    "Verdict",
    "classify",
    "compose",
    "cursor_position",
    "decompose",
    "is_hangul",
    "is_jamo",
]
