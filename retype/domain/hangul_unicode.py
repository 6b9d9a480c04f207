from __future__ import annotations

"""Hangul Unicode (de)composition helpers.

This module is *domain* logic (no Qt dependencies).

It provides:
  - `decompose()` mapping a precomposed syllable to its (lead, vowel, trail) jamo
  - `compose()` for the inverse radix arithmetic
  - Small predicates used by the classifier (`is_hangul`, `is_jamo`)

Notes:
  - All jamo are returned as *compatibility* jamo (e.g. "ㄱ", not U+1100), because
    that is what an IME shows while a block is still being assembled.
"""

from dataclasses import dataclass

from retype.domain.hangul_tables import (
    CHO_INDEX,
    CHOSEONG,
    JAMO_FIRST,
    JAMO_LAST,
    JONG_INDEX,
    JONGSEONG,
    JUNG_INDEX,
    JUNGSEONG,
    LEAD_STRIDE,
    SYLLABLE_FIRST,
    SYLLABLE_LAST,
    TRAIL_COUNT,
)


@dataclass(frozen=True)
class Syllable:
    """A decomposed Hangul syllable. `trail` is "" when the block has no final."""

    lead: str
    vowel: str
    trail: str = ""

    @property
    def has_trail(self) -> bool:
        return bool(self.trail)


def _single_codepoint(char: str) -> int | None:
    if not isinstance(char, str) or len(char) != 1:
        return None
    return ord(char)


def is_hangul(char: str) -> bool:
    """Return True if `char` is a single precomposed Hangul syllable (가..힣)."""
    code = _single_codepoint(char)
    return code is not None and SYLLABLE_FIRST <= code <= SYLLABLE_LAST


def is_jamo(char: str) -> bool:
    """Return True if `char` is a standalone compatibility consonant or vowel (ㄱ..ㅣ)."""
    code = _single_codepoint(char)
    return code is not None and JAMO_FIRST <= code <= JAMO_LAST


def decompose(char: str) -> Syllable | None:
    """Split a Hangul syllable into compatibility jamo.

    Args:
        char: a single character.

    Returns:
        The decomposed syllable, or None when `char` is not a precomposed Hangul
        syllable (callers fall back to literal comparison).
    """
    if not is_hangul(char):
        return None

    offset = ord(char) - SYLLABLE_FIRST
    return Syllable(
        lead=CHOSEONG[offset // LEAD_STRIDE],
        vowel=JUNGSEONG[(offset % LEAD_STRIDE) // TRAIL_COUNT],
        trail=JONGSEONG[offset % TRAIL_COUNT],
    )


def compose(lead: str, vowel: str, trail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Uses the Unicode Hangul Syllables algorithm:
        SBase + LIndex * 588 + VIndex * 28 + TIndex

    Raises:
        ValueError: if any jamo is not valid in its position.
    """
    li = CHO_INDEX.get(lead)
    vi = JUNG_INDEX.get(vowel)
    ti = JONG_INDEX.get(trail or "")
    if li is None or vi is None or ti is None:
        raise ValueError("Invalid jamo for compose: lead=%r vowel=%r trail=%r" % (lead, vowel, trail))

    return chr(SYLLABLE_FIRST + li * LEAD_STRIDE + vi * TRAIL_COUNT + ti)


def split_graphemes(text: str) -> list[str]:
    """Split text into per-codepoint characters."""
    return list(text or "")
