from __future__ import annotations

"""Hangul symbol tables (domain layer).

This module contains *no* Qt/UI dependencies and no state.

It centralises:
- Lead / vowel / trail ordering in standard Unicode Hangul order
- Compound vowel and trailing-cluster decomposition pairs
- The radix constants used to (de)compose precomposed syllables

Everything here is immutable and shared by every practice session.
"""

from types import MappingProxyType
from typing import Final, Mapping


# -----------------------------------------------------------------------------
# Unicode ranges
# -----------------------------------------------------------------------------

SYLLABLE_FIRST: Final[int] = 0xAC00
SYLLABLE_LAST: Final[int] = 0xD7A3

# Compatibility jamo (standalone glyphs shown while a block is still composing)
JAMO_FIRST: Final[int] = 0x3131
JAMO_LAST: Final[int] = 0x3163

VOWEL_COUNT: Final[int] = 21
TRAIL_COUNT: Final[int] = 28
# Syllables per lead consonant
LEAD_STRIDE: Final[int] = VOWEL_COUNT * TRAIL_COUNT


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong)
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong)
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong)
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Compound symbols
# -----------------------------------------------------------------------------
#
# A compound is typed as two simple keystrokes of the same class; the IME shows
# the first one on its own before the second one merges into it.

COMPOUND_VOWELS: Final[Mapping[str, tuple[str, str]]] = MappingProxyType({
    "ㅘ": ("ㅗ", "ㅏ"),
    "ㅙ": ("ㅗ", "ㅐ"),
    "ㅚ": ("ㅗ", "ㅣ"),
    "ㅝ": ("ㅜ", "ㅓ"),
    "ㅞ": ("ㅜ", "ㅔ"),
    "ㅟ": ("ㅜ", "ㅣ"),
    "ㅢ": ("ㅡ", "ㅣ"),
})

COMPOUND_TRAILS: Final[Mapping[str, tuple[str, str]]] = MappingProxyType({
    "ㄳ": ("ㄱ", "ㅅ"),
    "ㄵ": ("ㄴ", "ㅈ"),
    "ㄶ": ("ㄴ", "ㅎ"),
    "ㄺ": ("ㄹ", "ㄱ"),
    "ㄻ": ("ㄹ", "ㅁ"),
    "ㄼ": ("ㄹ", "ㅂ"),
    "ㄽ": ("ㄹ", "ㅅ"),
    "ㄾ": ("ㄹ", "ㅌ"),
    "ㄿ": ("ㄹ", "ㅍ"),
    "ㅀ": ("ㄹ", "ㅎ"),
    "ㅄ": ("ㅂ", "ㅅ"),
})


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

CHO_INDEX: Final[Mapping[str, int]] = MappingProxyType({j: i for i, j in enumerate(CHOSEONG)})
JUNG_INDEX: Final[Mapping[str, int]] = MappingProxyType({j: i for i, j in enumerate(JUNGSEONG)})
JONG_INDEX: Final[Mapping[str, int]] = MappingProxyType({j: i for i, j in enumerate(JONGSEONG)})
