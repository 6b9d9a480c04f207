"""Partial-match classification of a typed character against its target.

An IME never hands over a half-typed Hangul block atomically. It emits a series
of provisional snapshots (ㄷ, 도, 동, ...) and each one has to be judged against
the character the user is *going* to end up with. `classify()` answers that for
one snapshot:

- COMPLETE          the snapshot is the target (or the target plus a trailing
                    consonant that really belongs to the next syllable)
- PARTIAL           the snapshot is a valid prefix of the target
- PARTIAL_COMPLETE  the snapshot carries a two-part final whose first half
                    finishes the target and whose second half starts the next
                    syllable (묽 while typing 물과)
- WRONG             anything else

The function is total: unrecognised input degrades to WRONG and never raises.
"""

from __future__ import annotations

from retype.domain.enums import Verdict
from retype.domain.hangul_tables import COMPOUND_TRAILS, COMPOUND_VOWELS
from retype.domain.hangul_unicode import Syllable, decompose, is_jamo


def _is_ascii_letter(char: str) -> bool:
    return len(char) == 1 and char.isascii() and char.isalpha()


def _literal_match(typed: str, target: str, fold_case: bool) -> bool:
    if typed == target:
        return True
    if fold_case and _is_ascii_letter(typed) and _is_ascii_letter(target):
        return typed.lower() == target.lower()
    return False


def _classify_trail(typed: Syllable, target: Syllable, next_target: str | None) -> Verdict:
    """Lead and vowel already match; judge the trailing consonant."""
    if typed.trail == target.trail:
        return Verdict.COMPLETE

    if not typed.has_trail:
        # Target still expects its final consonant.
        return Verdict.PARTIAL

    nxt = decompose(next_target) if next_target else None

    # Jongseong reservation: the typed final is the next block's lead.
    if not target.has_trail and nxt is not None and typed.trail == nxt.lead:
        return Verdict.COMPLETE

    # First half of the target's cluster (달 on the way to 닳).
    cluster = COMPOUND_TRAILS.get(target.trail)
    if cluster is not None and typed.trail == cluster[0]:
        return Verdict.PARTIAL

    # Typed cluster = target final + next lead (묽 while typing 물과).
    typed_cluster = COMPOUND_TRAILS.get(typed.trail)
    if (
        typed_cluster is not None
        and target.has_trail
        and typed_cluster[0] == target.trail
        and nxt is not None
        and typed_cluster[1] == nxt.lead
    ):
        return Verdict.PARTIAL_COMPLETE

    return Verdict.WRONG


def _classify_vowel(typed: Syllable, target: Syllable) -> Verdict:
    """Lead matches, vowel differs: accept the first half of a compound vowel."""
    if typed.has_trail:
        return Verdict.WRONG
    parts = COMPOUND_VOWELS.get(target.vowel)
    if parts is not None and typed.vowel == parts[0]:
        return Verdict.PARTIAL
    return Verdict.WRONG


def classify(
    typed: str,
    target: str,
    next_target: str | None = None,
    *,
    fold_case: bool = True,
) -> Verdict:
    """Classify one typed character against its target.

    Args:
        typed: the character currently in the input at this position (may be a
            standalone jamo or a provisional syllable).
        target: the expected character.
        next_target: the character following `target` in the answer, if any.
        fold_case: compare ASCII letters case-insensitively.

    Returns:
        A Verdict; never raises.
    """
    if not typed or not isinstance(typed, str) or not isinstance(target, str):
        return Verdict.WRONG

    if _literal_match(typed, target, fold_case):
        return Verdict.COMPLETE

    target_parts = decompose(target)
    if target_parts is None:
        return Verdict.WRONG

    if is_jamo(typed):
        if typed in (target_parts.lead, target_parts.vowel):
            return Verdict.PARTIAL
        return Verdict.WRONG

    typed_parts = decompose(typed)
    if typed_parts is None:
        return Verdict.WRONG

    if typed_parts.lead != target_parts.lead:
        return Verdict.WRONG

    if typed_parts.vowel == target_parts.vowel:
        return _classify_trail(typed_parts, target_parts, next_target)

    return _classify_vowel(typed_parts, target_parts)
