# tests/test_jamo_classifier.py
import pytest

from retype.domain.enums import Verdict
from retype.domain.hangul_tables import CHOSEONG, JONGSEONG, JUNGSEONG
from retype.domain.hangul_unicode import compose, decompose
from retype.domain.jamo_classifier import classify

C, P, PC, W = Verdict.COMPLETE, Verdict.PARTIAL, Verdict.PARTIAL_COMPLETE, Verdict.WRONG


@pytest.mark.classification
@pytest.mark.parametrize("typed,target,nxt,expected", [
    # exact
    ("동", "동", None, C), ("과", "과", None, C), ("a", "a", None, C), (".", ".", None, C),
    # lead only (standalone jamo)
    ("ㄷ", "동", None, P), ("ㅎ", "해", None, P), ("ㅁ", "물", None, P),
    ("ㄱ", "동", None, W), ("ㅂ", "해", None, W),
    # vowel only (standalone jamo)
    ("ㅏ", "가", None, P), ("ㅘ", "과", None, P), ("ㅐ", "해", "물", P),
    ("ㅓ", "가", None, W), ("ㅗ", "과", None, W),
    # lead + vowel, final still missing
    ("도", "동", None, P), ("무", "물", None, P), ("과", "관", None, P),
    # compound vowel in progress
    ("고", "과", None, P), ("구", "궈", None, P), ("그", "긔", None, P),
    ("곡", "과", None, W),
    # jongseong reservation
    ("햄", "해", "물", C), ("햄", "해", "과", W),
    # cluster assembly
    ("묽", "물", "과", PC), ("달", "닳", None, P), ("다", "닳", None, P),
    ("닳", "닳", None, C), ("갈", "갈", None, C), ("갈", "갈", "기", C),
    # plain mistakes
    ("강", "동", None, W), ("당", "동", None, W), ("돈", "동", None, W), ("", "동", None, W),
])
def test_classify_cases(typed, target, nxt, expected):
    assert classify(typed, target, nxt) is expected


@pytest.mark.classification
def test_scenario_donghae():
    assert classify("동", "동", "해") is C
    assert classify("햄", "해", "물") is C
    assert classify("물", "물", "과") is C
    assert classify("묽", "물", "과") is PC
    assert classify("고", "과") is P
    assert classify("과", "과") is C


@pytest.mark.classification
def test_cluster_without_next_syllable_is_wrong():
    assert classify("묽", "물") is W
    assert classify("묽", "물", "다") is W


@pytest.mark.classification
def test_ascii_case_folding():
    for a, b in (("A", "a"), ("a", "A"), ("H", "h"), ("Z", "z")):
        assert classify(a, b) is C
    assert classify("A", "b") is W
    assert classify("a", "B") is W
    assert classify("A", "a", fold_case=False) is W


@pytest.mark.classification
def test_non_letters_compare_exactly():
    assert classify("1", "1") is C
    assert classify("1", "2") is W
    assert classify("!", "!") is C
    assert classify("!", "@") is W
    assert classify("가", "a") is W
    assert classify("a", "가") is W


@pytest.mark.classification
def test_identity_is_complete_for_every_syllable_sample():
    for code in range(0xAC00, 0xD7A4, 97):
        ch = chr(code)
        assert classify(ch, ch, "가") is C


@pytest.mark.classification
def test_lead_symbol_is_partial_for_every_target():
    for code in range(0xAC00, 0xD7A4, 53):
        target = chr(code)
        assert classify(decompose(target).lead, target) is P


@pytest.mark.classification
@pytest.mark.parametrize("lead", ["ㄱ", "ㅎ", "ㅁ"])
@pytest.mark.parametrize("vowel", ["ㅏ", "ㅗ", "ㅢ"])
def test_reservation_accepts_next_lead_as_final(lead, vowel):
    target = compose(lead, vowel)
    for nxt_lead in CHOSEONG:
        if nxt_lead not in JONGSEONG:
            continue
        typed = compose(lead, vowel, nxt_lead)
        assert classify(typed, target, compose(nxt_lead, "ㅏ")) is C


@pytest.mark.classification
def test_vowels_in_jungseong_are_never_partial_for_other_leads():
    for vowel in JUNGSEONG:
        assert classify(compose("ㄴ", vowel), "가") is W


@pytest.mark.classification
def test_multi_codepoint_input_degrades_to_literal():
    assert classify("동해", "동") is W
    assert classify("동해", "동해") is C
