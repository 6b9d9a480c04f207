from retype.domain.scoring import (
    TypingMetrics,
    answers_match,
    normalize_line,
    similarity_score,
    typing_metrics,
)

ANTHEM = "동해물과 백두산이 마르고 닳도록\n무궁화 삼천리 화려강산\n대한민국 만세"


def test_normalize_line():
    assert normalize_line("  Hello  World ") == "helloworld"
    assert normalize_line("동해물과\t백두산") == "동해물과백두산"
    assert normalize_line("") == ""


def test_answers_match_exact():
    assert answers_match(ANTHEM, ANTHEM)


def test_answers_match_ignores_spacing():
    user = "동해물과  백두산이   마르고 닳도록\n무궁화삼천리화려강산\n대한민국만세"
    assert answers_match(user, ANTHEM)


def test_answers_match_rejects_changed_line():
    user = "동해물과 백두산이 마르고 닳도록\n무궁화 삼천리 화려강산ㅋㅋ\n대한민국 만세"
    assert not answers_match(user, ANTHEM)


def test_answers_match_rejects_line_count_difference():
    user = "동해물과 백두산이 마르고 닳도록\n무궁화 삼천리 화려강산"
    assert not answers_match(user, ANTHEM)


def test_similarity_exact():
    text = "동해물과백두산이마르고닳도록무궁화삼천리화려강산대한민국만세"
    assert similarity_score(text, text) == 100


def test_similarity_partial():
    user = "동해물과백두산이마르고닳도록무궁화삼천리화려강산대한사람대한으로길이보전하세"
    correct = "동해물과백두산이마르고닳도록무궁화삼천리화려강산대한민국만세"
    assert similarity_score(user, correct) == 68


def test_similarity_disjoint_and_lengths():
    assert similarity_score("aaaaaaaaaa", "bbbbbbbbbb") == 0
    assert similarity_score("abc", "abcdef") == 50
    assert similarity_score("", "") == 0


def test_typing_metrics_counts_wrong_syllable():
    metrics = typing_metrics("동해뭉", "동해물과", 30)
    assert metrics == TypingMetrics(accuracy=67, error_count=1, speed=6)


def test_typing_metrics_extra_characters_are_errors():
    assert typing_metrics("abcd", "abc", 60) == TypingMetrics(accuracy=75, error_count=1, speed=4)


def test_typing_metrics_reserved_final_is_not_an_error():
    metrics = typing_metrics("햄", "해물", 60)
    assert metrics.error_count == 0
    assert metrics.accuracy == 100


def test_typing_metrics_multiline_and_empty():
    assert typing_metrics("", "abc", 10) == TypingMetrics()
    metrics = typing_metrics("ab\ncd", "ab\ncx", 0)
    assert metrics.accuracy == 75
    assert metrics.error_count == 1
    assert metrics.speed == 0
