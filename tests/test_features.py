"""
Tests for the term-frequency model, sentence scoring and pairwise similarity.
"""

import math

import pytest

from text_summarizer.features import (
    build_frequencies,
    frequency_scores,
    score_sentence,
    sentence_similarity,
)


def test_build_frequencies_normalizes_by_max_count():
    table = build_frequencies(["ai", "is", "ai", "cool"])
    assert table == {"ai": 1.0, "cool": 0.5}


def test_build_frequencies_ignores_stopwords():
    assert build_frequencies(["the", "a", "of"]) == {}


def test_build_frequencies_empty():
    assert build_frequencies([]) == {}


def test_build_frequencies_weights_in_unit_interval():
    table = build_frequencies("x y y z z z w".split())
    assert max(table.values()) == 1.0
    assert all(0.0 < w <= 1.0 for w in table.values())


def test_score_sentence_is_mean_token_weight():
    table = {"ai": 1.0, "cool": 0.5}
    # "is" is a stopword and contributes 0 but still counts as a token
    assert score_sentence("AI is cool", table) == pytest.approx(0.5)


def test_score_sentence_without_tokens_is_zero():
    assert score_sentence("!!! ...", {"ai": 1.0}) == 0.0


def test_score_sentence_with_empty_table_is_zero():
    assert score_sentence("Anything goes here", {}) == 0.0


def test_frequency_scores_example(ai_text):
    sentences = ["AI is powerful.", "AI changes industries.", "AI raises ethical questions."]
    scores = frequency_scores(sentences, ai_text)
    assert scores[0] == pytest.approx((1 + 0 + 1 / 3) / 3)
    assert scores[1] == pytest.approx((1 + 1 / 3 + 1 / 3) / 3)
    assert scores[2] == pytest.approx(0.5)


def test_sentence_similarity_formula():
    expected = 1 / (math.log(3) + math.log(3))
    assert sentence_similarity(["a", "b"], ["b", "c"]) == pytest.approx(expected)


def test_sentence_similarity_uses_sets():
    expected = 1 / (math.log(2) + math.log(2))
    assert sentence_similarity(["x", "x", "x"], ["x"]) == pytest.approx(expected)


def test_sentence_similarity_empty_inputs():
    assert sentence_similarity([], []) == 0.0
    assert sentence_similarity([], ["x"]) == 0.0


def test_sentence_similarity_symmetric():
    a, b = ["solar", "panel", "sun"], ["sun", "wind"]
    assert sentence_similarity(a, b) == sentence_similarity(b, a)
