"""
Tests for the readability metrics.
"""

import math

import pytest

from text_summarizer.config import SummarizerConfig
from text_summarizer.readability import (
    ReadabilityReport,
    analyze,
    char_count,
    reading_ease,
    reading_time,
    round_half_up,
    sentence_count,
    syllable_count,
    word_count,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", 0),
        ("123", 0),
        ("the", 1),
        ("cake", 1),
        ("a", 1),
        ("e", 1),
        ("rhythm", 1),
        ("queue", 1),
        ("Hello!", 2),
        ("beautiful", 3),
    ],
)
def test_syllable_count(word, expected):
    assert syllable_count(word) == expected


def test_word_count_uses_full_tokenization():
    assert word_count("Hello, world! It's the fine-tuned one.") == 6
    assert word_count("") == 0


def test_char_count_skips_whitespace():
    assert char_count("a b\nc\t d") == 4
    assert char_count("Hi, you!") == 7
    assert char_count("   ") == 0


def test_sentence_count(article):
    assert sentence_count(article) == 7
    assert sentence_count("") == 0


def test_reading_ease_undefined_for_empty_input():
    assert math.isnan(reading_ease(""))
    assert math.isnan(reading_ease("   "))
    # one sentence but no words
    assert math.isnan(reading_ease("!!!"))


def test_reading_ease_formula():
    # 3 words, 1 sentence, 3 syllables
    assert reading_ease("The cat sat.") == pytest.approx(0.39 * 3 + 11.8 * 1 - 15.59)


def test_reading_ease_finite_for_real_text(article):
    assert math.isfinite(reading_ease(article))


@pytest.mark.parametrize(
    "words, expected",
    [(0, "0s"), (50, "15s"), (100, "30s"), (299, "1m"), (300, "2m"), (400, "2m")],
)
def test_reading_time(words, expected):
    assert reading_time("word " * words) == expected


def test_reading_time_respects_words_per_minute():
    assert reading_time("word " * 50, cfg=SummarizerConfig(words_per_minute=100)) == "30s"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(0.49) == 0


def test_analyze_collects_all_metrics(article):
    report = analyze(article)
    assert isinstance(report, ReadabilityReport)
    assert report.sentences == 7
    assert report.words == word_count(article)
    assert report.characters == char_count(article)
    assert report.reading_ease == pytest.approx(reading_ease(article))
    assert report.reading_time == reading_time(article)


def test_analyze_empty_text():
    report = analyze("")
    assert (report.sentences, report.words, report.characters) == (0, 0, 0)
    assert math.isnan(report.reading_ease)
    assert report.reading_time == "0s"
