"""
Readability and reading-effort metrics.

All functions are total: empty or whitespace-only text gives zero counts,
``math.nan`` for the reading ease score and ``"0s"`` for the reading time.
"""
from __future__ import annotations
import math
import re
from dataclasses import dataclass
from typing import Optional
from .config import SummarizerConfig, DEFAULT_CONFIG
from .preprocessing import split_sentences, tokenize

_NON_LETTER_RE = re.compile(r"[^a-z]")
_VOWEL_RUN_RE = re.compile(r"[aeiouy]+")
_WS_RE = re.compile(r"\s")


def round_half_up(x: float) -> int:
    # 2.5 -> 3, unlike round()
    return int(math.floor(x + 0.5))


def word_count(text: str) -> int:
    return len(tokenize(text))


def char_count(text: str) -> int:
    """Non-whitespace characters in the raw text."""
    return len(_WS_RE.sub("", text))


def sentence_count(text: str) -> int:
    return len(split_sentences(text))


def syllable_count(word: str) -> int:
    """
    Vowel-group heuristic: strip non-letters, drop one trailing 'e', count
    runs of a/e/i/o/u/y. Any non-empty word has at least one syllable.
    """
    w = _NON_LETTER_RE.sub("", word.lower())
    if not w:
        return 0
    if w.endswith("e"):
        w = w[:-1]
    return max(1, len(_VOWEL_RUN_RE.findall(w)))


def reading_ease(text: str) -> float:
    """
    Flesch-Kincaid grade style score:
      0.39 × (words / sentences) + 11.8 × (syllables / words) − 15.59

    Returns ``math.nan`` when the text has no sentences or no words.
    """
    sentences = split_sentences(text)
    words = tokenize(text)
    if not sentences or not words:
        return math.nan
    syllables = sum(syllable_count(w) for w in words)
    return 0.39 * (len(words) / len(sentences)) + 11.8 * (syllables / len(words)) - 15.59


def reading_time(text: str, cfg: Optional[SummarizerConfig] = None) -> str:
    cfg = cfg or DEFAULT_CONFIG
    minutes = word_count(text) / cfg.words_per_minute
    if minutes < 1:
        return f"{round_half_up(minutes * 60)}s"
    return f"{max(1, round_half_up(minutes))}m"


@dataclass(frozen=True)
class ReadabilityReport:
    sentences: int
    words: int
    characters: int
    reading_ease: float
    reading_time: str


def analyze(text: str, cfg: Optional[SummarizerConfig] = None) -> ReadabilityReport:
    return ReadabilityReport(
        sentences=sentence_count(text),
        words=word_count(text),
        characters=char_count(text),
        reading_ease=reading_ease(text),
        reading_time=reading_time(text, cfg=cfg),
    )
