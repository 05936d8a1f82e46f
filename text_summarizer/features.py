from __future__ import annotations
from typing import Iterable, List, Optional
from collections import Counter
import math
from .config import SummarizerConfig, DEFAULT_CONFIG
from .datatypes import FrequencyTable
from .preprocessing import tokenize

def build_frequencies(tokens: Iterable[str], cfg: Optional[SummarizerConfig] = None) -> FrequencyTable:
    """
    Term weights for a document:
      weight(t) = count(t) / max count, over non-stopword tokens only.
    An empty table is valid; unknown tokens weigh 0 on lookup.
    """
    cfg = cfg or DEFAULT_CONFIG
    counts = Counter(t for t in tokens if t not in cfg.stopwords)
    if not counts:
        return {}
    top = max(counts.values())
    return {t: c / top for t, c in counts.items()}

def score_sentence(sentence: str, table: FrequencyTable) -> float:
    # mean per-token weight; stopwords miss the table and count as 0
    tokens = tokenize(sentence)
    if not tokens:
        return 0.0
    return sum(table.get(t, 0.0) for t in tokens) / len(tokens)

def sentence_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """Shared-word overlap normalized by log sentence lengths (sets, not multisets)."""
    a_set, b_set = set(a), set(b)
    denom = math.log(len(a_set) + 1) + math.log(len(b_set) + 1)
    if denom == 0.0:
        return 0.0
    return len(a_set & b_set) / denom

def frequency_scores(sentences: List[str], text: str, cfg: Optional[SummarizerConfig] = None) -> List[float]:
    table = build_frequencies(tokenize(text), cfg=cfg)
    return [score_sentence(s, table) for s in sentences]
