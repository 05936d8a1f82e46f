from __future__ import annotations
import logging
from typing import List, Optional, Union
from .config import SummarizerConfig, DEFAULT_CONFIG, Strategy, InvalidConfiguration
from .datatypes import RankedSentence
from .preprocessing import split_sentences
from .readability import round_half_up
from .scoring import score_sentences

logger = logging.getLogger(__name__)

def validate_ratio(ratio) -> float:
    if isinstance(ratio, bool):
        raise InvalidConfiguration(f"ratio must be a number in (0, 1], got {ratio!r}")
    try:
        value = float(ratio)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"ratio must be a number in (0, 1], got {ratio!r}") from None
    # NaN fails both comparisons
    if not 0.0 < value <= 1.0:
        raise InvalidConfiguration(f"ratio must be in (0, 1], got {ratio!r}")
    return value

def target_count(n: int, ratio: float) -> int:
    if n <= 0:
        return 0
    return min(n, max(1, round_half_up(n * ratio)))

def select_sentences(ranked: List[RankedSentence], k: int) -> List[int]:
    # highest score first, ties go to the earlier sentence
    top = sorted(ranked, key=lambda r: (-r.score, r.idx))[:k]
    return sorted(r.idx for r in top)

def rank_sentences(text: str,
                   strategy: Union[Strategy, str] = Strategy.FREQUENCY,
                   cfg: Optional[SummarizerConfig] = None) -> List[RankedSentence]:
    cfg = cfg or DEFAULT_CONFIG
    strategy = Strategy.parse(strategy)
    sentences = split_sentences(text)
    if not sentences:
        return []
    scores = score_sentences(sentences, text, strategy=strategy, cfg=cfg)
    return [RankedSentence(idx=i, score=s) for i, s in enumerate(scores)]

def summarize(text: str,
              ratio: float = 0.2,
              strategy: Union[Strategy, str] = Strategy.FREQUENCY,
              cfg: Optional[SummarizerConfig] = None) -> str:
    """
    Extract the top ``max(1, round(n × ratio))`` sentences of ``text`` and join
    them with single spaces in their original order.

    Raises InvalidConfiguration for a ratio outside (0, 1] or an unknown
    strategy. Empty text yields an empty string.
    """
    ratio = validate_ratio(ratio)
    strategy = Strategy.parse(strategy)
    sentences = split_sentences(text)
    if not sentences:
        return ""

    k = target_count(len(sentences), ratio)
    scores = score_sentences(sentences, text, strategy=strategy, cfg=cfg)
    ranked = [RankedSentence(idx=i, score=s) for i, s in enumerate(scores)]
    selected = select_sentences(ranked, k)
    logger.debug("selected %d of %d sentences (strategy=%s, ratio=%s)",
                 len(selected), len(sentences), strategy.value, ratio)
    return " ".join(sentences[i] for i in selected)
