from __future__ import annotations
import logging
from typing import List, Optional, Union
from .config import SummarizerConfig, DEFAULT_CONFIG, Strategy
from .datatypes import SimilarityGraph, ScoreVector
from .features import frequency_scores
from .graphing import build_similarity_graph

logger = logging.getLogger(__name__)

def rank_graph(graph: SimilarityGraph, cfg: Optional[SummarizerConfig] = None) -> ScoreVector:
    """
    Weighted PageRank over the sentence similarity graph.

    PR(Si) = (1-d)/N + d × Σ_j [w(j,i) / W(j)] × PR(Sj)

    where W(j) is the sum of sentence j's similarity row. Neighbours with zero
    similarity or zero out-weight contribute nothing. Updates are synchronous;
    iteration stops once the L1 change drops below cfg.tolerance or after
    cfg.max_iter rounds.

    Args:
        graph: Dense symmetric similarity graph
        cfg: Damping, iteration cap and tolerance

    Returns:
        One score per sentence, in sentence order
    """
    cfg = cfg or DEFAULT_CONFIG
    n = graph.size
    if n == 0:
        return []
    if n == 1:
        # no edges, nothing to propagate
        return [1.0]

    d = cfg.damping
    sim = graph.weights
    out_sum = graph.out_weight_sums()
    scores = [1.0 / n] * n

    for iteration in range(cfg.max_iter):
        new_scores = [(1.0 - d) / n] * n
        for i in range(n):
            for j in range(n):
                w = sim[j][i]
                if i == j or w == 0.0 or out_sum[j] == 0.0:
                    continue
                new_scores[i] += d * (w / out_sum[j]) * scores[j]

        diff = sum(abs(new_scores[k] - scores[k]) for k in range(n))
        scores = new_scores
        if diff < cfg.tolerance:
            logger.debug("graph ranking converged after %d iterations (delta=%.2e)", iteration + 1, diff)
            break
    else:
        logger.debug("graph ranking stopped at iteration cap %d", cfg.max_iter)

    return scores

def score_sentences(sentences: List[str],
                    text: str,
                    strategy: Union[Strategy, str] = Strategy.FREQUENCY,
                    cfg: Optional[SummarizerConfig] = None) -> ScoreVector:
    """
    Score every sentence with the chosen strategy.

    frequency: mean document-wide term weight of the sentence's tokens
    graph:     PageRank over the sentence similarity graph
    """
    cfg = cfg or DEFAULT_CONFIG
    strategy = Strategy.parse(strategy)
    if strategy is Strategy.GRAPH:
        return rank_graph(build_similarity_graph(sentences, cfg=cfg), cfg=cfg)
    return frequency_scores(sentences, text, cfg=cfg)
