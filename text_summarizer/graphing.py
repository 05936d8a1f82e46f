from __future__ import annotations
from typing import List, Optional, Sequence
from .config import SummarizerConfig, DEFAULT_CONFIG
from .datatypes import SimilarityGraph
from .features import sentence_similarity
from .preprocessing import content_tokens

def build_similarity_matrix(token_sets: Sequence[Sequence[str]]) -> List[List[float]]:
    n = len(token_sets)
    M = [[0.0]*n for _ in range(n)]
    for i in range(n):
        for j in range(i+1, n):
            w = sentence_similarity(token_sets[i], token_sets[j])
            M[i][j] = M[j][i] = w
    return M

def build_similarity_graph(sentences: Sequence[str], cfg: Optional[SummarizerConfig] = None) -> SimilarityGraph:
    cfg = cfg or DEFAULT_CONFIG
    reduced = [content_tokens(s, cfg=cfg) for s in sentences]
    return SimilarityGraph(weights=build_similarity_matrix(reduced))
