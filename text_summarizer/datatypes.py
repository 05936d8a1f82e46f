from __future__ import annotations
from dataclasses import dataclass
from typing import List, Dict, Tuple, Iterator

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str

@dataclass(frozen=True)
class RankedSentence:
    idx: int
    score: float

@dataclass
class SimilarityGraph:
    weights: List[List[float]]  # symmetric, zero diagonal

    @property
    def size(self) -> int:
        return len(self.weights)

    def out_weight_sums(self) -> List[float]:
        return [sum(row) for row in self.weights]

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        # nonzero unordered pairs, i < j
        n = self.size
        for i in range(n):
            for j in range(i+1, n):
                w = self.weights[i][j]
                if w:
                    yield i, j, w

FrequencyTable = Dict[str, float]  # token -> weight in [0, 1]
ScoreVector = List[float]          # one score per sentence index
