from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Union


class InvalidConfiguration(ValueError):
    """Raised when a ratio, strategy tag or config value is out of range."""


STOPWORDS: FrozenSet[str] = frozenset({
    # concise English closed-class list
    'a','an','and','are','as','at','be','but','by','for','if','in','into','is','it','no','not','of',
    'on','or','such','that','the','their','then','there','these','they','this','to','was','will',
    'with','from','were','we','you','your','i','our','us','them','he','she','his','her','its','my',
    'me','do','does','did','done','can','could','should','would','may','might'
})


class Strategy(str, Enum):
    FREQUENCY = "frequency"
    GRAPH = "graph"

    @classmethod
    def parse(cls, value: Union["Strategy", str]) -> "Strategy":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidConfiguration(f"Unknown strategy: {value!r}")
        tag = value.strip().lower()
        if tag == "textrank":
            return cls.GRAPH
        for member in cls:
            if member.value == tag:
                return member
        raise InvalidConfiguration(f"Unknown strategy: {value!r}")


@dataclass(frozen=True)
class SummarizerConfig:
    stopwords: FrozenSet[str] = field(default=STOPWORDS)
    damping: float = 0.85
    max_iter: int = 20
    tolerance: float = 1e-5       # L1 delta between iterations
    words_per_minute: int = 200

    def __post_init__(self):
        if not 0.0 <= self.damping <= 1.0:
            raise InvalidConfiguration(f"damping must be in [0, 1], got {self.damping}")
        if self.max_iter < 1:
            raise InvalidConfiguration(f"max_iter must be >= 1, got {self.max_iter}")
        if not self.tolerance > 0:
            raise InvalidConfiguration(f"tolerance must be > 0, got {self.tolerance}")
        if not self.words_per_minute > 0:
            raise InvalidConfiguration(f"words_per_minute must be > 0, got {self.words_per_minute}")


DEFAULT_CONFIG = SummarizerConfig()
