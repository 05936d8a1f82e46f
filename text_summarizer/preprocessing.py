from __future__ import annotations
import re
from typing import List, Optional
from .config import SummarizerConfig, DEFAULT_CONFIG
from .datatypes import Sentence


_WS_RE = re.compile(r"\s+")
# terminal punctuation + whitespace, only when the next sentence opens with
# an uppercase letter, a digit, or an opening quote/bracket
_BOUNDARY_RE = re.compile(r"""(?<=[.!?])\s+(?=[A-Z0-9"'(\[{])""")
_NON_WORD_RE = re.compile(r"[^a-z0-9\s'-]")

def clean_text(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()

def split_sentences(text: str) -> List[str]:
    cleaned = clean_text(text)
    if not cleaned:
        return []
    parts = _BOUNDARY_RE.split(cleaned)
    return [p for p in parts if p.strip()]

def segment(text: str) -> List[Sentence]:
    return [Sentence(idx=i, text=s) for i, s in enumerate(split_sentences(text))]

def tokenize(text: str) -> List[str]:
    """
    Lowercase, turn every char outside [a-z0-9], whitespace, apostrophe and
    hyphen into a space, then split. Stopwords are kept.
    """
    return _NON_WORD_RE.sub(" ", text.lower()).split()

def is_stopword(token: str, cfg: Optional[SummarizerConfig] = None) -> bool:
    cfg = cfg or DEFAULT_CONFIG
    return token in cfg.stopwords

def content_tokens(text: str, cfg: Optional[SummarizerConfig] = None) -> List[str]:
    cfg = cfg or DEFAULT_CONFIG
    return [t for t in tokenize(text) if t not in cfg.stopwords]
