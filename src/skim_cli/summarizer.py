from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set
import logging
from .normalizer import normalize
from .scoring import ScoredSentence, score_sentences
from .segmenter import segment

log = logging.getLogger(__name__)

DEFAULT_SENTENCES = 5

def resolve_sentence_count(value: Any) -> int:
    """Positive ints (or numeric strings) pass through; anything else means the default."""
    if isinstance(value, bool):
        return DEFAULT_SENTENCES
    if isinstance(value, float) and not value.is_integer():
        return DEFAULT_SENTENCES
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_SENTENCES
    return n if n > 0 else DEFAULT_SENTENCES

def top_sentences(scored: List[ScoredSentence], n: int) -> List[ScoredSentence]:
    """The n best-scoring sentences, back in document order."""
    # sorted() is stable with reverse=True, so ties keep document order
    top = sorted(scored, key=lambda s: s.score, reverse=True)[:n]
    return sorted(top, key=lambda s: s.index)

def select(scored: List[ScoredSentence], n: int) -> List[str]:
    return [s.text for s in top_sentences(scored, n)]

@dataclass
class Explanation:
    sentences: List[ScoredSentence] = field(default_factory=list)
    selected: Set[int] = field(default_factory=set)
    short_circuit: bool = False

def explain_text(text: Optional[str], max_sentences: Any = DEFAULT_SENTENCES) -> Explanation:
    """Score every surviving sentence and report which ones a summary would keep."""
    n = resolve_sentence_count(max_sentences)
    sents = segment(normalize(text))
    scored = score_sentences(sents)
    if len(sents) <= n:
        return Explanation(scored, {s.index for s in sents}, short_circuit=True)
    return Explanation(scored, {s.index for s in top_sentences(scored, n)})

def summarize_text(text: Optional[str], max_sentences: Any = DEFAULT_SENTENCES, title: Optional[str] = None) -> str:
    """
    Extractive summary:
    - Normalize and split into sentences, dropping short/code/nav/reference ones
    - Score by word and phrase frequency, position, length and diversity
    - Return top-N sentences in document order

    ``title`` is accepted for callers that carry one; scoring ignores it.
    An empty string means nothing survived filtering.
    """
    n = resolve_sentence_count(max_sentences)
    sents = segment(normalize(text))
    log.debug("%d sentences survived filtering, %d requested", len(sents), n)
    if len(sents) <= n:
        return " ".join(s.text for s in sents)

    return " ".join(select(score_sentences(sents), n))
