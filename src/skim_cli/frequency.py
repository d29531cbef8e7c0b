from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, List, Mapping
import re

if TYPE_CHECKING:
    from .segmenter import Sentence

_WORD = re.compile(r"\b\w+\b")

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
    "to", "of", "in", "for", "with", "on", "at", "by", "this", "that",
    "there", "here", "what", "where", "when", "how", "all", "any",
    "both", "each", "few", "more", "most", "other", "some", "such",
    "no", "nor", "not", "only", "own", "same", "so", "than", "too",
    "very", "can", "will", "just", "should", "now",
    # navigation noise
    "click", "page",
})

MIN_WORD_LEN = 3

def tokenize(text: str) -> List[str]:
    return _WORD.findall((text or "").lower())

def bigrams(tokens: List[str]) -> List[str]:
    return [f"{a} {b}" for a, b in zip(tokens, tokens[1:])]

@dataclass(frozen=True)
class FrequencyModel:
    word_freq: Mapping[str, int]
    phrase_freq: Mapping[str, int]

def build_model(sentences: Iterable["Sentence"]) -> FrequencyModel:
    """
    Count content words and two-word phrases across the given sentences.
    Words need len >= 3 and must not be stop words; a phrase is kept only when
    neither of its words is a stop word.
    """
    words: Counter = Counter()
    phrases: Counter = Counter()
    for s in sentences:
        toks = tokenize(s.text)
        words.update(w for w in toks if w not in STOP_WORDS and len(w) >= MIN_WORD_LEN)
        for a, b in zip(toks, toks[1:]):
            if a not in STOP_WORDS and b not in STOP_WORDS:
                phrases[f"{a} {b}"] += 1
    return FrequencyModel(
        word_freq=MappingProxyType(dict(words)),
        phrase_freq=MappingProxyType(dict(phrases)),
    )
