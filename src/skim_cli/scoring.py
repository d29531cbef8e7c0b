from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List
import math
from .frequency import STOP_WORDS, FrequencyModel, bigrams, build_model, tokenize
from .segmenter import Sentence

WEIGHTS: Dict[str, float] = {
    "frequency": 0.30,
    "phrase": 0.20,
    "position": 0.20,
    "length": 0.15,
    "diversity": 0.15,
}

IDEAL_LENGTH = 20  # tokens
EDGE_SHARE = 0.2   # lede / conclusion share of the document
TAIL_START = 0.8
MIDDLE_SCORE = 0.2

@dataclass(frozen=True)
class ScoredSentence:
    index: int
    text: str
    score: float
    parts: Dict[str, float] = field(default_factory=dict, compare=False)

def frequency_score(tokens: List[str], model: FrequencyModel) -> float:
    content = [t for t in tokens if t not in STOP_WORDS]
    return sum(model.word_freq.get(t, 0) for t in content) / (len(content) or 1)

def phrase_score(tokens: List[str], model: FrequencyModel) -> float:
    return sum(model.phrase_freq.get(p, 0) for p in bigrams(tokens)) / (len(tokens) or 1)

def position_score(index: int, total: int) -> float:
    """Reward the opening and closing fifth of the document, flat in between."""
    head = total * EDGE_SHARE
    tail = total * TAIL_START
    if index < head:
        return 1 - index / head
    if index > tail:
        return (index - tail) / head
    return MIDDLE_SCORE

def length_score(token_count: int) -> float:
    return math.exp(-abs(token_count - IDEAL_LENGTH) / IDEAL_LENGTH)

def diversity_score(tokens: List[str]) -> float:
    unique = {t for t in tokens if t not in STOP_WORDS}
    return len(unique) / (len(tokens) or 1)

def score_sentence(sentence: Sentence, total: int, model: FrequencyModel) -> ScoredSentence:
    tokens = tokenize(sentence.text)
    parts = {
        "frequency": frequency_score(tokens, model),
        "phrase": phrase_score(tokens, model),
        "position": position_score(sentence.index, total),
        "length": length_score(len(tokens)),
        "diversity": diversity_score(tokens),
    }
    score = sum(parts[k] * w for k, w in WEIGHTS.items())
    return ScoredSentence(index=sentence.index, text=sentence.text, score=score, parts=parts)

def score_sentences(sentences: List[Sentence]) -> List[ScoredSentence]:
    model = build_model(sentences)
    total = len(sentences)
    return [score_sentence(s, total, model) for s in sentences]
