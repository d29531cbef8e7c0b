from __future__ import annotations
from dataclasses import dataclass
from typing import List
import re
from .frequency import tokenize

_SENTENCE = re.compile(r"""[^.!?]+(?:[.!?]+["']?|$)""")
_NUMBERED = re.compile(r"^\s*\d+\.\s*")

MIN_WORDS = 4
MIN_CHARS = 20
CODE_MARKERS = ("import ", "def ", "= ", "{", "}")
NAV_PHRASES = ("click here", "next page")

@dataclass(frozen=True)
class Sentence:
    index: int  # position among surviving sentences
    text: str

    @property
    def tokens(self) -> List[str]:
        return tokenize(self.text)

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    @property
    def length(self) -> int:
        return len(self.text)

def split_sentences(text: str) -> List[str]:
    # a trailing fragment without terminator still counts as a sentence
    return [m.group(0).strip() for m in _SENTENCE.finditer(text or "")]

def is_valid_sentence(s: str) -> bool:
    if len(s.split()) < MIN_WORDS or len(s) < MIN_CHARS:
        return False
    if any(marker in s for marker in CODE_MARKERS):
        return False
    if s.startswith("^") or s.startswith("http") or _NUMBERED.match(s):
        return False
    low = s.lower()
    if any(phrase in low for phrase in NAV_PHRASES):
        return False
    return True

def segment(text: str) -> List[Sentence]:
    """Split normalized text and keep the sentences worth scoring, numbered in order."""
    kept = [s for s in split_sentences(text) if is_valid_sentence(s)]
    return [Sentence(index=i, text=s) for i, s in enumerate(kept)]
