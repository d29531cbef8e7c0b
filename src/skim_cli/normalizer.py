from __future__ import annotations
from typing import Optional
import re

_CITATION = re.compile(r"\[[^\]]*\]")
_FOOTNOTE = re.compile(r"\^.*$", re.MULTILINE)
_URL = re.compile(r"https?://\S+")
_PARENS = re.compile(r"\(.*?\)")
_WS = re.compile(r"\s+")
_SYMBOLS = re.compile(r"[^\w\s.!?]")

def normalize(raw: Optional[str]) -> str:
    """
    Strip structural noise from raw article text:
    - [1]-style citations, ^footnotes, URLs, (asides)
    - symbols other than sentence terminators
    - whitespace collapsed to single spaces
    """
    if not raw:
        return ""
    text = _CITATION.sub("", raw)
    text = _FOOTNOTE.sub("", text)
    text = _URL.sub("", text)
    text = _PARENS.sub("", text)
    text = _WS.sub(" ", text)
    text = _SYMBOLS.sub("", text)
    # dropping symbols can leave double spaces behind ("x = 1" -> "x  1")
    return _WS.sub(" ", text).strip()
