from pydantic import BaseModel
from typing import Any, Optional

class SummarizeRequest(BaseModel):
    text: Optional[str] = ""
    title: Optional[str] = None
    # anything that is not a positive int falls back to the default count
    sentence_count: Optional[Any] = None

class UrlSummarizeRequest(BaseModel):
    url: str
    sentence_count: Optional[Any] = None

class SummaryDTO(BaseModel):
    title: str
    summary: str
    sentences: int
    word_count: int
