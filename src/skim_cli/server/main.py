from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from .models import SummarizeRequest, UrlSummarizeRequest, SummaryDTO
from ..config import SkimConfig
from ..provider import ContentError, FetchError, fetch_article
from ..summarizer import resolve_sentence_count, summarize_text
from ..utils import word_count
from pathlib import Path
import logging
import os

log = logging.getLogger(__name__)

CONFIG_PATH = Path(os.environ.get("SKIM_CONFIG", "skim.json"))

cfg = SkimConfig.load(CONFIG_PATH) if CONFIG_PATH.exists() else SkimConfig()

app = FastAPI(title="Skim Service", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dev friendly; tighten later
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

def _summary(text: str, title: str, sentence_count) -> SummaryDTO:
    n = resolve_sentence_count(cfg.sentence_count if sentence_count is None else sentence_count)
    summ = summarize_text(text, n, title=title)
    return SummaryDTO(title=title, summary=summ, sentences=n, word_count=word_count(summ))

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/summarize", response_model=SummaryDTO)
def summarize(req: SummarizeRequest):
    return _summary(req.text or "", req.title or "", req.sentence_count)

@app.post("/summarize/url", response_model=SummaryDTO)
async def summarize_url(req: UrlSummarizeRequest):
    try:
        article = await fetch_article(req.url, cfg)
    except FetchError as ex:
        log.warning("fetch failed: %s", ex)
        raise HTTPException(status_code=502, detail=str(ex))
    except ContentError as ex:
        raise HTTPException(status_code=422, detail=str(ex))
    return _summary(article.content, article.title, req.sentence_count)
