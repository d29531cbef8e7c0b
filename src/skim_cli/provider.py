from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import re
import httpx
from bs4 import BeautifulSoup
from .config import SkimConfig
from .utils import domain_of

log = logging.getLogger(__name__)

class ProviderError(Exception):
    """Content could not be obtained for summarizing."""

class FetchError(ProviderError):
    pass

class ContentError(ProviderError):
    pass

@dataclass
class Article:
    title: str
    content: str
    method: str = ""  # which extraction strategy found the content

NOISE_SELECTOR = ", ".join([
    "script", "style", "link", "iframe", "noscript", "nav", "footer", "header", "aside",
    "form", "button", "input",
    '[role="complementary"]', '[role="navigation"]',
    ".ad", ".ads", ".advertisement", ".social-share", ".comments", ".related-articles",
])

MAIN_SELECTORS = [
    'article[role="article"]',
    'main[role="main"]',
    'div[role="main"]',
    "article",
    "main",
    ".article-content",
    ".post-content",
    ".entry-content",
    ".story-content",
    # Medium
    ".section-content",
    ".section-inner",
    # Wikipedia
    "#mw-content-text",
    ".mw-parser-output",
    '[class*="article"]',
    '[class*="content"]',
    '[class*="story"]',
    ".post",
    ".entry",
    ".article",
    ".content",
]

_CHROME = re.compile(r"(header|footer|nav|menu|comment|sidebar|related|share|meta|promo|ad|banner)")
_REFS = re.compile(r"\[[^\]]*\]")
_MENTIONS = re.compile(r"@\w+")
_WS = re.compile(r"\s+")
_DOTS = re.compile(r"\.+")

MIN_PARAGRAPH_CHARS = 40

def clean_text(text: str) -> str:
    text = _REFS.sub("", text)
    text = _MENTIONS.sub("", text)
    text = _WS.sub(" ", text)
    text = _DOTS.sub(".", text)
    return text.strip()

def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")

def _get_text(el) -> str:
    return (el.get_text(" ", strip=True) if el else "").strip()

def _looks_like_chrome(el) -> bool:
    classes = el.get("class") or []
    if isinstance(classes, str):
        classes = [classes]
    return bool(_CHROME.search(" ".join(classes).lower()) or _CHROME.search((el.get("id") or "").lower()))

def _largest_block(soup: BeautifulSoup, min_chars: int) -> Optional[str]:
    best, best_score = None, 0.0
    for el in soup.find_all(["div", "section", "article"]):
        if _looks_like_chrome(el):
            continue
        text = _get_text(el)
        paragraphs = len(el.find_all("p"))
        if len(text) <= min_chars or paragraphs <= 2:
            continue
        score = len(text) * 0.6 + paragraphs * 100 + len(el.find_all("img")) * 50
        if score > best_score:
            best, best_score = text, score
    return best

def extract_article(html: str, min_block_chars: int = 300) -> Article:
    """
    Pull the main prose out of an HTML page, trying in order:
    known article containers, the largest paragraph-rich block,
    all substantial <p> elements, and finally the whole body.
    """
    soup = _soup(html or "")
    title = _get_text(soup.title)
    for el in soup.select(NOISE_SELECTOR):
        el.extract()

    for selector in MAIN_SELECTORS:
        for el in soup.select(selector):
            text = _get_text(el)
            if len(text) > min_block_chars:
                log.debug("content found using selector %s", selector)
                return Article(title, clean_text(text), f"selector:{selector}")

    block = _largest_block(soup, min_block_chars)
    if block:
        log.debug("content found using largest text block")
        return Article(title, clean_text(block), "largest-block")

    paragraphs = [t for t in (_get_text(p) for p in soup.find_all("p")) if len(t) > MIN_PARAGRAPH_CHARS]
    if paragraphs:
        log.debug("content found using paragraph collection")
        return Article(title, clean_text(" ".join(paragraphs)), "paragraphs")

    log.debug("falling back to body text")
    return Article(title, clean_text(_get_text(soup.body or soup)), "body")

def check_content(article: Article, cfg: SkimConfig) -> Article:
    if len(article.content) < cfg.min_content_chars:
        raise ContentError("Could not extract meaningful content from this page")
    return article

async def fetch_article(url: str, cfg: SkimConfig, client: Optional[httpx.AsyncClient] = None) -> Article:
    headers = {"User-Agent": cfg.user_agent, **(cfg.headers or {})}
    timeout = httpx.Timeout(cfg.timeout, read=cfg.read_timeout)
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient()
    try:
        r = await client.get(url, headers=headers, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as ex:
        raise FetchError(f"Could not fetch {url}: {ex!r}") from ex
    finally:
        if owns_client:
            await client.aclose()

    log.info("fetched %s from %s (status %s)", url, domain_of(url), r.status_code)
    if not 200 <= r.status_code < 300:
        raise FetchError(f"{url} returned HTTP {r.status_code}")
    # basic content-type check
    ct = r.headers.get("Content-Type", "")
    if not ("text/html" in ct or "application/xhtml+xml" in ct or ct == ""):
        raise FetchError(f"{url} is not an HTML page ({ct})")
    return check_content(extract_article(r.text, cfg.min_block_chars), cfg)
