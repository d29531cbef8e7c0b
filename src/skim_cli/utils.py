from __future__ import annotations
from urllib.parse import urlparse
import logging
from rich.logging import RichHandler

def domain_of(url: str) -> str:
    return urlparse(url).netloc.lower()

def word_count(text: str) -> int:
    return len(text.split())

def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
