from __future__ import annotations
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table
from rich import box
from .config import SkimConfig, write_default_config
from .provider import Article, ProviderError, check_content, extract_article, fetch_article
from .summarizer import explain_text, resolve_sentence_count, summarize_text
from .utils import setup_logging, word_count

app = typer.Typer(help="Extractive article summarizer")
console = Console()

def _load_config(config_path: Optional[Path]) -> SkimConfig:
    if config_path and config_path.exists():
        return SkimConfig.load(config_path)
    return SkimConfig()

def _read_source(file: Optional[Path]) -> str:
    if file is None or str(file) == "-":
        return sys.stdin.read()
    if not file.exists():
        typer.echo(f"No such file: {file}")
        raise typer.Exit(code=2)
    return file.read_text(encoding="utf-8")

def _load_article(file: Optional[Path], url: Optional[str], html: bool, cfg: SkimConfig) -> Article:
    try:
        if url:
            return asyncio.run(fetch_article(url, cfg))
        raw = _read_source(file)
        if html:
            return check_content(extract_article(raw, cfg.min_block_chars), cfg)
    except ProviderError as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=1)
    return Article(title=file.stem if file and str(file) != "-" else "", content=raw, method="text")

@app.command()
def init(
    config_path: Path = typer.Option("skim.json", exists=False, help="Where to create config"),
):
    """Create default config."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        console.print(f"[yellow]{ex}[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {config_path}")

@app.command()
def summarize(
    file: Optional[Path] = typer.Argument(None, help="Text file to summarize ('-' or omitted reads stdin)"),
    url: Optional[str] = typer.Option(None, help="Fetch and summarize a web page"),
    html: bool = typer.Option(False, "--html", help="Treat FILE as HTML and extract its main content"),
    title: Optional[str] = typer.Option(None, help="Override the document title"),
    sentences: Optional[int] = typer.Option(None, "--sentences", "-n", help="Number of sentences"),
    config_path: Path = typer.Option("skim.json", help="Config file (used if present)"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Create an extractive summary."""
    setup_logging(verbose)
    cfg = _load_config(config_path)
    article = _load_article(file, url, html, cfg)
    count = resolve_sentence_count(sentences if sentences is not None else cfg.sentence_count)
    summ = summarize_text(article.content, count, title=title or article.title)

    if as_json:
        typer.echo(json.dumps({
            "title": title or article.title,
            "summary": summ,
            "word_count": word_count(summ),
            "sentences": count,
        }, indent=2))
    elif summ:
        console.print(summ)
        console.print(f"[dim]{word_count(summ)} words[/dim]")
    if not summ:
        if not as_json:
            console.print("[yellow]No meaningful summary could be generated. The content might be too short or not in a readable format.[/yellow]")
        raise typer.Exit(code=1)

@app.command()
def explain(
    file: Optional[Path] = typer.Argument(None, help="Text file ('-' or omitted reads stdin)"),
    sentences: Optional[int] = typer.Option(None, "--sentences", "-n", help="Number of sentences"),
    width: int = typer.Option(60, help="Truncate sentence text to this many characters"),
    config_path: Path = typer.Option("skim.json", help="Config file (used if present)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Show how every sentence was scored."""
    setup_logging(verbose)
    cfg = _load_config(config_path)
    count = resolve_sentence_count(sentences if sentences is not None else cfg.sentence_count)
    result = explain_text(_read_source(file), count)
    if not result.sentences:
        console.print("[yellow]No sentences survived filtering[/yellow]")
        return
    table = Table(title="Sentence Scores", box=box.SIMPLE)
    table.add_column("#", justify="right")
    for name in ("frequency", "phrase", "position", "length", "diversity", "score"):
        table.add_column(name, justify="right")
    table.add_column("", justify="center")
    table.add_column("Sentence")
    for s in result.sentences:
        text = s.text if len(s.text) <= width else s.text[: width - 3] + "..."
        table.add_row(
            str(s.index),
            *[f"{s.parts[k]:.3f}" for k in ("frequency", "phrase", "position", "length", "diversity")],
            f"{s.score:.3f}",
            "[green]✓[/green]" if s.index in result.selected else "",
            text,
        )
    console.print(table)
    if result.short_circuit:
        console.print("[dim]Few sentences: all are kept in document order without ranking.[/dim]")

def main():
    app()

if __name__ == "__main__":
    main()
