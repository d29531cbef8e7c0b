import json

from typer.testing import CliRunner

from skim_cli import cli
from skim_cli.provider import Article, FetchError

runner = CliRunner()

TEXT = (
    "Owls hunt mostly at night across open fields. "
    "Their hearing lets them find mice under deep snow. "
    "Barn owls are found on every continent except Antarctica."
)


def test_summarize_file(tmp_path):
    src = tmp_path / "owls.txt"
    src.write_text(TEXT)
    result = runner.invoke(cli.app, ["summarize", str(src), "--config-path", str(tmp_path / "none.json")])
    assert result.exit_code == 0, result.output
    assert "Antarctica" in result.output
    assert f"{len(TEXT.split())} words" in result.output


def test_summarize_stdin_json(tmp_path):
    result = runner.invoke(
        cli.app,
        ["summarize", "-", "--json", "--title", "Owls", "--config-path", str(tmp_path / "none.json")],
        input=TEXT,
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["title"] == "Owls"
    assert data["summary"] == TEXT
    assert data["word_count"] == len(TEXT.split())
    assert data["sentences"] == 5


def test_summarize_uses_config_sentence_count(tmp_path):
    cfg = tmp_path / "skim.json"
    cfg.write_text(json.dumps({"sentence_count": 7}))
    result = runner.invoke(cli.app, ["summarize", "--json", "--config-path", str(cfg)], input=TEXT)
    assert json.loads(result.output)["sentences"] == 7


def test_summarize_nothing_to_say(tmp_path):
    result = runner.invoke(
        cli.app, ["summarize", "--config-path", str(tmp_path / "none.json")], input="import foo\ndef bar(): x = 1 {}"
    )
    assert result.exit_code == 1
    assert "No meaningful summary" in result.output


def test_summarize_missing_file(tmp_path):
    result = runner.invoke(cli.app, ["summarize", str(tmp_path / "nope.txt")])
    assert result.exit_code == 2


def test_summarize_url(monkeypatch, tmp_path):
    async def fake_fetch(url, cfg):
        return Article(title="Owls", content=TEXT, method="selector:article")

    monkeypatch.setattr(cli, "fetch_article", fake_fetch)
    result = runner.invoke(
        cli.app, ["summarize", "--url", "https://example.com/owls", "--json", "--config-path", str(tmp_path / "none.json")]
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["title"] == "Owls"


def test_summarize_url_failure(monkeypatch, tmp_path):
    async def fake_fetch(url, cfg):
        raise FetchError("https://example.com/owls returned HTTP 500")

    monkeypatch.setattr(cli, "fetch_article", fake_fetch)
    result = runner.invoke(
        cli.app, ["summarize", "--url", "https://example.com/owls", "--config-path", str(tmp_path / "none.json")]
    )
    assert result.exit_code == 1
    assert "HTTP 500" in result.output


def test_summarize_html_file(tmp_path):
    page = tmp_path / "owls.html"
    page.write_text(f"<html><head><title>Owl Facts</title></head><body><p>{TEXT}</p></body></html>")
    result = runner.invoke(
        cli.app, ["summarize", str(page), "--html", "--json", "--config-path", str(tmp_path / "none.json")]
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["title"] == "Owl Facts"
    assert data["summary"] == TEXT


def test_init_creates_config_once(tmp_path):
    path = tmp_path / "skim.json"
    result = runner.invoke(cli.app, ["init", "--config-path", str(path)])
    assert result.exit_code == 0
    assert json.loads(path.read_text())["sentence_count"] == 5
    result = runner.invoke(cli.app, ["init", "--config-path", str(path)])
    assert result.exit_code == 1


def test_explain_table(tmp_path):
    src = tmp_path / "owls.txt"
    src.write_text(TEXT)
    result = runner.invoke(cli.app, ["explain", str(src), "-n", "1"])
    assert result.exit_code == 0, result.output
    assert "Sentence Scores" in result.output


def test_summarize_json_reports_resolved_count(tmp_path):
    long_text = " ".join(f"Sentence number {i} talks about owls and their habits at night." for i in range(7))
    result = runner.invoke(
        cli.app, ["summarize", "-", "-n", "0", "--json", "--config-path", str(tmp_path / "none.json")], input=long_text
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["sentences"] == 5
    assert data["summary"].count("owls") == 5


def test_explain_uses_config_sentence_count(tmp_path):
    src = tmp_path / "owls.txt"
    src.write_text(TEXT)
    cfg = tmp_path / "skim.json"
    cfg.write_text(json.dumps({"sentence_count": 1}))
    result = runner.invoke(cli.app, ["explain", str(src), "--config-path", str(cfg)])
    assert result.exit_code == 0, result.output
    assert result.output.count("✓") == 1
