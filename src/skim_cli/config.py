from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict
import json
from pathlib import Path
from .summarizer import DEFAULT_SENTENCES, resolve_sentence_count

@dataclass
class SkimConfig:
    sentence_count: int = DEFAULT_SENTENCES
    user_agent: str = "SkimCLI/0.1"
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: float = 10.0
    read_timeout: float = 20.0
    min_content_chars: int = 50   # below this a page has nothing to summarize
    min_block_chars: int = 300    # smallest container accepted as the article body

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "SkimConfig":
        # Simple dict→dataclass conversion
        return SkimConfig(
            sentence_count=resolve_sentence_count(data.get("sentence_count", DEFAULT_SENTENCES)),
            user_agent=data.get("user_agent", "SkimCLI/0.1"),
            headers=dict(data.get("headers", {}) or {}),
            timeout=float(data.get("timeout", 10.0)),
            read_timeout=float(data.get("read_timeout", 20.0)),
            min_content_chars=int(data.get("min_content_chars", 50)),
            min_block_chars=int(data.get("min_block_chars", 300)),
        )

    @staticmethod
    def load(path: Path) -> "SkimConfig":
        return SkimConfig.from_dict(json.loads(Path(path).read_text()))

    @staticmethod
    def load_json_str(s: str) -> "SkimConfig":
        return SkimConfig.from_dict(json.loads(s))

    def dump(self) -> str:
        data = {
            "sentence_count": self.sentence_count,
            "user_agent": self.user_agent,
            "headers": self.headers,
            "timeout": self.timeout,
            "read_timeout": self.read_timeout,
            "min_content_chars": self.min_content_chars,
            "min_block_chars": self.min_block_chars,
        }
        return json.dumps(data, indent=2)

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(SkimConfig().dump())
