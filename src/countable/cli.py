from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import List, Tuple, TypedDict, cast

import typer
import yaml

from .config import CountConfig, load_config
from .counter import count
from .models import CountResult

logger = logging.getLogger(__name__)

app = typer.Typer(help="Countable text statistics CLI.", no_args_is_help=True)

# File types expanded from directory inputs.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".html", ".htm"}

STDIN_MARKER = "-"


class DocumentSummary(TypedDict):
    path: str
    paragraphs: int
    words: int
    characters: int
    characters_and_spaces: int


@app.command("count")
def count_command(
    paths: List[Path] = typer.Argument(
        ..., help="Files or directories to count; use '-' to read stdin."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    hard_returns: bool | None = typer.Option(
        None,
        "--hard-returns/--no-hard-returns",
        help="Require a blank line between paragraphs.",
    ),
    strip_tags: bool | None = typer.Option(
        None,
        "--strip-tags/--no-strip-tags",
        help="Remove markup tags before counting.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Count paragraphs, words and characters and emit a JSON summary."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    cfg = _load_cli_config(config)
    cfg = _apply_overrides(cfg, hard_returns, strip_tags)

    summary: List[DocumentSummary] = []
    for doc_id, text in _load_texts(paths):
        result = count(text, cfg)
        logger.debug("Counted %s: %s", doc_id, result)
        summary.append(_summary_entry(doc_id, result))
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    typer.echo(yaml.safe_dump(CountConfig().to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> CountConfig:
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Unable to load config {path}: {exc}") from exc


def _apply_overrides(
    config: CountConfig, hard_returns: bool | None, strip_tags: bool | None
) -> CountConfig:
    """Apply CLI flags on top of the loaded configuration when provided."""
    if hard_returns is not None:
        config = dc_replace(config, hard_returns=hard_returns)
    if strip_tags is not None:
        config = dc_replace(config, strip_tags=strip_tags)
    return config


def _load_texts(paths: List[Path]) -> List[Tuple[str, str]]:
    """Expand CLI paths into (doc_id, text) pairs."""
    texts: List[Tuple[str, str]] = []
    for path in paths:
        if str(path) == STDIN_MARKER:
            texts.append((STDIN_MARKER, sys.stdin.read()))
        elif path.is_dir():
            files = sorted(
                p
                for p in path.rglob("*")
                if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
            )
            for file in files:
                texts.append((file.relative_to(path).as_posix(), _read_text(file)))
        else:
            texts.append((path.name, _read_text(path)))
    return texts


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc


def _summary_entry(doc_id: str, result: CountResult) -> DocumentSummary:
    return cast(DocumentSummary, {"path": doc_id, **result.to_dict()})


if __name__ == "__main__":
    main()
