from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple, TypedDict

import typer
import yaml

from .config import SegmenterConfig, load_config
from .engine import SegmentationEngine, build_engine_from_config
from .models import EngineState, WordOccurrence

app = typer.Typer(help="Spell-check word segmentation CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into documents.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class OccurrencePayload(TypedDict):
    text: str
    location: int
    length: int
    misspelled_count: int
    contraction_words: List[str]


class DocumentSummary(TypedDict):
    doc_id: str
    language: str
    words: List[str]
    occurrences: List[OccurrencePayload]


@app.command()
def check(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    text: str | None = typer.Option(
        None, "--text", "-t", help="Inline text to segment instead of a file."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Language tag override (e.g., 'en-US')."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured log level."
    ),
) -> None:
    """Segment the input and emit the candidate words of each document as JSON."""
    cfg = _prepare_config(config, language, log_level)
    if input_path is None and text is None:
        raise typer.BadParameter("Provide --input-path or --text.")
    # Inline text takes precedence so quick checks do not need a file on disk.
    documents = [("<text>", text)] if text is not None else _load_documents(input_path)
    engine = build_engine_from_config(cfg)
    summary = [_check_document(engine, doc_id, body) for doc_id, body in documents]
    typer.echo(json.dumps({"documents": summary}, indent=2, ensure_ascii=False))


@app.command()
def split(
    token: str = typer.Argument(..., help="Token to split into sub-words."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    language: str | None = typer.Option(None, "--language", "-l"),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Report whether a token is a contraction of several words."""
    cfg = _prepare_config(config, language, log_level)
    engine = build_engine_from_config(cfg)
    is_contraction, sub_words = False, []
    if engine.prepare() is EngineState.READY:
        is_contraction, sub_words = engine.is_contraction(token)
    payload = {
        "token": token,
        "is_contraction": is_contraction,
        "sub_words": sub_words,
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = SegmenterConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _prepare_config(
    config_path: Path | None, language: str | None, log_level: str | None
) -> SegmenterConfig:
    """Load the configuration, apply CLI overrides and configure logging."""
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if language is not None:
        cfg.language = language
    if log_level is not None:
        cfg.log_level = log_level
    # getLevelName maps known names to ints and anything else to "Level <name>".
    level = logging.getLevelName(cfg.log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level {cfg.log_level!r}.")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return cfg


def _load_documents(input_path: Path) -> List[Tuple[str, str]]:
    """Expand the input path into (doc_id, text) pairs."""
    if input_path.is_file():
        return [(input_path.name, _read_text(input_path))]

    # Directory input: relative paths keep doc IDs stable across runs.
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [(str(file.relative_to(input_path)), _read_text(file)) for file in files]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc


def _check_document(
    engine: SegmentationEngine, doc_id: str, text: str
) -> DocumentSummary:
    """Segment one document with a fresh occurrence list."""
    occurrences: List[WordOccurrence] = []
    words = engine.spell_check_text(text, occurrences)
    return {
        "doc_id": doc_id,
        "language": engine.language,
        "words": sorted(words),
        "occurrences": [_occurrence_dict(o) for o in occurrences],
    }


def _occurrence_dict(occurrence: WordOccurrence) -> OccurrencePayload:
    return {
        "text": occurrence.text,
        "location": occurrence.location,
        "length": occurrence.length,
        "misspelled_count": occurrence.misspelled_count,
        "contraction_words": list(occurrence.contraction_words),
    }


if __name__ == "__main__":
    main()
