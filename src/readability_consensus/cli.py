from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .estimators import download_nltk_data
from .models import Document, ReadabilityReport
from .pipeline import process_corpus
from .readability import Readability, build_readability_from_config

app = typer.Typer(help="Readability consensus CLI.", no_args_is_help=True)

LOGGER = logging.getLogger(__name__)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class CountsPayload(TypedDict):
    lexicon_count: int
    sentence_count: int
    syllable_count: int
    char_count: int
    letter_count: int
    poly_syllable_count: int
    difficult_words: int


class DocumentSummary(TypedDict):
    doc_id: str
    counts: CountsPayload
    scores: dict[str, float]
    text_standard: float
    text_standard_label: str
    text_median: float
    difficult_word_list: List[str]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    lang: str | None = typer.Option(None, "--lang", help="Locale, e.g. en-US."),
    syllable_estimator: str | None = typer.Option(
        None, "--syllable-estimator", help="Syllable estimator (e.g., 'textstat')."
    ),
    singularizer: str | None = typer.Option(
        None, "--singularizer", help="Singularizer ('wordnet' or 'none')."
    ),
    easy_words_path: Path | None = typer.Option(
        None, "--easy-words-path", exists=True, dir_okay=False, help="Custom easy-word list."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Score every document under the input path and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, lang, syllable_estimator, singularizer, easy_words_path, log_level)
    _configure_logging(cfg.log_level)
    documents = _load_documents(input_path)
    readability = _build_readability(cfg)
    summary = _build_summary(process_corpus(documents, readability))
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def grade(
    text: str | None = typer.Argument(None, help="Text to grade."),
    input_path: Path | None = typer.Option(
        None, "--input-path", exists=True, readable=True, dir_okay=False
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    float_output: bool | None = typer.Option(
        None, "--float-output/--label-output", help="Print the consensus as a number."
    ),
    median: bool = typer.Option(
        False, "--median", help="Print the median grade instead of the consensus."
    ),
    singularizer: str | None = typer.Option(
        None, "--singularizer", help="Singularizer ('wordnet' or 'none')."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """Print the consensus grade of a text or a text file."""
    if (text is None) == (input_path is None):
        raise typer.BadParameter("Provide either TEXT or --input-path, not both.")
    cfg = load_config(config)
    _apply_overrides(cfg, None, None, singularizer, None, log_level)
    if float_output is not None:
        cfg.float_output = float_output
    _configure_logging(cfg.log_level)
    source = (
        input_path.read_text(encoding="utf-8") if input_path is not None else str(text)
    )
    readability = _build_readability(cfg)
    if median:
        typer.echo(str(readability.text_median(source)))
        return
    typer.echo(str(readability.text_standard(source, float_output=cfg.float_output)))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


@app.command("download-data")
def download_data() -> None:
    """Download the NLTK corpora used by the default estimators."""
    if not download_nltk_data():
        typer.echo("Failed to download the NLTK corpora.", err=True)
        raise typer.Exit(code=1)
    typer.echo("NLTK corpora are installed.")


def main() -> None:
    app()


def _apply_overrides(
    config: ReadabilityConfig,
    lang: str | None,
    syllable_estimator: str | None,
    singularizer: str | None,
    easy_words_path: Path | None,
    log_level: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if lang:
        config.lang = lang
    if syllable_estimator:
        config.syllable_estimator = syllable_estimator
    if singularizer:
        config.singularizer = singularizer
    if easy_words_path:
        # Config stores string paths so cast Path objects accordingly.
        config.easy_words_path = str(easy_words_path)
    if log_level:
        config.log_level = log_level


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_readability(config: ReadabilityConfig) -> Readability:
    try:
        return build_readability_from_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    if not files:
        LOGGER.warning("No .txt files found under %s.", input_path)
    return [_document_from_file(file, str(file.relative_to(input_path))) for file in files]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not UTF-8 text: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: dict[str, ReadabilityReport]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, report in sorted(results.items()):
        payload = report.to_dict()
        summary.append(
            {
                "doc_id": doc_id,
                "counts": payload.pop("counts"),
                "text_standard": payload.pop("text_standard"),
                "text_standard_label": payload.pop("text_standard_label"),
                "text_median": payload.pop("text_median"),
                "difficult_word_list": payload.pop("difficult_word_list"),
                "scores": {
                    key: value for key, value in payload.items() if key != "doc_id"
                },
            }
        )
    return summary


if __name__ == "__main__":
    main()
