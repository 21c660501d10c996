import json
from pathlib import Path
from typing import Any

from pytest import MonkeyPatch
from typer.testing import CliRunner

from readability_consensus.cli import app
from readability_consensus.readability import Readability
from tests.utils import SIMPLE_PARAGRAPH, make_readability

runner = CliRunner()


def _patch_builder(monkeypatch: MonkeyPatch) -> dict[str, Any]:
    calls: dict[str, Any] = {}

    def fake_builder(config: Any) -> Readability:
        calls["config"] = config
        return make_readability()

    monkeypatch.setattr(
        "readability_consensus.cli.build_readability_from_config", fake_builder
    )
    return calls


def test_cli_analyze_outputs_summary(monkeypatch: MonkeyPatch, tmp_path: Path):
    """analyze scores every .txt file under the directory."""
    calls = _patch_builder(monkeypatch)
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--singularizer", "none"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "nested/chapter2.txt"]
    first = payload["documents"][0]
    assert first["text_standard_label"] == "2nd and 3rd grade"
    assert first["scores"]["flesch_kincaid_grade"] == 1.2
    assert first["counts"]["lexicon_count"] == 20
    assert calls["config"].singularizer == "none"


def test_cli_analyze_single_file(monkeypatch: MonkeyPatch, tmp_path: Path):
    _patch_builder(monkeypatch)
    path = tmp_path / "single.txt"
    path.write_text(SIMPLE_PARAGRAPH, encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--input-path", str(path)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["documents"][0]["doc_id"] == "single.txt"


def test_cli_grade_prints_label_and_float(monkeypatch: MonkeyPatch):
    _patch_builder(monkeypatch)
    result = runner.invoke(app, ["grade", SIMPLE_PARAGRAPH])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2nd and 3rd grade"

    result = runner.invoke(app, ["grade", SIMPLE_PARAGRAPH, "--float-output"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "3.0"


def test_cli_grade_median_from_file(monkeypatch: MonkeyPatch, tmp_path: Path):
    _patch_builder(monkeypatch)
    path = tmp_path / "story.txt"
    path.write_text(SIMPLE_PARAGRAPH, encoding="utf-8")
    result = runner.invoke(app, ["grade", "--input-path", str(path), "--median"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "2.68"


def test_cli_grade_uses_config_float_output(monkeypatch: MonkeyPatch, tmp_path: Path):
    _patch_builder(monkeypatch)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("float_output: true\n", encoding="utf-8")
    result = runner.invoke(app, ["grade", SIMPLE_PARAGRAPH, "--config", str(config_path)])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "3.0"


def test_cli_grade_requires_exactly_one_source(monkeypatch: MonkeyPatch, tmp_path: Path):
    _patch_builder(monkeypatch)
    result = runner.invoke(app, ["grade"])
    assert result.exit_code != 0
    path = tmp_path / "story.txt"
    path.write_text(SIMPLE_PARAGRAPH, encoding="utf-8")
    result = runner.invoke(app, ["grade", "text", "--input-path", str(path)])
    assert result.exit_code != 0


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "syllable_estimator" in result.stdout
    assert "en-US" in result.stdout


def test_cli_download_data_reports_failure(monkeypatch: MonkeyPatch):
    monkeypatch.setattr("readability_consensus.cli.download_nltk_data", lambda: False)
    result = runner.invoke(app, ["download-data"])
    assert result.exit_code == 1


def _create_sample_corpus(tmp_path: Path) -> Path:
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(SIMPLE_PARAGRAPH, encoding="utf-8")
    (corpus_dir / "nested" / "chapter2.txt").write_text(
        "The cat sat on the mat.", encoding="utf-8"
    )
    (corpus_dir / "notes.md").write_text("# ignored", encoding="utf-8")
    return corpus_dir
