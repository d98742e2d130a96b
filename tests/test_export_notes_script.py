import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "export_notes.py"


@pytest.fixture(scope="module")
def export_notes():
    spec = importlib.util.spec_from_file_location("export_notes", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_json_to_stdout(export_notes, capsys):
    assert export_notes.main([]) == 0
    records = json.loads(capsys.readouterr().out)
    assert len(records) == 28
    assert records[0]["identifier"] == "Reroll"


def test_json_with_placeholders(export_notes, capsys):
    assert export_notes.main(["--include-placeholders"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert len(records) == 29


def test_markdown_to_file(export_notes, tmp_path):
    out = tmp_path / "docs" / "rule_notes.md"
    assert export_notes.main(["--format", "markdown", "--output", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert "## World of Tanks" in text
    assert "minimum of 3" in text
