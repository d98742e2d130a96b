"""
Tests for the rule notes glossary export.
"""

import json

import pytest

from core import notes
from core.note_export import (
    NoteExportError,
    dumps_json,
    export_json,
    from_records,
    import_json,
    loads_json,
    to_markdown,
    to_records,
)
from core.notes import ALL_NOTES, Note


def test_records_keep_declaration_order():
    records = to_records()
    assert [r["identifier"] for r in records] == [i for i, _ in ALL_NOTES]
    assert records[0] == {
        "identifier": "Reroll",
        "name": "Reroll",
        "description": notes.Reroll.description,
    }


def test_json_round_trip_reproduces_every_note():
    restored = loads_json(dumps_json())
    assert list(restored) == [i for i, _ in ALL_NOTES]
    for identifier, note in ALL_NOTES:
        assert restored[identifier] == note


def test_absent_description_survives_as_null():
    text = dumps_json([("Lethal", Note("Lethal"))])
    assert json.loads(text)[0]["description"] is None
    assert loads_json(text)["Lethal"].description is None


def test_accepts_mapping_input():
    records = to_records({"Brutal": notes.Brutal})
    assert records == [
        {"identifier": "Brutal", "name": "Brutal", "description": "Opponent can not do norm parries."}
    ]


@pytest.mark.parametrize(
    "records",
    [
        ["Reroll"],
        [{"name": "Reroll", "description": "x"}],
        [{"identifier": "", "name": "Reroll"}],
        [{"identifier": "Reroll", "name": 3}],
        [{"identifier": "Reroll", "name": "Reroll", "description": ["x"]}],
        [
            {"identifier": "Reroll", "name": "Reroll"},
            {"identifier": "Reroll", "name": "Again"},
        ],
    ],
)
def test_from_records_rejects_malformed(records):
    with pytest.raises(NoteExportError):
        from_records(records)


@pytest.mark.parametrize("text", ["{not json", '{"identifier": "Reroll"}'])
def test_loads_json_rejects_bad_documents(text):
    with pytest.raises(NoteExportError):
        loads_json(text)


def test_export_and_import_file(tmp_path):
    path = export_json(tmp_path / "out" / "rule_notes.json")
    assert path.exists()
    restored = import_json(path)
    assert restored["Durable"] == notes.Durable
    assert restored["Dummy"] == Note("", "")


def test_import_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        import_json(tmp_path / "missing.json")


def test_markdown_groups_sections():
    md = to_markdown()
    assert md.startswith("# Rule notes")
    assert md.index("## Kill Team") < md.index("## World of Tanks")
    assert f"- **Stun**: {notes.StunMelee.description}" in md
    assert "(Dummy)" not in md


def test_markdown_placeholders_and_missing_description():
    md = to_markdown(
        [("Dummy", notes.Dummy), ("Lethal", Note("Lethal"))],
        include_placeholders=True,
    )
    assert "- **(Dummy)**" in md
    assert "- **Lethal**" in md
    assert "## Other" in md
