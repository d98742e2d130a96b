"""Glossary export for the rule notes.

JSON shape written by `export_json` / `dumps_json`:

[
  {"identifier": "Reroll", "name": "Reroll", "description": "Ceaseless rerolls 1s. ..."},
  ...
]

Records keep declaration order. `description` is written as-is, so a note
built without one round-trips as null and the placeholder keeps its "".
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from core.notes import (
    NOTE_SECTIONS,
    SECTIONS,
    Note,
    is_placeholder,
    iter_notes,
)

logger = logging.getLogger(__name__)

NoteItems = Iterable[Tuple[str, Note]]


class NoteExportError(ValueError):
    """Raised when exported note data can not be read back."""


def _items(notes: Optional[NoteItems]) -> List[Tuple[str, Note]]:
    if notes is None:
        return list(iter_notes())
    if isinstance(notes, Mapping):
        return list(notes.items())
    return list(notes)


def to_records(notes: Optional[NoteItems] = None) -> List[Dict[str, Optional[str]]]:
    """Flatten notes into {identifier, name, description} records."""
    return [
        {"identifier": identifier, "name": note.name, "description": note.description}
        for identifier, note in _items(notes)
    ]


def from_records(records: Iterable[Any]) -> Dict[str, Note]:
    """Rebuild an identifier -> Note mapping from `to_records` output."""
    out: Dict[str, Note] = {}
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise NoteExportError(f"Record {i} is not an object: {rec!r}")

        identifier = rec.get("identifier")
        name = rec.get("name")
        description = rec.get("description")

        if not isinstance(identifier, str) or not identifier:
            raise NoteExportError(f"Record {i} has no identifier")
        if not isinstance(name, str):
            raise NoteExportError(f"Record {identifier!r} has a non-string name")
        if description is not None and not isinstance(description, str):
            raise NoteExportError(f"Record {identifier!r} has a non-string description")
        if identifier in out:
            raise NoteExportError(f"Duplicate identifier {identifier!r}")

        out[identifier] = Note(name, description)
    return out


def dumps_json(notes: Optional[NoteItems] = None) -> str:
    return json.dumps(to_records(notes), indent=2, ensure_ascii=False)


def loads_json(text: str) -> Dict[str, Note]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise NoteExportError(f"Invalid notes JSON: {e}") from e
    if not isinstance(data, list):
        raise NoteExportError("Notes JSON must be a list of records")
    return from_records(data)


def export_json(path: str | Path, notes: Optional[NoteItems] = None) -> Path:
    """Write the glossary JSON to `path` and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(dumps_json(notes))
    logger.info("Exported rule notes to %s", path)
    return path


def import_json(path: str | Path) -> Dict[str, Note]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Notes export file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return loads_json(f.read())


def to_markdown(
    notes: Optional[NoteItems] = None,
    include_placeholders: bool = False,
) -> str:
    """Render the notes as a rules appendix, one heading per section."""
    grouped: Dict[str, List[Tuple[str, Note]]] = {}
    for identifier, note in _items(notes):
        if not include_placeholders and is_placeholder(note):
            continue
        section = NOTE_SECTIONS.get(identifier, "Other")
        grouped.setdefault(section, []).append((identifier, note))

    order = [s for s in SECTIONS if s in grouped] + [s for s in grouped if s not in SECTIONS]

    lines: List[str] = ["# Rule notes", ""]
    for section in order:
        lines.append(f"## {section}")
        lines.append("")
        for identifier, note in grouped[section]:
            title = note.name or f"({identifier})"
            if note.description:
                lines.append(f"- **{title}**: {note.description}")
            else:
                lines.append(f"- **{title}**")
        lines.append("")
    return "\n".join(lines)
