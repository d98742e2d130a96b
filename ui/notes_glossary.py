#ui/notes_glossary.py
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import streamlit as st

from core.note_export import dumps_json, to_markdown
from core.notes import NOTE_SECTIONS, SECTIONS, Note, is_placeholder, iter_notes


def note_help(note: Optional[Note]) -> Optional[str]:
    """Tooltip text for a widget's `help=` argument."""
    if note is None or is_placeholder(note):
        return None
    if not note.description:
        return note.name
    return f"**{note.name}**: {note.description}"


def filter_notes(
    query: str = "",
    sections: Optional[Iterable[str]] = None,
    include_placeholders: bool = False,
    search_descriptions: bool = True,
) -> List[Tuple[str, Note]]:
    wanted = set(SECTIONS if sections is None else sections)
    q = (query or "").strip().lower()

    out = []
    for identifier, note in iter_notes(include_placeholders=include_placeholders):
        if NOTE_SECTIONS[identifier] not in wanted:
            continue
        if q:
            haystack = [identifier.lower(), note.name.lower()]
            if search_descriptions and note.description:
                haystack.append(note.description.lower())
            if not any(q in h for h in haystack):
                continue
        out.append((identifier, note))
    return out


def render(settings: dict):
    st.header("Rule notes")

    query = st.text_input(
        "Search",
        key="notes_glossary_query",
        placeholder="reroll, cover, crit...",
    )

    notes = filter_notes(
        query,
        sections=settings.get("sections"),
        include_placeholders=settings.get("show_placeholders", False),
        search_descriptions=settings.get("search_in_descriptions", True),
    )

    if not notes:
        st.info("No rule notes match the current filters.")
        return

    st.caption(f"{len(notes)} note(s)")

    for section in SECTIONS:
        in_section = [(i, n) for i, n in notes if NOTE_SECTIONS[i] == section]
        if not in_section:
            continue
        st.subheader(section)
        for identifier, note in in_section:
            with st.expander(note.name or f"({identifier})", expanded=bool(query)):
                st.markdown(note.description or "_No description._")
                st.caption(f"`{identifier}`")

    col_json, col_md = st.columns(2)
    with col_json:
        st.download_button(
            "Download JSON",
            data=dumps_json(notes),
            file_name="rule_notes.json",
            mime="application/json",
        )
    with col_md:
        st.download_button(
            "Download Markdown",
            data=to_markdown(notes, include_placeholders=settings.get("show_placeholders", False)),
            file_name="rule_notes.md",
            mime="text/markdown",
        )
