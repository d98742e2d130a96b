#ui/sidebar.py
import streamlit as st

from core.notes import SECTIONS, Durable, FeelNoPain
from core.settings_manager import save_settings
from ui.notes_glossary import note_help


def render_sidebar(settings: dict):
    st.sidebar.header("Settings")

    with st.sidebar.expander("📖 Glossary", expanded=True):
        sections = st.multiselect(
            "Rule sets:",
            list(SECTIONS),
            default=[s for s in settings.get("sections", []) if s in SECTIONS],
            key="notes_sections",
        )
        settings["sections"] = sections

        settings["search_in_descriptions"] = st.checkbox(
            "Search descriptions",
            value=settings.get("search_in_descriptions", True),
            key="notes_search_descriptions",
        )
        settings["show_placeholders"] = st.checkbox(
            "Show placeholder notes",
            value=settings.get("show_placeholders", False),
            key="notes_show_placeholders",
        )

    with st.sidebar.expander("🎲 Example tooltips", expanded=False):
        st.caption("Rule notes attach to calculator options like this:")
        st.checkbox("Durable", value=False, key="example_durable", help=note_help(Durable))
        st.checkbox("Feel No Pain", value=False, key="example_fnp", help=note_help(FeelNoPain))

    save_settings(settings)
