# app.py
import streamlit as st

from ui.sidebar import render_sidebar
from ui.notes_glossary import render as notes_glossary_render
from core.settings_manager import load_settings, save_settings

st.set_page_config(
    page_title="DiceSim Rule Notes",
    layout="wide",
    initial_sidebar_state="auto",
)

# --- Initialize Settings ---
if "user_settings" not in st.session_state:
    st.session_state.user_settings = load_settings()

settings = st.session_state.user_settings

# Sidebar: rule sets + search options
render_sidebar(settings)

notes_glossary_render(settings)

st.session_state["user_settings"] = settings
save_settings(settings)
