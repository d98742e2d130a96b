import json
import logging
import os
from copy import deepcopy
from pathlib import Path

from core.notes import SECTIONS

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.getenv("DICESIM_DATA_DIR", "data"))
SETTINGS_FILE = DATA_DIR / "user_settings.json"

DEFAULT_SETTINGS = {
    "sections": list(SECTIONS),
    "show_placeholders": False,
    "search_in_descriptions": True,
}


def load_settings(path=None):
    """Load saved user settings, merged with defaults."""
    settings_file = Path(path) if path else SETTINGS_FILE
    merged = deepcopy(DEFAULT_SETTINGS)
    if not settings_file.exists():
        return merged

    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            loaded = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", settings_file, e)
        return merged

    if not isinstance(loaded, dict):
        logger.warning("Ignoring settings file %s: expected an object", settings_file)
        return merged

    for k, v in loaded.items():
        if k in ("show_placeholders", "search_in_descriptions"):
            merged[k] = bool(v)
        else:
            merged[k] = v

    # Keep only sections that still exist, in catalog order.
    sections = merged.get("sections")
    if not isinstance(sections, list):
        sections = list(SECTIONS)
    merged["sections"] = [s for s in SECTIONS if s in sections]

    return merged


def save_settings(settings: dict, path=None):
    settings_file = Path(path) if path else SETTINGS_FILE
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    with open(settings_file, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
