"""Persistent preferences - library roots, theme and onboarding state.

Stored as JSON under a fixed namespace key so the file can be shared with
other state in the future:

    {"skill_tools_v1": {"preferences": {...}, "currentView": "dashboard"}}
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .exceptions import PreferencesError
from .models import UserPreferences

logger = logging.getLogger(__name__)

STORAGE_NAMESPACE = "skill_tools_v1"
HOME_ENV_VAR = "SKILL_LIBRARY_HOME"
PREFERENCES_FILENAME = "preferences.json"

VIEWS = ("welcome", "dashboard", "editor", "settings")


def default_home() -> Path:
    """Return the directory holding persisted state."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".skill-library"


class PreferencesStore:
    """Load and save `UserPreferences` as JSON."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or default_home() / PREFERENCES_FILENAME

    def load(self) -> Tuple[UserPreferences, str]:
        """Restore preferences and the last view.

        A missing or unreadable file yields defaults; it never raises.
        """
        state = self._read_state()
        if state is None:
            return UserPreferences(), "welcome"

        prefs_data = state.get("preferences")
        prefs = UserPreferences.from_dict(prefs_data if isinstance(prefs_data, dict) else {})

        view = state.get("currentView")
        if view not in VIEWS:
            view = "dashboard" if prefs.has_completed_onboarding else "welcome"
        return prefs, view

    def save(self, preferences: UserPreferences, current_view: str = "dashboard") -> None:
        """Persist preferences, keeping other namespaces in the file intact."""
        document = self._read_document() or {}
        document[STORAGE_NAMESPACE] = {
            "preferences": preferences.to_dict(),
            "currentView": current_view,
        }

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise PreferencesError(f"Could not save preferences to {self.path}: {e}") from e

    def _read_state(self) -> Optional[Dict[str, Any]]:
        document = self._read_document()
        if not document:
            return None
        state = document.get(STORAGE_NAMESPACE)
        return state if isinstance(state, dict) else None

    def _read_document(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return None
        return data if isinstance(data, dict) else None
