"""Application state shared by the CLI and the TUI.

A single `AppStore` owns the scanned skills, the loading/error flags, the
persisted preferences and the UI filters. All changes go through its
methods; readers get copies so a scan in progress is never half visible.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, List, Optional

from .models import ScanResult, Skill, SkillLibrary, UserPreferences
from .preferences import VIEWS, PreferencesStore
from .scanner import LibraryScanner

logger = logging.getLogger(__name__)


class AppStore:
    """Shared mutable state with explicit mutation entry points."""

    def __init__(
        self,
        preferences: Optional[UserPreferences] = None,
        preferences_store: Optional[PreferencesStore] = None,
        current_view: str = "welcome",
    ):
        self._lock = threading.Lock()
        self._skills: List[Skill] = []
        self._scan_generation = 0

        self.preferences = preferences or UserPreferences()
        self.preferences_store = preferences_store
        self.is_loading = False
        self.error: Optional[str] = None
        self.last_scan: Optional[ScanResult] = None

        self.selected_skill_id: Optional[str] = None
        self.search_query = ""
        self.filter_format: Optional[str] = None
        self.filter_tags: List[str] = []
        self.current_view = current_view

    @classmethod
    def load(cls, preferences_store: Optional[PreferencesStore] = None) -> "AppStore":
        """Restore persisted preferences and view."""
        preferences_store = preferences_store or PreferencesStore()
        prefs, view = preferences_store.load()
        return cls(preferences=prefs, preferences_store=preferences_store, current_view=view)

    def save(self) -> None:
        """Persist preferences and the current view (skills are never stored)."""
        if self.preferences_store is None:
            return
        self.preferences_store.save(self.preferences, self.current_view)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def rescan(
        self,
        scanner: Optional[LibraryScanner] = None,
        parallel: bool = False,
        libraries: Optional[List[SkillLibrary]] = None,
    ) -> ScanResult:
        """Scan all active libraries now, replacing the current skill list.

        If another rescan starts before this one finishes, only the newest
        result is kept; an older result is returned but never applied.
        """
        scanner = scanner or LibraryScanner()
        libraries = list(libraries if libraries is not None else self.preferences.libraries)

        with self._lock:
            self._scan_generation += 1
            generation = self._scan_generation
            self.is_loading = True
            self.error = None

        try:
            result = scanner.scan_all(libraries, parallel=parallel)
        except Exception as e:
            logger.exception("Scanning error")
            result = ScanResult(errors=[f"Scanning error: {e}"])

        with self._lock:
            if generation != self._scan_generation:
                logger.debug("Discarding result of superseded scan #%d", generation)
                return result
            self._skills = list(result.skills)
            self.last_scan = result
            self.error = result.last_error
            self.is_loading = False

        return result

    def dismiss_error(self) -> None:
        self.error = None

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    @property
    def skills(self) -> List[Skill]:
        with self._lock:
            return list(self._skills)

    def set_skills(self, skills: Optional[List[Skill]]) -> None:
        with self._lock:
            self._skills = list(skills or [])

    def add_skill(self, skill: Optional[Skill]) -> None:
        """Append a skill unless one with the same id is already present."""
        if skill is None or not skill.id:
            return
        with self._lock:
            if any(s.id == skill.id for s in self._skills):
                return
            self._skills = self._skills + [skill]

    def update_skill(self, skill_id: str, **updates: Any) -> Optional[Skill]:
        """Apply field updates to a skill and return the updated record."""
        updated = None
        with self._lock:
            skills = []
            for s in self._skills:
                if s.id == skill_id:
                    s = replace(s, **updates)
                    updated = s
                skills.append(s)
            self._skills = skills
        return updated

    def remove_skill(self, skill_id: str) -> None:
        with self._lock:
            self._skills = [s for s in self._skills if s.id != skill_id]
        if self.selected_skill_id == skill_id:
            self.selected_skill_id = None

    def get_skill(self, skill_id: str) -> Optional[Skill]:
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        return None

    def filtered_skills(self) -> List[Skill]:
        """Skills matching the search query, format filter and tag filter."""
        filtered = self.skills

        query = (self.search_query or "").lower().strip()
        if query:
            filtered = [
                s for s in filtered
                if query in (s.title or "").lower() or query in (s.description or "").lower()
            ]

        if self.filter_format:
            filtered = [s for s in filtered if s.format == self.filter_format]

        if self.filter_tags:
            filtered = [s for s in filtered if any(t in (s.tags or []) for t in self.filter_tags)]

        return filtered

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    def set_preferences(self, **updates: Any) -> None:
        self.preferences = replace(self.preferences, **updates)

    def get_library(self, library_id: str) -> Optional[SkillLibrary]:
        for lib in self.preferences.libraries:
            if lib.id == library_id:
                return lib
        return None

    def add_library(self, library: SkillLibrary) -> None:
        libraries = self.preferences.libraries + [library]
        self.preferences = replace(self.preferences, libraries=libraries)

    def remove_library(self, library_id: str) -> bool:
        libraries = [lib for lib in self.preferences.libraries if lib.id != library_id]
        removed = len(libraries) != len(self.preferences.libraries)
        self.preferences = replace(self.preferences, libraries=libraries)
        return removed

    def update_library(self, library_id: str, **updates: Any) -> Optional[SkillLibrary]:
        updated = None
        libraries = []
        for lib in self.preferences.libraries:
            if lib.id == library_id:
                lib = replace(lib, **updates)
                updated = lib
            libraries.append(lib)
        self.preferences = replace(self.preferences, libraries=libraries)
        return updated

    def complete_onboarding(self) -> None:
        self.preferences = replace(self.preferences, has_completed_onboarding=True)
        self.current_view = "dashboard"

    # ------------------------------------------------------------------
    # UI state
    # ------------------------------------------------------------------

    def set_selected_skill(self, skill_id: Optional[str]) -> None:
        self.selected_skill_id = skill_id

    def set_search_query(self, query: Any) -> None:
        self.search_query = query if isinstance(query, str) else ""

    def set_filter_format(self, fmt: Optional[str]) -> None:
        self.filter_format = fmt or None

    def set_filter_tags(self, tags: Any) -> None:
        self.filter_tags = list(tags) if isinstance(tags, (list, tuple)) else []

    def set_current_view(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"view must be one of: {', '.join(VIEWS)}")
        self.current_view = view
