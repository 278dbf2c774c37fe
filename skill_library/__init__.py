"""Skill Library.

Browse, edit and organize local skill definitions across assistant
ecosystems, with a CLI and a TUI dashboard.
"""

__version__ = "1.0.0"

from .exceptions import (
    LibraryConfigError,
    LibraryUnavailableError,
    PreferencesError,
    SkillEditError,
    SkillLibraryError,
)
from .identity import generate_id
from .models import ScanResult, Skill, SkillLibrary, UserPreferences
from .parsing import DescriptorMetadata, parse_descriptor
from .preferences import PreferencesStore
from .scanner import LibraryScanner
from .scanners import SkillScanner
from .store import AppStore

__all__ = [
    "AppStore",
    "LibraryScanner",
    "SkillScanner",
    "PreferencesStore",
    "Skill",
    "SkillLibrary",
    "UserPreferences",
    "ScanResult",
    "DescriptorMetadata",
    "parse_descriptor",
    "generate_id",
    "SkillLibraryError",
    "LibraryUnavailableError",
    "LibraryConfigError",
    "SkillEditError",
    "PreferencesError",
]
