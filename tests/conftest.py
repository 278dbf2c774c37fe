"""Shared pytest fixtures for skill-library tests."""

from pathlib import Path

import pytest

from skill_library.models import SkillLibrary
from skill_library.preferences import PreferencesStore
from skill_library.store import AppStore


def _write_skill(skill_dir: Path, name: str, description: str = "A skill for testing") -> Path:
    """Create a skill directory with a SKILL.md descriptor."""
    skill_dir.mkdir(parents=True, exist_ok=True)
    skill_md = skill_dir / "SKILL.md"
    skill_md.write_text(f"""---
name: "{name}"
description: "{description}"
---

# {name}

Body text.
""")
    return skill_md


@pytest.fixture
def write_skill():
    """Factory that writes a SKILL.md into a directory."""
    return _write_skill


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    """Create an empty library folder."""
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def sample_skill(library_root: Path) -> Path:
    """Create a sample skill with auxiliary folders."""
    skill_dir = library_root / "sample-skill"
    _write_skill(skill_dir, "Sample Skill", "A sample skill for testing")

    (skill_dir / "scripts").mkdir()
    (skill_dir / "scripts" / "run.py").write_text("print('hello')\n")
    (skill_dir / "examples").mkdir()

    return skill_dir


@pytest.fixture
def library(library_root: Path) -> SkillLibrary:
    return SkillLibrary(id="lib1", name="Skills", path=library_root, format="claude")


@pytest.fixture
def state_home(tmp_path: Path) -> Path:
    """Directory used as the persisted state home."""
    home = tmp_path / "state"
    home.mkdir()
    return home


@pytest.fixture
def store(state_home: Path, library: SkillLibrary) -> AppStore:
    """Store with one configured library and file-backed preferences."""
    app_store = AppStore(preferences_store=PreferencesStore(state_home / "preferences.json"))
    app_store.add_library(library)
    return app_store
