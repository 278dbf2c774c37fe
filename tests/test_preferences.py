"""Tests for preference persistence."""

import json
from pathlib import Path

import pytest

from skill_library.exceptions import PreferencesError
from skill_library.models import SkillLibrary, UserPreferences
from skill_library.preferences import (
    HOME_ENV_VAR,
    STORAGE_NAMESPACE,
    PreferencesStore,
    default_home,
)


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    prefs, view = PreferencesStore(tmp_path / "none.json").load()

    assert prefs == UserPreferences()
    assert view == "welcome"


def test_save_writes_namespaced_document(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "preferences.json"
    prefs = UserPreferences(
        libraries=[SkillLibrary(id="l1", name="One", path=Path("/skills"), format="claude", is_active=False)],
        theme="light",
        has_completed_onboarding=True,
    )

    PreferencesStore(path).save(prefs, "settings")

    document = json.loads(path.read_text())
    state = document[STORAGE_NAMESPACE]
    assert state["currentView"] == "settings"
    assert state["preferences"]["theme"] == "light"
    assert state["preferences"]["hasCompletedOnboarding"] is True
    assert state["preferences"]["libraries"][0] == {
        "id": "l1",
        "name": "One",
        "path": "/skills",
        "format": "claude",
        "isActive": False,
    }
    assert not path.with_suffix(".json.tmp").exists()


def test_round_trip(tmp_path: Path) -> None:
    store = PreferencesStore(tmp_path / "preferences.json")
    prefs = UserPreferences(
        libraries=[SkillLibrary(id="l1", name="One", path=Path("/skills"), format="my-format")],
        theme="dark",
        has_completed_onboarding=True,
    )

    store.save(prefs, "editor")

    assert store.load() == (prefs, "editor")


def test_other_namespaces_are_preserved(tmp_path: Path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({"other_app": {"keep": True}}))

    PreferencesStore(path).save(UserPreferences())

    assert json.loads(path.read_text())["other_app"] == {"keep": True}


def test_corrupt_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text("{not json")

    prefs, view = PreferencesStore(path).load()

    assert prefs == UserPreferences()
    assert view == "welcome"


def test_invalid_values_are_normalized(tmp_path: Path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({
        STORAGE_NAMESPACE: {
            "preferences": {
                "theme": "neon",
                "hasCompletedOnboarding": True,
                "libraries": [{"id": "ok", "path": "/a"}, {"name": "no path"}, "junk"],
            },
            "currentView": "nowhere",
        }
    }))

    prefs, view = PreferencesStore(path).load()

    assert prefs.theme == "system"
    assert [lib.id for lib in prefs.libraries] == ["ok"]
    assert prefs.libraries[0].name == "a"
    assert prefs.libraries[0].format == "generic"
    assert prefs.libraries[0].is_active is True
    assert view == "dashboard"


def test_save_failure_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory")

    with pytest.raises(PreferencesError):
        PreferencesStore(blocker / "preferences.json").save(UserPreferences())


def test_default_home_honours_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path))
    assert default_home() == tmp_path
    assert PreferencesStore().path == tmp_path / "preferences.json"

    monkeypatch.delenv(HOME_ENV_VAR)
    assert default_home() == Path.home() / ".skill-library"
