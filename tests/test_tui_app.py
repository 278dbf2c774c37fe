from __future__ import annotations

from pathlib import Path

import skill_library.tui.app as tui_app
from skill_library.exceptions import SkillEditError
from skill_library.store import AppStore


class _DummyFormatFilter:
    def __init__(self) -> None:
        self.formats = None
        self.active = "unset"
        self.formats_by_id = {"format-filter-all": None, "format-filter-1-0-claude": "claude"}

    def set_formats(self, formats, active=None) -> None:
        self.formats = formats
        self.active = active

    def mark_active(self, fmt) -> None:
        self.active = fmt


class _DummySkillList:
    def __init__(self) -> None:
        self.skills = []
        self.focused = False

    def load_skills(self, skills) -> None:
        self.skills = list(skills)

    def get_selected_skill(self):
        return self.skills[0] if self.skills else None

    def focus(self) -> None:
        self.focused = True


class _DummyStatsPanel:
    def __init__(self) -> None:
        self.args = None

    def update_stats(self, result, library_count, active_count) -> None:
        self.args = (result, library_count, active_count)


class _DummyErrorBanner:
    def __init__(self) -> None:
        self.message = "unset"

    def show_error(self, message) -> None:
        self.message = message


class _DummyDetailView:
    def __init__(self) -> None:
        self.message = None
        self.cleared = False
        self.last_skill = None

    def clear(self, message=None) -> None:
        self.cleared = True
        self.message = message

    def show_skill(self, skill) -> None:
        self.last_skill = skill


class _DummySearch:
    focused = False

    def focus(self) -> None:
        self.focused = True


class _DummyButton:
    def __init__(self, button_id: str):
        self.id = button_id


class _PressedEvent:
    def __init__(self, button_id: str):
        self.button = _DummyButton(button_id)


def _make_app(store: AppStore):
    """Create an instance without running Textual's App init."""
    app = object.__new__(tui_app.SkillLibraryTUI)
    app.store = store
    app._pending_delete_id = None

    widgets = {
        "#format-filter": _DummyFormatFilter(),
        "#skill-list": _DummySkillList(),
        "#stats": _DummyStatsPanel(),
        "#error-banner": _DummyErrorBanner(),
        "#detail-view": _DummyDetailView(),
        "#search": _DummySearch(),
    }

    def _query_one(selector: str, cls=None):
        _ = cls
        if selector in widgets:
            return widgets[selector]
        raise AssertionError(f"unexpected selector: {selector}")

    notifications = []
    app.query_one = _query_one  # type: ignore[attr-defined]
    app.notify = lambda message, **kwargs: notifications.append((message, kwargs.get("severity")))  # type: ignore[attr-defined]
    app.exit = lambda: None  # type: ignore[attr-defined]
    return app, widgets, notifications


def test_tui_show_results_and_handlers(store: AppStore, sample_skill: Path) -> None:
    app, widgets, notifications = _make_app(store)

    # Exercise the results path the background scan ends with.
    store.rescan()
    tui_app.SkillLibraryTUI._show_results(app)
    assert [s.title for s in widgets["#skill-list"].skills] == ["Sample Skill"]
    assert widgets["#format-filter"].formats == ["claude"]
    assert widgets["#stats"].args[1:] == (1, 1)
    assert widgets["#error-banner"].message is None
    assert widgets["#detail-view"].cleared is True
    assert notifications[-1][0] == "Loaded 1 skills"

    # Exercise search handler.
    class _SearchEvent:
        query = "nothing matches"

    tui_app.SkillLibraryTUI.on_search_bar_search_changed(app, _SearchEvent())
    assert widgets["#skill-list"].skills == []
    assert widgets["#detail-view"].message == "No skills match the current filters."

    _SearchEvent.query = ""
    tui_app.SkillLibraryTUI.on_search_bar_search_changed(app, _SearchEvent())
    assert len(widgets["#skill-list"].skills) == 1

    # Exercise skill selection handler.
    skill = store.skills[0]

    class _SelectEvent:
        pass

    _SelectEvent.skill = skill
    tui_app.SkillLibraryTUI.on_skill_list_skill_selected(app, _SelectEvent())
    assert widgets["#detail-view"].last_skill == skill
    assert store.selected_skill_id == skill.id

    # Exercise format filter buttons.
    tui_app.SkillLibraryTUI.on_button_pressed(app, _PressedEvent("format-filter-1-0-claude"))
    assert store.filter_format == "claude"
    assert widgets["#format-filter"].active == "claude"
    assert len(widgets["#skill-list"].skills) == 1

    tui_app.SkillLibraryTUI.on_button_pressed(app, _PressedEvent("format-filter-all"))
    assert store.filter_format is None

    # Exercise keybinding actions.
    tui_app.SkillLibraryTUI.action_focus_search(app)
    assert widgets["#search"].focused is True
    tui_app.SkillLibraryTUI.action_focus_list(app)
    assert widgets["#skill-list"].focused is True
    tui_app.SkillLibraryTUI.action_quit(app)


def test_tui_refresh_uses_background_scan(store: AppStore) -> None:
    app, _, _ = _make_app(store)
    calls = []
    app._scan_in_background = lambda: calls.append(True)  # type: ignore[attr-defined]

    tui_app.SkillLibraryTUI.action_refresh(app)
    tui_app.SkillLibraryTUI.on_button_pressed(app, _PressedEvent("refresh-button"))

    assert calls == [True, True]


def test_tui_mount_without_libraries() -> None:
    app, widgets, _ = _make_app(AppStore())
    def _no_scan() -> None:
        raise AssertionError("should not scan")

    app._scan_in_background = _no_scan  # type: ignore[attr-defined]

    tui_app.SkillLibraryTUI.on_mount(app)

    assert "No libraries configured" in widgets["#detail-view"].message


def test_tui_shows_and_dismisses_scan_error(store: AppStore, tmp_path: Path) -> None:
    from skill_library.models import SkillLibrary

    store.add_library(SkillLibrary(id="gone", name="Gone", path=tmp_path / "gone"))
    app, widgets, _ = _make_app(store)

    store.rescan()
    tui_app.SkillLibraryTUI._show_results(app)
    assert "'Gone'" in widgets["#error-banner"].message

    tui_app.SkillLibraryTUI.action_dismiss_error(app)
    assert widgets["#error-banner"].message is None
    assert store.error is None


def test_tui_stale_format_filter_is_reset(store: AppStore, sample_skill: Path) -> None:
    store.set_filter_format("cursor")
    app, widgets, _ = _make_app(store)

    store.rescan()
    tui_app.SkillLibraryTUI._show_results(app)

    assert store.filter_format is None
    assert widgets["#format-filter"].active is None


def test_tui_delete_requires_confirmation(store: AppStore, sample_skill: Path) -> None:
    app, widgets, notifications = _make_app(store)
    store.rescan()
    tui_app.SkillLibraryTUI._show_results(app)

    tui_app.SkillLibraryTUI.action_delete_skill(app)
    assert sample_skill.exists()
    assert notifications[-1] == ("Press d again to delete 'Sample Skill'", "warning")

    tui_app.SkillLibraryTUI.action_delete_skill(app)
    assert not sample_skill.exists()
    assert store.skills == []
    assert widgets["#skill-list"].skills == []
    assert notifications[-1][0] == "Deleted 'Sample Skill'"

    tui_app.SkillLibraryTUI.action_delete_skill(app)
    assert notifications[-1] == ("No skill selected.", "warning")


def test_tui_delete_failure_is_reported(store: AppStore, sample_skill: Path, monkeypatch) -> None:
    app, _, notifications = _make_app(store)
    store.rescan()
    tui_app.SkillLibraryTUI._show_results(app)

    def _fail(skill):
        raise SkillEditError("disk is read-only")

    monkeypatch.setattr(tui_app, "delete_skill", _fail)

    tui_app.SkillLibraryTUI.action_delete_skill(app)
    tui_app.SkillLibraryTUI.action_delete_skill(app)

    assert notifications[-1] == ("disk is read-only", "error")
    assert len(store.skills) == 1


def test_tui_search_dismiss_focuses_list(store: AppStore) -> None:
    app, widgets, _ = _make_app(store)

    tui_app.SkillLibraryTUI.on_search_bar_dismissed(app, object())

    assert widgets["#skill-list"].focused is True
