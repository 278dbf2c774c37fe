"""Main TUI application for the skill library."""

import re
from typing import Dict, List, Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Static

from ..editing import delete_skill
from ..exceptions import SkillEditError
from ..formats import format_color
from ..models import ScanResult
from ..store import AppStore
from .widgets import DetailView, SearchBar, SkillList


class FormatFilter(Horizontal):
    """Filter buttons for the formats present in the current scan."""

    DEFAULT_CSS = """
    FormatFilter {
        height: 3;
        width: 100%;
        padding: 0 1;
    }

    FormatFilter Button {
        min-width: 10;
        margin: 0 1 0 0;
    }

    FormatFilter Button.active {
        background: $accent;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.formats_by_id: Dict[str, Optional[str]] = {"format-filter-all": None}
        self._generation = 0

    def compose(self) -> ComposeResult:
        yield Button("All", id="format-filter-all", classes="active")

    def set_formats(self, formats: List[str], active: Optional[str] = None) -> None:
        """Rebuild the buttons for a new set of formats."""
        for button in list(self.query(Button)):
            if button.id != "format-filter-all":
                button.remove()

        self._generation += 1
        self.formats_by_id = {"format-filter-all": None}
        for idx, fmt in enumerate(formats):
            # Custom labels may not be valid widget ids; removed buttons may
            # still be detaching, so ids carry the rebuild generation
            button_id = f"format-filter-{self._generation}-{idx}-{re.sub(r'[^A-Za-z0-9_-]', '_', fmt)}"
            self.formats_by_id[button_id] = fmt
            self.mount(Button(fmt, id=button_id))

        self.mark_active(active)

    def mark_active(self, fmt: Optional[str]) -> None:
        for button in self.query(Button):
            button.remove_class("active")
            if self.formats_by_id.get(button.id) == fmt:
                button.add_class("active")


class StatsPanel(Static):
    """Panel showing skill counts per format and library state."""

    DEFAULT_CSS = """
    StatsPanel {
        height: auto;
        min-height: 3;
        width: 100%;
        background: $surface;
        padding: 0 1;
    }
    """

    def update_stats(self, result: Optional[ScanResult], library_count: int, active_count: int) -> None:
        orange = "#DA7756"
        total = result.total_count if result else 0

        line1 = (
            f"[bold {orange}]◉[/bold {orange}] [bold]Skills:[/bold] [{orange}]{total}[/{orange}]"
            f"  │  Libraries: [{orange}]{active_count}[/{orange}]/{library_count} active"
        )
        lines = [line1]

        if result and result.skills:
            parts = []
            for fmt, skills in result.by_format().items():
                color = format_color(fmt)
                parts.append(f"[{color}]{fmt}[/{color}]: {len(skills)}")
            lines.append("  │  ".join(parts))

        if result and result.scan_time:
            lines.append(f"[dim]Last scan: {result.scan_time.strftime('%H:%M:%S')}[/dim]")

        self.update("\n".join(lines))


class ErrorBanner(Static):
    """Shows the last scan error until dismissed."""

    DEFAULT_CSS = """
    ErrorBanner {
        height: auto;
        width: 100%;
        background: $error 30%;
        padding: 0 1;
        display: none;
    }
    """

    def show_error(self, message: Optional[str]) -> None:
        if message:
            self.update(f"[bold red]⚠ {message}[/bold red]  [dim](x to dismiss)[/dim]")
            self.display = True
        else:
            self.update("")
            self.display = False


class SkillLibraryTUI(App):
    """Terminal UI dashboard for local skill libraries."""

    TITLE = "◉ Skill Library"
    SUB_TITLE = "Skills across ecosystems"

    CSS = """
    #sidebar {
        width: 55%;
    }

    #search-row {
        height: 3;
    }

    #detail-panel {
        width: 45%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "focus_list", "Focus List"),
        Binding("/", "focus_search", "Search"),
        Binding("r", "refresh", "Rescan"),
        Binding("x", "dismiss_error", "Dismiss Error"),
        Binding("d", "delete_skill", "Delete"),
    ]

    def __init__(self, *args, **kwargs):
        self.store: AppStore = kwargs.pop("store", None) or AppStore.load()
        super().__init__(*args, **kwargs)
        self._pending_delete_id: Optional[str] = None

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Header()
        yield ErrorBanner(id="error-banner")

        with Horizontal(id="main-container"):
            with Vertical(id="sidebar"):
                with Horizontal(id="search-row"):
                    yield SearchBar(id="search")
                    yield Button("Rescan", id="refresh-button")
                yield FormatFilter(id="format-filter")
                yield SkillList(id="skill-list")
                yield StatsPanel(id="stats")

            with Vertical(id="detail-panel"):
                yield DetailView(id="detail-view")

        yield Footer()

    def on_mount(self) -> None:
        """Scan on startup."""
        if not self.store.preferences.libraries:
            detail_view = self.query_one("#detail-view", DetailView)
            detail_view.clear(message="No libraries configured. Add one with 'skill-library library add PATH'.")
            return
        self.notify("Scanning libraries...")
        self._scan_in_background()

    @work(thread=True, exclusive=True)
    def _scan_in_background(self) -> None:
        self.store.rescan(parallel=True)
        self.call_from_thread(self._show_results)

    def _show_results(self) -> None:
        store = self.store
        result = store.last_scan

        if store.filter_format and result and store.filter_format not in result.formats:
            store.set_filter_format(None)

        format_filter = self.query_one("#format-filter", FormatFilter)
        format_filter.set_formats(result.formats if result else [], active=store.filter_format)

        self._refresh_list()

        libraries = store.preferences.libraries
        stats = self.query_one("#stats", StatsPanel)
        stats.update_stats(result, len(libraries), sum(1 for lib in libraries if lib.is_active))

        self.query_one("#error-banner", ErrorBanner).show_error(store.error)
        self.query_one("#detail-view", DetailView).clear()

        self.notify(f"Loaded {result.total_count if result else 0} skills")

    def _refresh_list(self) -> None:
        skill_list = self.query_one("#skill-list", SkillList)
        visible = self.store.filtered_skills()
        skill_list.load_skills(visible)

        if not visible and self.store.skills:
            detail_view = self.query_one("#detail-view", DetailView)
            detail_view.clear(message="No skills match the current filters.")

    def on_search_bar_search_changed(self, event: SearchBar.SearchChanged) -> None:
        """Handle search input changes."""
        self.store.set_search_query(event.query)
        self._refresh_list()

    def on_search_bar_dismissed(self, event: SearchBar.Dismissed) -> None:
        self.action_focus_list()

    def on_skill_list_skill_selected(self, event: SkillList.SkillSelected) -> None:
        """Handle skill selection."""
        self.store.set_selected_skill(event.skill.id)
        self._pending_delete_id = None
        detail_view = self.query_one("#detail-view", DetailView)
        detail_view.show_skill(event.skill)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle rescan and filter button presses."""
        button_id = event.button.id
        if not button_id:
            return

        if button_id == "refresh-button":
            self.action_refresh()
            return

        if button_id.startswith("format-filter-"):
            format_filter = self.query_one("#format-filter", FormatFilter)
            fmt = format_filter.formats_by_id.get(button_id)
            self.store.set_filter_format(fmt)
            format_filter.mark_active(fmt)
            self._refresh_list()

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()

    def action_focus_search(self) -> None:
        self.query_one("#search", SearchBar).focus()

    def action_focus_list(self) -> None:
        self.query_one("#skill-list", SkillList).focus()

    def action_refresh(self) -> None:
        """Rescan all active libraries."""
        self.notify("Rescanning libraries...")
        self._scan_in_background()

    def action_dismiss_error(self) -> None:
        self.store.dismiss_error()
        self.query_one("#error-banner", ErrorBanner).show_error(None)

    def action_delete_skill(self) -> None:
        """Delete the selected skill; the first press asks for confirmation."""
        skill_list = self.query_one("#skill-list", SkillList)
        skill = skill_list.get_selected_skill()
        if not skill:
            self.notify("No skill selected.", severity="warning")
            return

        if self._pending_delete_id != skill.id:
            self._pending_delete_id = skill.id
            self.notify(f"Press d again to delete '{skill.title}'", severity="warning")
            return

        self._pending_delete_id = None
        try:
            delete_skill(skill)
        except SkillEditError as e:
            self.notify(str(e), severity="error")
            return

        self.store.remove_skill(skill.id)
        self.notify(f"Deleted '{skill.title}'")
        self._refresh_list()
        self.query_one("#detail-view", DetailView).clear()


def main():
    """Run the TUI application."""
    app = SkillLibraryTUI()
    app.run()


if __name__ == "__main__":
    main()
