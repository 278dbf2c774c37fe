"""Detail view widget - shows the selected skill."""

from typing import Optional

from rich.console import Group
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import Static

from ...editing import skill_folder_contents
from ...formats import format_color
from ...models import Skill

ACCENT = "#DA7756"


class DetailView(VerticalScroll):
    """Panel showing a skill's metadata, folder and descriptor."""

    DEFAULT_CSS = """
    DetailView {
        width: 100%;
        height: 100%;
        padding: 1;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.current_skill: Optional[Skill] = None

    def compose(self):
        yield Static(id="detail-content")

    def show_skill(self, skill: Skill) -> None:
        """Display details for the given skill."""
        self.current_skill = skill
        self.query_one("#detail-content", Static).update(self._build_content(skill))

    def clear(self, message: Optional[str] = None) -> None:
        """Clear the detail view."""
        self.current_skill = None
        welcome = Text()
        welcome.append("◉ ", style=ACCENT)
        welcome.append(message or "Select a skill to view details", style="dim italic")
        self.query_one("#detail-content", Static).update(welcome)

    def _build_content(self, skill: Skill) -> Panel:
        header = Text()
        header.append(skill.title, style=f"bold {ACCENT}")
        header.append(f" [{skill.format}]", style=format_color(skill.format))

        info_table = Table(show_header=False, box=None, padding=(0, 1))
        info_table.add_column("Key", style="bold")
        info_table.add_column("Value")
        info_table.add_row("ID:", skill.id)
        info_table.add_row("Path:", str(skill.source_path))
        info_table.add_row("Scanned:", skill.last_modified.strftime("%Y-%m-%d %H:%M"))
        if skill.tags:
            info_table.add_row("Tags:", ", ".join(skill.tags))

        items = skill_folder_contents(skill)
        if items:
            folder = ", ".join(i.name + ("/" if i.is_directory else "") for i in items)
            info_table.add_row("Folder:", folder)

        return Panel(
            Group(
                header,
                Text(skill.description, style="italic"),
                Text(""),
                info_table,
                Text(""),
                Markdown(skill.content),
            ),
            border_style=format_color(skill.format),
        )
