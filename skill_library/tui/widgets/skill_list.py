"""Skill List Widget - Table of skills"""

from typing import List, Optional

from rich.text import Text
from textual.message import Message
from textual.widgets import DataTable

from ...formats import format_color
from ...models import Skill


class SkillList(DataTable):
    """A DataTable showing the skills currently visible in the store"""

    class SkillSelected(Message):
        """Sent when a skill is selected"""

        def __init__(self, skill: Skill) -> None:
            self.skill = skill
            super().__init__()

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.skills: List[Skill] = []

    def on_mount(self) -> None:
        """Set up the table columns"""
        self.add_columns("Title", "Format", "Description")
        self.cursor_type = "row"
        self.zebra_stripes = True

    def load_skills(self, skills: List[Skill]) -> None:
        """Show the given skills, sorted by title"""
        self.skills = sorted(skills, key=lambda s: s.title.lower())
        self.clear()

        for skill in self.skills:
            self.add_row(
                skill.title,
                Text(skill.format, style=f"bold {format_color(skill.format)}"),
                skill.description,
                key=skill.id,
            )

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self._post_selected(event.row_key)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        self._post_selected(event.row_key)

    def _post_selected(self, row_key) -> None:
        if row_key is None:
            return
        key = str(row_key.value)
        for skill in self.skills:
            if skill.id == key:
                self.post_message(self.SkillSelected(skill))
                break

    def get_selected_skill(self) -> Optional[Skill]:
        """Get the skill under the cursor"""
        if self.cursor_row is not None and 0 <= self.cursor_row < len(self.skills):
            return self.skills[self.cursor_row]
        return None
