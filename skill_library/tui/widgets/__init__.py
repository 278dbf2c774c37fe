"""TUI widgets for the skill library."""

from .detail_view import DetailView
from .search_bar import SearchBar
from .skill_list import SkillList

__all__ = ["SkillList", "DetailView", "SearchBar"]
