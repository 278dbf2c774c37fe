"""Textual dashboard for the skill library."""

from .app import SkillLibraryTUI

__all__ = ["SkillLibraryTUI"]
