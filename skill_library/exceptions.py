"""Exceptions raised by the skill library."""


class SkillLibraryError(RuntimeError):
    """Base class for skill library errors."""


class LibraryUnavailableError(SkillLibraryError):
    """Raised when a library root can't be listed."""


class LibraryConfigError(SkillLibraryError):
    """Raised when a libraries file is malformed."""


class SkillEditError(SkillLibraryError):
    """Raised when creating, saving or deleting a skill fails."""


class PreferencesError(SkillLibraryError):
    """Raised when preferences can't be written."""
