"""Scanner modules for skill libraries"""

from .skills import (
    DESCRIPTOR_FILENAME,
    MAX_DEPTH,
    STANDALONE_FILENAME,
    SkillScanner,
    effective_format,
)

__all__ = [
    "SkillScanner",
    "effective_format",
    "DESCRIPTOR_FILENAME",
    "STANDALONE_FILENAME",
    "MAX_DEPTH",
]
