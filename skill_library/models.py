"""Data models for skills, skill libraries and user preferences
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .formats import DEFAULT_FORMAT


@dataclass
class Skill:
    """A skill discovered on disk"""

    id: str  # Derived from source_path, see identity.generate_id
    title: str
    description: str
    content: str  # Raw descriptor text, exactly as read
    source_path: Path
    format: str  # "antigravity" | "cursor" | "claude" | any custom label
    last_modified: datetime  # Assigned at scan time, not the file mtime
    tags: List[str] = field(default_factory=list)

    @property
    def skill_dir(self) -> Path:
        """Directory holding the descriptor"""
        return self.source_path.parent


@dataclass
class SkillLibrary:
    """A configured directory that is searched for skills"""

    id: str
    name: str
    path: Path
    format: str = DEFAULT_FORMAT
    is_active: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "path": str(self.path),
            "format": self.format,
            "isActive": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkillLibrary":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or Path(data["path"]).name),
            path=Path(data["path"]),
            format=str(data.get("format") or DEFAULT_FORMAT),
            is_active=bool(data.get("isActive", True)),
        )


@dataclass
class UserPreferences:
    """Preferences persisted across sessions"""

    libraries: List[SkillLibrary] = field(default_factory=list)
    theme: str = "system"  # "dark" | "light" | "system"
    has_completed_onboarding: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "libraries": [lib.to_dict() for lib in self.libraries],
            "theme": self.theme,
            "hasCompletedOnboarding": self.has_completed_onboarding,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserPreferences":
        libraries = []
        for raw in data.get("libraries") or []:
            if isinstance(raw, dict) and raw.get("id") and raw.get("path"):
                libraries.append(SkillLibrary.from_dict(raw))

        theme = data.get("theme")
        if theme not in {"dark", "light", "system"}:
            theme = "system"

        return cls(
            libraries=libraries,
            theme=theme,
            has_completed_onboarding=bool(data.get("hasCompletedOnboarding", False)),
        )


@dataclass
class ScanResult:
    """Result of scanning all active libraries"""

    skills: List[Skill] = field(default_factory=list)
    scan_time: Optional[datetime] = None
    errors: List[str] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        """Total number of skills scanned"""
        return len(self.skills)

    @property
    def last_error(self) -> Optional[str]:
        """Message of the last library that failed, if any"""
        return self.errors[-1] if self.errors else None

    @property
    def formats(self) -> List[str]:
        """Sorted distinct formats present in the result"""
        return sorted({s.format or DEFAULT_FORMAT for s in self.skills})

    def by_format(self) -> Dict[str, List[Skill]]:
        """Group skills by format, keeping scan order inside each group"""
        groups: Dict[str, List[Skill]] = {fmt: [] for fmt in self.formats}
        for skill in self.skills:
            groups[skill.format or DEFAULT_FORMAT].append(skill)
        return groups
