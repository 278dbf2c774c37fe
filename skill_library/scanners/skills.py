"""Skill scanner - walks a library root and extracts skills from descriptors."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..exceptions import LibraryUnavailableError
from ..formats import CURSOR_FORMAT
from ..fs import DirEntry, LocalFileSystem
from ..identity import generate_id
from ..models import Skill
from ..parsing import DEFAULT_DESCRIPTION, parse_descriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_FILENAME = "SKILL.md"
STANDALONE_FILENAME = ".cursorrules"

MAX_DEPTH = 5

# The only hidden directory that may contain skills
ALLOWED_HIDDEN_DIR = ".agent"
SKIPPED_DIRS = frozenset({"node_modules", "dist", "target", "bin"})

SkillSink = Callable[[Skill], None]


def effective_format(filename: str, library_format: str) -> str:
    """Standalone rule files keep their own format regardless of the library."""
    if filename.lower() == STANDALONE_FILENAME:
        return CURSOR_FORMAT
    return library_format


class SkillScanner:
    """Scan one library root for skills."""

    def __init__(
        self,
        root: Path,
        library_format: str,
        fs: Optional[LocalFileSystem] = None,
        max_depth: int = MAX_DEPTH,
    ):
        self.root = Path(root)
        self.library_format = library_format
        self.fs = fs or LocalFileSystem()
        self.max_depth = max_depth

    def scan(self) -> List[Skill]:
        """Walk the root and return its skills, one per source path."""
        found: Dict[Path, Skill] = {}

        def collect(skill: Skill) -> None:
            found[skill.source_path] = skill

        self.walk(self.root, collect)
        return list(found.values())

    def walk(self, directory: Path, sink: SkillSink, depth: int = 0) -> None:
        """Visit `directory` and emit every skill below it into `sink`.

        A directory holding a descriptor is a leaf: its skill is emitted and
        its subdirectories are not visited.

        Raises:
            LibraryUnavailableError: if the root itself (depth 0) can't be
                listed. Deeper failures are logged and skipped.
        """
        if depth > self.max_depth:
            logger.debug("Depth limit reached, not entering %s", directory)
            return

        entries = self._list_entries(directory, depth)

        descriptor = next(
            (e for e in entries if e.is_file and e.name.upper() == DESCRIPTOR_FILENAME.upper()),
            None,
        )
        if descriptor:
            skill = self._read_skill(directory / descriptor.name)
            if skill:
                sink(skill)
            return

        for entry in entries:
            path = directory / entry.name

            if entry.is_directory:
                if self._should_skip_dir(entry.name):
                    logger.debug("Skipping directory %s", path)
                    continue
                self.walk(path, sink, depth + 1)
            elif entry.is_file and entry.name.lower() == STANDALONE_FILENAME:
                skill = self._read_skill(path)
                if skill:
                    sink(skill)

    def _list_entries(self, directory: Path, depth: int) -> List[DirEntry]:
        try:
            return self.fs.list_directory(directory)
        except OSError as e:
            if depth == 0:
                raise LibraryUnavailableError(f"Cannot read library folder {directory}: {e}") from e
            logger.warning("Error scanning directory %s: %s", directory, e)
            return []

    def _should_skip_dir(self, name: str) -> bool:
        if name.startswith(".") and name != ALLOWED_HIDDEN_DIR:
            return True
        return name in SKIPPED_DIRS

    def _read_skill(self, path: Path) -> Optional[Skill]:
        """Build a skill from a descriptor file, or None if it can't be read."""
        try:
            content = self.fs.read_text(path)
        except OSError as e:
            logger.warning("Failed to read skill file %s: %s", path, e)
            return None

        source_path = Path(path).absolute()
        meta = parse_descriptor(
            content,
            default_title=source_path.stem,
            placeholder=DEFAULT_DESCRIPTION,
        )

        return Skill(
            id=generate_id(source_path),
            title=meta.title,
            description=meta.description,
            content=content,
            source_path=source_path,
            format=effective_format(source_path.name, self.library_format),
            last_modified=datetime.now(),
        )
