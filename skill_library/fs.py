"""File-system access used by the scanner and the editing helpers.

Every method raises `OSError` on failure; callers decide how far a failure
propagates.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DirEntry:
    """A single directory listing entry."""

    name: str
    is_directory: bool
    is_file: bool


class LocalFileSystem:
    """Reads and writes the local disk."""

    encoding = "utf-8"

    def list_directory(self, path: PathLike) -> List[DirEntry]:
        """List a directory, sorted by name so walks are repeatable."""
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                    is_file = entry.is_file()
                except OSError:
                    # Broken entry (e.g. dangling symlink); neither file nor dir
                    is_dir = is_file = False
                entries.append(DirEntry(name=entry.name, is_directory=is_dir, is_file=is_file))
        entries.sort(key=lambda e: e.name)
        return entries

    def read_text(self, path: PathLike) -> str:
        """Read a file as text; a leading BOM is dropped, undecodable bytes are replaced."""
        return Path(path).read_text(encoding="utf-8-sig", errors="replace")

    def write_text(self, path: PathLike, text: str) -> None:
        """Write text to a file, replacing its content."""
        Path(path).write_text(text, encoding=self.encoding)
