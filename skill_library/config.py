"""Load skill libraries from a YAML file.

Accepts either a top-level list or a mapping with a ``libraries`` key:

    libraries:
      - path: ~/skills
        format: claude
      - path: ~/work/.cursor
        name: Work rules
        active: false
"""

from pathlib import Path
from typing import Any, List

import yaml

from .exceptions import LibraryConfigError
from .formats import detect_format, normalize_format
from .identity import generate_id
from .models import SkillLibrary


def load_libraries_file(path: Path) -> List[SkillLibrary]:
    """Parse a libraries YAML file into `SkillLibrary` records."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise LibraryConfigError(f"Cannot read libraries file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LibraryConfigError(f"Invalid YAML in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("libraries")
    if data is None:
        return []
    if not isinstance(data, list):
        raise LibraryConfigError(f"{path}: expected a list of libraries")

    base_dir = Path(path).parent
    return [_parse_entry(entry, idx, base_dir) for idx, entry in enumerate(data)]


def _parse_entry(entry: Any, idx: int, base_dir: Path) -> SkillLibrary:
    if isinstance(entry, str):
        entry = {"path": entry}
    if not isinstance(entry, dict) or not entry.get("path"):
        raise LibraryConfigError(f"Library #{idx + 1} must have a 'path'")

    lib_path = Path(str(entry["path"])).expanduser()
    if not lib_path.is_absolute():
        lib_path = base_dir / lib_path
    lib_path = lib_path.absolute()

    raw_format = entry.get("format")
    fmt = normalize_format(str(raw_format)) if raw_format else detect_format(lib_path.name)

    return SkillLibrary(
        id=str(entry.get("id") or generate_id(lib_path)),
        name=str(entry.get("name") or lib_path.name),
        path=lib_path,
        format=fmt,
        is_active=bool(entry.get("active", True)),
    )
