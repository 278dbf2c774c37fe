"""Create, save and delete skills on disk.

These helpers perform *real* mutations: new skill folders are created from a
template, saved content is written back to the descriptor and deleting a
skill removes its whole folder.
"""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .exceptions import SkillEditError
from .fs import LocalFileSystem
from .identity import generate_id
from .models import Skill
from .parsing import DEFAULT_DESCRIPTION, DEFAULT_TITLE, parse_descriptor
from .scanners.skills import DESCRIPTOR_FILENAME, STANDALONE_FILENAME

SKILL_SUBDIRS = ("scripts", "examples", "resources")

SKILL_TEMPLATE = """---
name: "{name}"
description: "Describe what this skill does"
---

# {name}

## Overview
A newly created skill.

## Usage
Describe how to use this skill.
"""


@dataclass
class SkillFolderItem:
    """A file or folder inside a skill directory."""

    name: str
    path: Path
    is_directory: bool
    children: List["SkillFolderItem"] = field(default_factory=list)


def slugify(name: str) -> str:
    """Folder name for a new skill: lowercase, non-alphanumerics become `-`."""
    return re.sub(r"[^a-z0-9]", "-", name.lower())


def create_skill(
    library_path: Path,
    name: str,
    library_format: str = "antigravity",
    fs: Optional[LocalFileSystem] = None,
) -> Skill:
    """Create a skill folder with the standard layout and a template descriptor."""
    fs = fs or LocalFileSystem()
    name = (name or "").strip()
    if not name:
        raise SkillEditError("Skill name must not be empty.")

    skill_dir = Path(library_path) / slugify(name)
    descriptor = skill_dir / DESCRIPTOR_FILENAME
    if descriptor.exists():
        raise SkillEditError(f"Skill already exists: {descriptor}")

    content = SKILL_TEMPLATE.format(name=name)
    try:
        for sub in SKILL_SUBDIRS:
            (skill_dir / sub).mkdir(parents=True, exist_ok=True)
        fs.write_text(descriptor, content)
    except OSError as e:
        raise SkillEditError(f"Failed to create skill '{name}': {e}") from e

    source_path = descriptor.absolute()
    meta = parse_descriptor(content, default_title=name, placeholder=DEFAULT_DESCRIPTION)
    return Skill(
        id=generate_id(source_path),
        title=meta.title,
        description=meta.description,
        content=content,
        source_path=source_path,
        format=library_format,
        last_modified=datetime.now(),
    )


def save_skill_content(
    skill: Skill, content: str, fs: Optional[LocalFileSystem] = None
) -> Skill:
    """Write new descriptor content and return the skill with refreshed metadata."""
    fs = fs or LocalFileSystem()
    try:
        fs.write_text(skill.source_path, content)
    except OSError as e:
        raise SkillEditError(f"Failed to write skill file {skill.source_path}: {e}") from e

    meta = parse_descriptor(content, default_title=DEFAULT_TITLE)
    return replace(
        skill,
        content=content,
        title=meta.title,
        description=meta.description,
        last_modified=datetime.now(),
    )


def delete_skill(skill: Skill) -> None:
    """Delete a skill from disk.

    Directory skills are removed with their whole folder. A standalone rule
    file lives directly in a library folder, so only the file goes.
    """
    path = skill.source_path
    if not path.exists():
        raise SkillEditError(f"Path not found: {path}")

    try:
        if path.name.lower() == STANDALONE_FILENAME:
            path.unlink()
        else:
            shutil.rmtree(path.parent)
    except OSError as e:
        raise SkillEditError(f"Failed to delete skill {path}: {e}") from e


def skill_folder_contents(
    skill: Skill, fs: Optional[LocalFileSystem] = None
) -> List[SkillFolderItem]:
    """List the skill folder, including one level inside each subfolder.

    Directories come first, then files, each sorted by name. Unreadable
    folders list as empty.
    """
    fs = fs or LocalFileSystem()
    skill_dir = skill.skill_dir

    try:
        entries = fs.list_directory(skill_dir)
    except OSError:
        return []

    items: List[SkillFolderItem] = []
    for entry in entries:
        item = SkillFolderItem(
            name=entry.name,
            path=skill_dir / entry.name,
            is_directory=entry.is_directory,
        )
        if entry.is_directory:
            try:
                children = fs.list_directory(item.path)
            except OSError:
                children = []
            item.children = [
                SkillFolderItem(
                    name=child.name,
                    path=item.path / child.name,
                    is_directory=child.is_directory,
                )
                for child in children
            ]
        items.append(item)

    return sorted(items, key=lambda i: (not i.is_directory, i.name.lower()))
