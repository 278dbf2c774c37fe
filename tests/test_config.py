"""Tests for the YAML libraries file."""

from pathlib import Path

import pytest

from skill_library.config import load_libraries_file
from skill_library.exceptions import LibraryConfigError
from skill_library.identity import generate_id


def test_mapping_with_libraries_key(tmp_path: Path) -> None:
    config = tmp_path / "libraries.yaml"
    config.write_text(
        """libraries:
  - path: skills
    format: Claude
  - path: /opt/rules
    name: Team rules
    active: false
    id: team
"""
    )

    libraries = load_libraries_file(config)

    first, second = libraries
    assert first.path == tmp_path / "skills"
    assert first.name == "skills"
    assert first.format == "claude"
    assert first.is_active is True
    assert first.id == generate_id(tmp_path / "skills")

    assert second.path == Path("/opt/rules")
    assert second.name == "Team rules"
    assert second.is_active is False
    assert second.id == "team"


def test_list_of_strings_detects_format(tmp_path: Path) -> None:
    config = tmp_path / "libraries.yml"
    config.write_text("- .cursor\n- my-claude-skills\n- plain\n")

    formats = [lib.format for lib in load_libraries_file(config)]

    assert formats == ["cursor", "claude", "antigravity"]


def test_empty_file(tmp_path: Path) -> None:
    config = tmp_path / "libraries.yaml"
    config.write_text("")

    assert load_libraries_file(config) == []


def test_entry_without_path(tmp_path: Path) -> None:
    config = tmp_path / "libraries.yaml"
    config.write_text("- name: nothing\n")

    with pytest.raises(LibraryConfigError, match="must have a 'path'"):
        load_libraries_file(config)


def test_invalid_yaml(tmp_path: Path) -> None:
    config = tmp_path / "libraries.yaml"
    config.write_text("libraries: [unclosed\n")

    with pytest.raises(LibraryConfigError, match="Invalid YAML"):
        load_libraries_file(config)


def test_wrong_shape(tmp_path: Path) -> None:
    config = tmp_path / "libraries.yaml"
    config.write_text("libraries: 42\n")

    with pytest.raises(LibraryConfigError, match="expected a list"):
        load_libraries_file(config)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LibraryConfigError, match="Cannot read"):
        load_libraries_file(tmp_path / "absent.yaml")
