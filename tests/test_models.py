"""Tests for the data models."""

from datetime import datetime
from pathlib import Path

from skill_library.models import ScanResult, Skill, SkillLibrary


def _skill(skill_id: str, fmt: str) -> Skill:
    return Skill(
        id=skill_id,
        title=skill_id,
        description="",
        content="",
        source_path=Path(f"/lib/{skill_id}/SKILL.md"),
        format=fmt,
        last_modified=datetime.now(),
    )


def test_scan_result_groups_by_format() -> None:
    result = ScanResult(skills=[_skill("a", "cursor"), _skill("b", ""), _skill("c", "claude"), _skill("d", "cursor")])

    assert result.total_count == 4
    assert result.formats == ["claude", "cursor", "generic"]
    assert {fmt: [s.id for s in skills] for fmt, skills in result.by_format().items()} == {
        "claude": ["c"],
        "cursor": ["a", "d"],
        "generic": ["b"],
    }


def test_skill_dir() -> None:
    assert _skill("a", "claude").skill_dir == Path("/lib/a")


def test_library_dict_round_trip() -> None:
    lib = SkillLibrary(id="l1", name="One", path=Path("/skills"), format="cursor", is_active=False)

    assert SkillLibrary.from_dict(lib.to_dict()) == lib


def test_library_from_dict_defaults() -> None:
    lib = SkillLibrary.from_dict({"id": "l1", "path": "/home/me/skills"})

    assert lib.name == "skills"
    assert lib.format == "generic"
    assert lib.is_active is True
