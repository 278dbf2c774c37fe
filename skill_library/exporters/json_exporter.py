"""JSON Exporter - Structured export of scanned skills"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

from .. import __version__
from ..models import ScanResult, Skill


class JSONExporter:
    """Export scan results and skills as structured JSON"""

    def __init__(self, include_content: bool = False, pretty: bool = True):
        self.include_content = include_content
        self.pretty = pretty

    def export_scan_result(self, result: ScanResult) -> str:
        """Export full scan result to JSON"""
        groups = result.by_format()
        data = {
            "version": __version__,
            "generated_at": datetime.now().isoformat(),
            "scan_time": result.scan_time.isoformat() if result.scan_time else None,
            "summary": {
                "total_skills": result.total_count,
                "formats": {fmt: len(skills) for fmt, skills in groups.items()},
            },
            "skills": [self._serialize_skill(s) for s in result.skills],
            "errors": result.errors,
        }

        return self._to_json(data)

    def export_skills(self, skills: List[Skill]) -> str:
        """Export a list of skills to JSON"""
        data = {
            "version": __version__,
            "generated_at": datetime.now().isoformat(),
            "count": len(skills),
            "skills": [self._serialize_skill(s) for s in skills],
        }

        return self._to_json(data)

    def export_to_file(self, result: Union[ScanResult, List[Skill]], output_path: Path):
        """Export to a JSON file"""
        if isinstance(result, ScanResult):
            json_str = self.export_scan_result(result)
        else:
            json_str = self.export_skills(result)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(json_str)

    def _serialize_skill(self, skill: Skill) -> Dict[str, Any]:
        """Serialize a skill to a dictionary"""
        data = {
            "id": skill.id,
            "title": skill.title,
            "description": skill.description,
            "format": skill.format,
            "source_path": str(skill.source_path),
            "tags": list(skill.tags),
            "last_modified": skill.last_modified.isoformat(),
        }

        if self.include_content:
            data["content"] = skill.content

        return data

    def _to_json(self, data: Dict[str, Any]) -> str:
        """Convert to JSON string"""
        if self.pretty:
            return json.dumps(data, indent=2, default=str, ensure_ascii=False)
        return json.dumps(data, default=str, ensure_ascii=False)
