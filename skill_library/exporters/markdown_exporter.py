"""Markdown Exporter - Human-readable catalog of scanned skills"""

from datetime import datetime
from pathlib import Path
from typing import List

from ..models import ScanResult, Skill


class MarkdownExporter:
    """Export scan results as Markdown documentation"""

    def __init__(self, include_details: bool = True, include_toc: bool = True):
        self.include_details = include_details
        self.include_toc = include_toc

    def export_scan_result(self, result: ScanResult) -> str:
        """Export full scan result to Markdown"""
        lines = []
        groups = result.by_format()

        # Header
        lines.append("# Skill Library")
        lines.append("")
        lines.append(f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}*")
        lines.append("")

        # Summary
        lines.append("## Summary")
        lines.append("")
        lines.append(f"**Total Skills:** {result.total_count}")
        lines.append("")
        lines.append("| Format | Count |")
        lines.append("|--------|-------|")
        for fmt, skills in groups.items():
            lines.append(f"| {fmt} | {len(skills)} |")
        lines.append("")

        # Table of Contents
        if self.include_toc and groups:
            lines.append("## Table of Contents")
            lines.append("")
            for fmt in groups:
                lines.append(f"- [{fmt}](#{self._anchor(fmt)})")
            lines.append("")

        for fmt, skills in groups.items():
            lines.append(f"## {fmt}")
            lines.append("")
            lines.extend(self._format_skills_table(skills))
            lines.append("")

            if self.include_details:
                for skill in sorted(skills, key=lambda s: s.title.lower()):
                    lines.extend(self._format_skill_detail(skill))

        # Errors
        if result.errors:
            lines.append("## Errors")
            lines.append("")
            for error in result.errors:
                lines.append(f"- {error}")
            lines.append("")

        return "\n".join(lines)

    def export_to_file(self, result: ScanResult, output_path: Path):
        """Export to a Markdown file"""
        md_str = self.export_scan_result(result)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(md_str)

    def _format_skills_table(self, skills: List[Skill]) -> List[str]:
        """Format skills as a table"""
        lines = []
        lines.append("| Title | ID | Description |")
        lines.append("|-------|----|-------------|")

        for skill in sorted(skills, key=lambda s: s.title.lower()):
            desc = (skill.description[:50] + "...") if len(skill.description) > 50 else skill.description
            lines.append(f"| {self._cell(skill.title)} | `{skill.id}` | {self._cell(desc)} |")

        return lines

    def _format_skill_detail(self, skill: Skill) -> List[str]:
        """Format detailed skill information"""
        lines = []
        lines.append(f"### {skill.title}")
        lines.append("")

        if skill.description:
            lines.append(f"> {skill.description}")
            lines.append("")

        lines.append(f"- **ID:** `{skill.id}`")
        lines.append(f"- **Format:** {skill.format}")
        lines.append(f"- **Path:** `{skill.source_path}`")
        if skill.tags:
            lines.append(f"- **Tags:** {', '.join(skill.tags)}")

        lines.append("")
        return lines

    def _cell(self, text: str) -> str:
        """Escape pipes so table cells stay intact"""
        return text.replace("|", "\\|")

    def _anchor(self, heading: str) -> str:
        return "-".join(heading.lower().split())
