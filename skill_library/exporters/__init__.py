"""Exporters for the skill library."""

from .json_exporter import JSONExporter
from .markdown_exporter import MarkdownExporter

__all__ = ["JSONExporter", "MarkdownExporter"]
