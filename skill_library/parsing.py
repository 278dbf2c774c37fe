"""Descriptor parser - extracts title and description from `SKILL.md` text."""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

DEFAULT_TITLE = "Untitled Skill"
DEFAULT_DESCRIPTION = "No description"

MAX_DESCRIPTION_LENGTH = 120
ELLIPSIS = "..."

HEADER_DELIMITER = "---"

_NAME_RE = re.compile(r"^name:\s*(.*?)\s*$")
_DESCRIPTION_RE = re.compile(r"^description:\s*(.*?)\s*$")
_HEADING_RE = re.compile(r"^#+\s+(\S.*?)\s*$")


@dataclass(frozen=True)
class DescriptorMetadata:
    """Title and description recovered from a descriptor."""

    title: str
    description: str


def parse_descriptor(
    content: str,
    default_title: str = DEFAULT_TITLE,
    placeholder: str = DEFAULT_DESCRIPTION,
) -> DescriptorMetadata:
    """Extract title and description from descriptor content.

    The header block (`---` ... `---` at the very start) wins; any field it
    does not supply falls back to the body: the first Markdown heading for
    the title and the first non-blank, non-heading line for the description.

    Args:
        content: Raw descriptor text.
        default_title: Title used when nothing better is found.
        placeholder: Description used when nothing better is found.

    Returns:
        A `DescriptorMetadata`; this never raises.
    """
    lines = [line.rstrip("\r") for line in (content or "").split("\n")]
    header, body = _split_header(lines)

    title: Optional[str] = None
    description: Optional[str] = None

    if header is not None:
        title = _first_header_value(header, _NAME_RE)
        description = _first_header_value(header, _DESCRIPTION_RE)

    if title is None:
        title = _first_heading(body)
    if description is None:
        description = _first_text_line(body)

    title = title or default_title
    description = truncate_description(description or "") or placeholder

    return DescriptorMetadata(title=title, description=description)


def truncate_description(text: str, limit: int = MAX_DESCRIPTION_LENGTH) -> str:
    """Cut text to `limit` characters, ending with an ellipsis when shortened."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def strip_quotes(value: str) -> str:
    """Remove one layer of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def _split_header(lines: List[str]) -> Tuple[Optional[List[str]], List[str]]:
    """Return (header lines, body lines); header is None when absent."""
    if not lines or lines[0] != HEADER_DELIMITER:
        return None, lines

    for idx in range(1, len(lines)):
        if lines[idx] == HEADER_DELIMITER:
            return lines[1:idx], lines[idx + 1 :]

    # Unterminated block is plain text
    return None, lines


def _first_header_value(header: List[str], pattern: "re.Pattern[str]") -> Optional[str]:
    for line in header:
        match = pattern.match(line)
        if match:
            value = strip_quotes(match.group(1).strip()).strip()
            return value or None
    return None


def _first_heading(lines: List[str]) -> Optional[str]:
    for line in lines:
        match = _HEADING_RE.match(line)
        if match:
            return match.group(1)
    return None


def _first_text_line(lines: List[str]) -> Optional[str]:
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return stripped
    return None
