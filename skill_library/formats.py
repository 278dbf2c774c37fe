"""Skill format labels.

Formats are an open set of strings. The presets below only drive default
labels and colours; any other value is accepted as a custom ecosystem.
"""

import colorsys
from typing import Dict

PRESET_FORMATS = ("antigravity", "cursor", "claude")
DEFAULT_FORMAT = "generic"

# Standalone rule files always belong to this ecosystem.
CURSOR_FORMAT = "cursor"

PRESET_COLORS: Dict[str, str] = {
    "antigravity": "#A855F7",
    "cursor": "#3B82F6",
    "claude": "#DA7756",
    DEFAULT_FORMAT: "#9CA3AF",
}


def normalize_format(value: str) -> str:
    """Trim and lowercase a user supplied format label."""
    value = (value or "").strip().lower()
    return value or DEFAULT_FORMAT


def detect_format(folder_name: str) -> str:
    """Guess a library format from its folder name."""
    lower = (folder_name or "").lower()
    if "cursor" in lower:
        return "cursor"
    if "claude" in lower:
        return "claude"
    return "antigravity"


def format_color(fmt: str) -> str:
    """Return a stable hex colour for a format.

    Presets get fixed colours; custom formats get a hue derived from a
    string hash so the same label always renders the same way.
    """
    if fmt in PRESET_COLORS:
        return PRESET_COLORS[fmt]

    h = 0
    for ch in fmt:
        h = (ord(ch) + ((h << 5) - h)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 1 << 32
    hue = abs(h) % 360

    r, g, b = colorsys.hls_to_rgb(hue / 360.0, 0.5, 0.6)
    return "#{:02X}{:02X}{:02X}".format(round(r * 255), round(g * 255), round(b * 255))
