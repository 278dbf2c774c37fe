"""Stable short identifiers for skills derived from their source path."""

from pathlib import Path
from typing import Iterator, Union


def _utf16_code_units(text: str) -> Iterator[int]:
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            yield 0xD800 + (cp >> 10)
            yield 0xDC00 + (cp & 0x3FF)
        else:
            yield cp


def generate_id(path: Union[str, Path]) -> str:
    """Derive a compact hex id from a path.

    Rolling ``h * 31 + unit`` hash over the UTF-16 code units of the path,
    wrapped to a signed 32-bit integer. Deterministic but not collision
    proof; callers treat the last skill seen for an id as the winner.

    Args:
        path: Absolute path of the descriptor file.

    Returns:
        Lowercase hex string without padding.
    """
    h = 0
    for unit in _utf16_code_units(str(path)):
        h = (h * 31 + unit) & 0xFFFFFFFF

    if h >= 0x80000000:
        h -= 1 << 32

    return format(abs(h), "x")
