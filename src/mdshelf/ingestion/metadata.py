"""Derive titles, descriptions and output ids from Markdown text.

Absent headings or descriptions are normal; each has a defined fallback.
"""

from __future__ import annotations

import re

HEADING_MARKER = "#"
ID_JOINER = "_"

_TITLE_PATTERN = re.compile(r"^#[ \t]+(\S.*?)\s*$", re.MULTILINE)
_SEPARATOR_PATTERN = re.compile(r"[/\\]")


def extract_title(text: str, fallback: str) -> str:
    """Return the first top-level heading, else ``fallback``."""
    match = _TITLE_PATTERN.search(text)
    return match.group(1) if match else fallback


def extract_description(text: str, *, max_chars: int = 150, ellipsis: str = "...") -> str:
    """Return the first non-blank, non-heading line, truncated.

    The ellipsis is appended whether or not the line was actually cut.
    """
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip() or line.startswith(HEADING_MARKER):
            continue
        return line[:max_chars] + ellipsis
    return ""


def derive_output_id(relative_folder: str, base_name: str) -> str:
    """Flatten the folder path into a page identifier.

    >>> derive_output_id("", "readme")
    'readme'
    >>> derive_output_id("notes/2024", "plan")
    'notes_2024_plan'
    """
    if not relative_folder:
        return base_name
    return _SEPARATOR_PATTERN.sub(ID_JOINER, relative_folder) + ID_JOINER + base_name
