"""Document model: front matter, section parsing, normalization and replay.

Exports
-------
parse_sections
    Split raw text into front matter and ordered sections.
split_front_matter
    Detach a leading ``---`` metadata block.
content_matches
    Line-ending and trailing-whitespace insensitive equality.
apply_section_change / apply_section_changes
    Replay recorded changes onto a document.
"""

from .frontmatter import split_front_matter
from .normalize import content_matches, is_blank_body, normalize_content
from .parser import parse_sections, split_sections
from .replay import apply_section_change, apply_section_changes

__all__ = [
    "apply_section_change",
    "apply_section_changes",
    "content_matches",
    "is_blank_body",
    "normalize_content",
    "parse_sections",
    "split_front_matter",
    "split_sections",
]
