"""Content normalization for section equality checks."""

from __future__ import annotations

from docdelta.models import Section


def normalize_content(text: str) -> str:
    """Return *text* with unified line endings and no trailing whitespace.

    ``\\r\\n`` becomes ``\\n``; whitespace at the very end of the string is
    removed.  Interior whitespace, including a lone ``\\r``, is left alone.
    """
    return text.replace("\r\n", "\n").rstrip()


def content_matches(a: str, b: str) -> bool:
    """Return ``True`` if *a* and *b* are equal once normalized.

    >>> content_matches("# Intro\\r\\n\\r\\nText", "# Intro\\n\\nText\\n\\n")
    True
    >>> content_matches("a  b", "a b")
    False
    """
    return normalize_content(a) == normalize_content(b)


def is_blank_body(section: Section) -> bool:
    """Return ``True`` if *section* has nothing but whitespace below its heading."""
    return not section.body.strip()
