"""Front matter detection.

A document may open with a metadata block::

    ---
    title: Getting started
    ---

The block is split off before sectioning and never becomes a section.
Anything that does not look like a complete block (no closing delimiter,
text before the opening delimiter) is left in the body untouched.
"""

from __future__ import annotations

import re
from typing import Any

import yaml

from docdelta.models import FrontMatter

_BOM = "\ufeff"

# Opening "---" line, optional content, closing "---" line; a single line
# break after the closing delimiter belongs to the block.
_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?:(?P<raw>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


def _decode(raw: str) -> dict[str, Any] | None:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError:
        return None
    return data if isinstance(data, dict) else None


def split_front_matter(
    content: str, *, decode: bool = True,
) -> tuple[FrontMatter | None, str]:
    """Split *content* into its front matter and the remaining body.

    Parameters
    ----------
    content:
        Raw document text.  A leading UTF-8 BOM is ignored.
    decode:
        Decode the block as YAML into :attr:`FrontMatter.data`.

    Returns
    -------
    tuple[FrontMatter | None, str]
        The front matter (``None`` when absent or unterminated) and the
        body that follows it.  Without front matter the body is *content*
        minus any BOM.
    """
    if content.startswith(_BOM):
        content = content[len(_BOM):]

    match = _FRONT_MATTER_RE.match(content)
    if match is None:
        return None, content

    raw = match.group("raw") or ""
    data = _decode(raw) if decode else None
    return FrontMatter(raw=raw, data=data), content[match.end():]
