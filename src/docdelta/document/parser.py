"""Split Markdown text into an ordered list of heading-delimited sections.

The parser works line by line and only understands what it needs to:

* ATX headings -- one to six ``#`` characters, whitespace, then text;
* fenced code blocks, so that ``# comment`` lines inside a shell snippet
  do not start a section.

Every other construct is opaque text that belongs to the enclosing
section.  Section boundaries are byte-exact: joining the ``raw_content`` of
all sections reproduces the document body.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from docdelta.config import DocDeltaConfig
from docdelta.models import ParsedDocument, Section

from .frontmatter import split_front_matter

_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(\S.*)$")

_FENCE_OPEN_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")
_FENCE_CLOSE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*$")


@dataclass(frozen=True)
class _Heading:
    offset: int
    level: int
    title: str


def _iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, line)`` for every line, line terminators removed."""
    offset = 0
    for line in text.split("\n"):
        yield offset, line.rstrip("\r")
        offset += len(line) + 1


def _find_headings(text: str, skip_fenced_code: bool) -> list[_Heading]:
    headings: list[_Heading] = []
    fence: str | None = None

    for offset, line in _iter_lines(text):
        if skip_fenced_code:
            if fence is not None:
                close = _FENCE_CLOSE_RE.match(line)
                if close and close.group(1)[0] == fence[0] and len(close.group(1)) >= len(fence):
                    fence = None
                continue
            opened = _FENCE_OPEN_RE.match(line)
            if opened:
                fence = opened.group(1)
                continue

        match = _HEADING_RE.match(line)
        if match:
            headings.append(
                _Heading(
                    offset=offset,
                    level=len(match.group(1)),
                    title=match.group(2).strip(),
                )
            )
    return headings


def split_sections(body: str, *, skip_fenced_code: bool = True) -> list[Section]:
    """Split *body* (front matter already removed) into sections.

    The first element is always the preamble: the text before the first
    heading, possibly empty.
    """
    headings = _find_headings(body, skip_fenced_code)

    first = headings[0].offset if headings else len(body)
    sections = [Section(title=None, level=0, raw_content=body[:first], order=0)]

    for index, heading in enumerate(headings):
        end = headings[index + 1].offset if index + 1 < len(headings) else len(body)
        sections.append(
            Section(
                title=heading.title,
                level=heading.level,
                raw_content=body[heading.offset:end],
                order=index + 1,
            )
        )
    return sections


def parse_sections(content: str, *, config: DocDeltaConfig | None = None) -> ParsedDocument:
    """Parse *content* into front matter and ordered sections.

    Parameters
    ----------
    content:
        Raw Markdown text.
    config:
        Parsing options; defaults apply when omitted.

    Returns
    -------
    ParsedDocument
        Never fails for any string input.  Unterminated front matter is
        kept as body text, and the preamble section is present even when
        empty.
    """
    cfg = config or DocDeltaConfig()
    front_matter, body = split_front_matter(content, decode=cfg.parse_front_matter_yaml)
    return ParsedDocument(
        front_matter=front_matter,
        sections=split_sections(body, skip_fenced_code=cfg.skip_fenced_code),
    )
