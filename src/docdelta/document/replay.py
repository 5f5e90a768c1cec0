"""Replay recorded section changes onto a document.

Change records carry enough context to be re-applied later: the old text
of the affected section (``base_content``), its title, and its
``/sections/<i>`` path.  The target is located by that context in the
same order of preference, so a record still finds its section after
earlier changes have shifted indices around.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from docdelta.config import DocDeltaConfig
from docdelta.errors import DocDeltaReplayError
from docdelta.models import ChangeRecordInput, ChangeType, Section
from docdelta.observability import get_logger, log_fields

from .frontmatter import split_front_matter
from .normalize import content_matches
from .parser import split_sections

log = get_logger("docdelta.replay")

_PATH_RE = re.compile(r"^/sections/(\d+)$")


def _path_index(path: str | None, sections: list[Section]) -> int | None:
    if not path:
        return None
    match = _PATH_RE.match(path)
    if match is None:
        return None
    index = int(match.group(1))
    return index if index < len(sections) else None


def _title_index(title: str | None, sections: list[Section]) -> int | None:
    if title is None:
        return None
    for section in sections[1:]:
        if section.title == title:
            return section.order
    return None


def _base_index(base: str | None, sections: list[Section]) -> int | None:
    if not base:
        return None
    for section in sections:
        if section.raw_content == base:
            return section.order
    for section in sections:
        if content_matches(section.raw_content, base):
            return section.order
    return None


def _locate(change: ChangeRecordInput, sections: list[Section]) -> int | None:
    if change.change_type is ChangeType.INSERT_AFTER:
        if change.reference_section_title is None and change.path is None:
            return 0
        index = _title_index(change.reference_section_title, sections)
        return index if index is not None else _path_index(change.path, sections)

    for index in (
        _base_index(change.base_content, sections),
        _title_index(change.section_title, sections),
        _path_index(change.path, sections),
    ):
        if index is not None:
            return index
    return None


def _join(parts: list[str]) -> str:
    """Concatenate section texts, keeping a blank line before each heading."""
    out: list[str] = []
    last = len(parts) - 1
    for i, part in enumerate(parts):
        if i < last and part and not part.endswith("\n"):
            part += "\n\n"
        out.append(part)
    return "".join(out)


def apply_section_change(
    content: str,
    change: ChangeRecordInput,
    *,
    config: DocDeltaConfig | None = None,
) -> str:
    """Apply a single recorded change to *content* and return the result.

    Front matter is carried over verbatim.  Inserts without any anchor
    land directly after the preamble.

    Raises
    ------
    DocDeltaReplayError
        If the target section cannot be found.
    """
    cfg = config or DocDeltaConfig()
    _, body = split_front_matter(content, decode=False)
    prefix = content[: len(content) - len(body)]
    sections = split_sections(body, skip_fenced_code=cfg.skip_fenced_code)

    index = _locate(change, sections)
    if index is None:
        raise DocDeltaReplayError(
            f"Cannot locate the target section for {change.change_type.value} change",
            context={
                "change_type": change.change_type.value,
                "section_title": change.section_title,
                "reference_section_title": change.reference_section_title,
                "path": change.path,
            },
        )

    parts = [section.raw_content for section in sections]
    if change.change_type is ChangeType.UPDATE:
        parts[index] = change.content
    elif change.change_type is ChangeType.INSERT_AFTER:
        parts.insert(index + 1, change.content)
    elif index == 0:
        # The preamble always exists; deleting it only clears it.
        parts[0] = ""
    else:
        del parts[index]

    log.debug(
        "section change applied",
        extra=log_fields(
            "apply_section_change",
            change_type=change.change_type.value,
            section_index=index,
        ),
    )
    return prefix + _join(parts)


def _replay_order(records: Iterable[ChangeRecordInput]) -> list[ChangeRecordInput]:
    records = list(records)
    updates = [r for r in records if r.change_type is ChangeType.UPDATE]
    inserts = [r for r in records if r.change_type is ChangeType.INSERT_AFTER]
    deletes = [r for r in records if r.change_type is ChangeType.DELETE]
    # Inserts sharing an anchor each land directly after it, so applying
    # them last-first restores their original order.
    return updates + inserts[::-1] + deletes


def apply_section_changes(
    content: str,
    records: Iterable[ChangeRecordInput],
    *,
    config: DocDeltaConfig | None = None,
) -> str:
    """Replay a whole diff onto *content*.

    Updates are applied first, then inserts in reverse order, then deletes.
    """
    for record in _replay_order(records):
        content = apply_section_change(content, record, config=config)
    return content
