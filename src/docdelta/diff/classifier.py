"""Turn a section pairing into typed change records.

Records are emitted in a fixed order -- updates, then inserts, then
deletes -- which is also the order in which they are persisted.
"""

from __future__ import annotations

from docdelta.document.normalize import content_matches, is_blank_body
from docdelta.models import ChangeRecordInput, ChangeType, MatchResult, Section, SectionMatch


def _updates(draft_id: int, doc_id: int, pairs: list[SectionMatch]) -> list[ChangeRecordInput]:
    return [
        ChangeRecordInput(
            draft_id=draft_id,
            doc_id=doc_id,
            change_type=ChangeType.UPDATE,
            section_title=pair.old.title,
            content=pair.new.raw_content,
            path=pair.old.path,
            base_content=pair.old.raw_content,
        )
        for pair in pairs
        if not content_matches(pair.old.raw_content, pair.new.raw_content)
    ]


def _inserts(
    draft_id: int,
    doc_id: int,
    pairs: list[SectionMatch],
    unmatched_new: list[Section],
) -> list[ChangeRecordInput]:
    by_new_order = {pair.new.order: pair for pair in pairs}

    records: list[ChangeRecordInput] = []
    for section in unmatched_new:
        anchor: SectionMatch | None = None
        for order in range(section.order - 1, -1, -1):
            if order in by_new_order:
                anchor = by_new_order[order]
                break

        records.append(
            ChangeRecordInput(
                draft_id=draft_id,
                doc_id=doc_id,
                change_type=ChangeType.INSERT_AFTER,
                section_title=section.title,
                content=section.raw_content,
                reference_section_title=anchor.new.title if anchor else None,
                path=anchor.old.path if anchor else None,
            )
        )
    return records


def _deletes(draft_id: int, doc_id: int, unmatched_old: list[Section]) -> list[ChangeRecordInput]:
    # Sections with nothing below their heading (blank preambles, leftovers
    # of removed front matter) are not worth a delete record.
    return [
        ChangeRecordInput(
            draft_id=draft_id,
            doc_id=doc_id,
            change_type=ChangeType.DELETE,
            section_title=section.title,
            content=section.raw_content,
            path=section.path,
            base_content=section.raw_content,
        )
        for section in unmatched_old
        if not is_blank_body(section)
    ]


def classify_changes(draft_id: int, doc_id: int, match: MatchResult) -> list[ChangeRecordInput]:
    """Build the change records described by *match*.

    * A matched pair whose content differs yields an ``update`` carrying
      the new text under the old title.
    * An unmatched new section yields an ``insert-after`` anchored to the
      nearest preceding new section that has a counterpart.  The reference
      title is ``None`` when no such section exists or when the anchor is
      the preamble.
    * An unmatched old section yields a ``delete`` unless its body is blank.

    Parameters
    ----------
    draft_id, doc_id:
        Identifiers stamped on every record.
    match:
        Result of :func:`~docdelta.diff.matcher.match_sections`.

    Returns
    -------
    list[ChangeRecordInput]
        Updates (old order), inserts (new order), deletes (old order).
    """
    return [
        *_updates(draft_id, doc_id, match.pairs),
        *_inserts(draft_id, doc_id, match.pairs, match.unmatched_new),
        *_deletes(draft_id, doc_id, match.unmatched_old),
    ]
