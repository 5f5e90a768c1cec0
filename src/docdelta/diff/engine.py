"""Entry points: diff two document versions and record the section changes.

Typical use when a new version of a document is imported into a draft::

    from docdelta import create_section_changes_from_import

    result = await create_section_changes_from_import(
        draft_id=42,
        doc_id=7,
        old_content=doc.content,
        new_content=imported_markdown,
        persistence=store,
    )
    if result.has_changes:
        print(result.summary)   # "2 sections updated, 1 section added"
"""

from __future__ import annotations

import json
import sys
import time

from docdelta.config import DocDeltaConfig
from docdelta.document.normalize import content_matches
from docdelta.document.parser import parse_sections
from docdelta.models import ChangeRecordInput, DiffResult
from docdelta.observability import get_logger, log_fields, resolve_metrics
from docdelta.persistence.base import AsyncSectionChangesPersistence, SectionChangesPersistence

from .classifier import classify_changes
from .matcher import match_sections
from .recorder import AsyncSectionChangeRecorder, SectionChangeRecorder

log = get_logger("docdelta.diff")


def _dump_plan(records: list[ChangeRecordInput]) -> None:
    """Write the planned records to stderr."""
    print(
        json.dumps([r.to_payload() for r in records], indent=2, ensure_ascii=False),
        file=sys.stderr,
    )


def plan_section_changes(
    draft_id: int,
    doc_id: int,
    old_content: str,
    new_content: str,
    *,
    config: DocDeltaConfig | None = None,
) -> list[ChangeRecordInput]:
    """Compute the section changes turning *old_content* into *new_content*.

    Nothing is persisted.  Identical content (modulo line endings and
    trailing whitespace) short-circuits to an empty list without parsing.

    Returns
    -------
    list[ChangeRecordInput]
        Updates, then inserts, then deletes.
    """
    if content_matches(old_content, new_content):
        return []

    cfg = config or DocDeltaConfig()
    old_doc = parse_sections(old_content, config=cfg)
    new_doc = parse_sections(new_content, config=cfg)
    match = match_sections(old_doc.sections, new_doc.sections, threshold=cfg.fuzzy_threshold)
    records = classify_changes(draft_id, doc_id, match)

    resolve_metrics(cfg).gauge("docdelta.document_sections", len(new_doc.sections))
    log.debug(
        "section changes planned",
        extra=log_fields(
            "plan_section_changes",
            draft_id=draft_id,
            doc_id=doc_id,
            old_sections=len(old_doc.sections),
            new_sections=len(new_doc.sections),
            matched=len(match.pairs),
            records=len(records),
        ),
    )
    if cfg.debug_dump_diff:
        _dump_plan(records)
    return records


def _finish(
    cfg: DocDeltaConfig | None,
    draft_id: int,
    doc_id: int,
    result: DiffResult,
    started: float,
) -> DiffResult:
    elapsed_ms = (time.monotonic() - started) * 1000
    resolve_metrics(cfg).timing("docdelta.diff_duration_ms", elapsed_ms)
    log.info(
        "section changes recorded",
        extra=log_fields(
            "create_section_changes",
            draft_id=draft_id,
            doc_id=doc_id,
            updated=result.counts.updated,
            inserted=result.counts.inserted,
            deleted=result.counts.deleted,
            duration_ms=round(elapsed_ms, 3),
        ),
    )
    return result


def _log_failure(draft_id: int, doc_id: int, exc: Exception) -> None:
    log.warning(
        "recording section changes failed",
        extra=log_fields(
            "create_section_changes",
            draft_id=draft_id,
            doc_id=doc_id,
            error=repr(exc),
        ),
    )


async def create_section_changes_from_import(
    draft_id: int,
    doc_id: int,
    old_content: str,
    new_content: str,
    persistence: AsyncSectionChangesPersistence,
    *,
    config: DocDeltaConfig | None = None,
) -> DiffResult:
    """Diff two document versions and persist one record per section change.

    Parameters
    ----------
    draft_id, doc_id:
        Identifiers stamped on every record.
    old_content, new_content:
        The stored and the imported document text.
    persistence:
        An :class:`~docdelta.persistence.AsyncSectionChangesPersistence`.
        Its ``create_section_change`` coroutine is awaited once per record,
        sequentially, in emission order (updates, inserts, deletes).
    config:
        Package configuration; defaults apply when omitted.

    Returns
    -------
    DiffResult

    Raises
    ------
    Exception
        Whatever the store raises, unchanged.  Records created before the
        failure stay created.
    """
    started = time.monotonic()
    records = plan_section_changes(draft_id, doc_id, old_content, new_content, config=config)
    try:
        result = await AsyncSectionChangeRecorder(persistence, config).record(records)
    except Exception as exc:
        _log_failure(draft_id, doc_id, exc)
        raise
    return _finish(config, draft_id, doc_id, result, started)


def create_section_changes_from_import_sync(
    draft_id: int,
    doc_id: int,
    old_content: str,
    new_content: str,
    persistence: SectionChangesPersistence,
    *,
    config: DocDeltaConfig | None = None,
) -> DiffResult:
    """Synchronous variant of :func:`create_section_changes_from_import`.

    *persistence* is a :class:`~docdelta.persistence.SectionChangesPersistence`.
    """
    started = time.monotonic()
    records = plan_section_changes(draft_id, doc_id, old_content, new_content, config=config)
    try:
        result = SectionChangeRecorder(persistence, config).record(records)
    except Exception as exc:
        _log_failure(draft_id, doc_id, exc)
        raise
    return _finish(config, draft_id, doc_id, result, started)
