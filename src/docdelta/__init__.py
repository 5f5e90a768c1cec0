"""docdelta: section-level diffs of heading-delimited Markdown documents.

Public re-exports
-----------------

* **Entry points:** :func:`create_section_changes_from_import` (async),
  :func:`create_section_changes_from_import_sync`, :func:`plan_section_changes`
* **Document model:** :func:`parse_sections`, :func:`content_matches`,
  :func:`apply_section_change`, :func:`apply_section_changes`
* **Configuration:** :class:`DocDeltaConfig`
* **Errors:** Every :class:`DocDeltaError` subclass and :class:`ErrorCode`
* **Models:** Sections, change records and results

Usage::

    from docdelta import InMemorySectionChangesPersistence
    from docdelta import create_section_changes_from_import_sync

    store = InMemorySectionChangesPersistence()
    result = create_section_changes_from_import_sync(
        draft_id=1,
        doc_id=1,
        old_content="# Introduction\\n\\nOriginal text",
        new_content="# Introduction\\n\\nUpdated text",
        persistence=store,
    )
    result.summary  # "1 section updated"
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from docdelta.config import DEFAULT_FUZZY_THRESHOLD, DocDeltaConfig

# ── Entry points ────────────────────────────────────────────────────────
from docdelta.diff import (
    build_summary,
    create_section_changes_from_import,
    create_section_changes_from_import_sync,
    match_sections,
    plan_section_changes,
)

# ── Document model ──────────────────────────────────────────────────────
from docdelta.document import (
    apply_section_change,
    apply_section_changes,
    content_matches,
    parse_sections,
)

# ── Errors ──────────────────────────────────────────────────────────────
from docdelta.errors import (
    DocDeltaAuthError,
    DocDeltaConflictError,
    DocDeltaError,
    DocDeltaNetworkError,
    DocDeltaNotFoundError,
    DocDeltaPermissionError,
    DocDeltaPersistenceError,
    DocDeltaReplayError,
    DocDeltaServerError,
    DocDeltaValidationError,
    ErrorCode,
)

# ── Models ──────────────────────────────────────────────────────────────
from docdelta.models import (
    ChangeCounts,
    ChangeRecordCreated,
    ChangeRecordInput,
    ChangeType,
    DiffResult,
    FrontMatter,
    MatchKind,
    MatchResult,
    ParsedDocument,
    Section,
    SectionMatch,
)

# ── Persistence ─────────────────────────────────────────────────────────
from docdelta.persistence import (
    AsyncHttpSectionChangesPersistence,
    AsyncInMemorySectionChangesPersistence,
    AsyncSectionChangesPersistence,
    HttpSectionChangesPersistence,
    InMemorySectionChangesPersistence,
    SectionChangesPersistence,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Entry points
    "create_section_changes_from_import",
    "create_section_changes_from_import_sync",
    "plan_section_changes",
    "match_sections",
    "build_summary",
    # Document model
    "parse_sections",
    "content_matches",
    "apply_section_change",
    "apply_section_changes",
    # Configuration
    "DocDeltaConfig",
    "DEFAULT_FUZZY_THRESHOLD",
    # Errors
    "DocDeltaError",
    "ErrorCode",
    "DocDeltaPersistenceError",
    "DocDeltaValidationError",
    "DocDeltaAuthError",
    "DocDeltaPermissionError",
    "DocDeltaNotFoundError",
    "DocDeltaConflictError",
    "DocDeltaServerError",
    "DocDeltaNetworkError",
    "DocDeltaReplayError",
    # Models: documents
    "Section",
    "FrontMatter",
    "ParsedDocument",
    # Models: matching
    "MatchKind",
    "SectionMatch",
    "MatchResult",
    # Models: changes and results
    "ChangeType",
    "ChangeRecordInput",
    "ChangeRecordCreated",
    "ChangeCounts",
    "DiffResult",
    # Persistence
    "SectionChangesPersistence",
    "AsyncSectionChangesPersistence",
    "InMemorySectionChangesPersistence",
    "AsyncInMemorySectionChangesPersistence",
    "HttpSectionChangesPersistence",
    "AsyncHttpSectionChangesPersistence",
]
